import pytest
from pydantic import ValidationError
from composable.core.config import Settings


def test_defaults():
    settings = Settings.load(environ={})
    assert settings.TRACE_SINK == "stream"
    assert settings.TRACE_LEVEL == "DEBUG"
    assert settings.HTTP_TIMEOUT == 10.0


def test_load_from_environment():
    settings = Settings.load(
        environ={
            "COMPOSABLE_TRACE_SINK": "logger",
            "COMPOSABLE_TRACE_LEVEL": "info",
            "COMPOSABLE_HTTP_TIMEOUT": "2.5",
            "UNRELATED": "ignored",
        }
    )
    assert settings.TRACE_SINK == "logger"
    assert settings.TRACE_LEVEL == "INFO"
    assert settings.HTTP_TIMEOUT == 2.5


@pytest.mark.parametrize(
    "environ",
    [
        {"COMPOSABLE_TRACE_SINK": "file"},
        {"COMPOSABLE_TRACE_LEVEL": "LOUD"},
        {"COMPOSABLE_HTTP_TIMEOUT": "0"},
    ],
)
def test_invalid_values(environ):
    with pytest.raises(ValidationError):
        Settings.load(environ=environ)
