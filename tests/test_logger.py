import io
import logging

from composable.logger.logger import logger, setup_logger, get_logger


def test_package_logger_configured_once():
    handlers = list(logger.handlers)
    again = setup_logger()
    assert again is logger
    assert logger.handlers == handlers
    # pytest may attach its own capture handlers next to ours
    own = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    assert len(own) == 1
    assert logger.propagate is False


def test_custom_logger_writes_to_stream():
    stream = io.StringIO()
    log = setup_logger("composable_test_stream", level="warning", stream=stream)
    log.info("hidden")
    log.warning("shown")

    assert log.level == logging.WARNING
    output = stream.getvalue()
    assert "hidden" not in output
    assert "composable_test_stream - WARNING - shown" in output


def test_get_logger_is_child():
    child = get_logger("trace")
    assert child.name == "composable.trace"
    assert child.parent is logger
