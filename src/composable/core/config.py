import os
import typing as tp
from pydantic import BaseModel, Field


class Settings(BaseModel):
    TRACE_SINK: tp.Literal["stream", "logger"] = "stream"
    TRACE_LEVEL: tp.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "DEBUG"
    )
    HTTP_TIMEOUT: float = Field(default=10.0, gt=0)

    @classmethod
    def load(cls, environ: tp.Optional[tp.Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        values: tp.Dict[str, tp.Any] = {}
        for field in cls.model_fields:
            key = f"COMPOSABLE_{field}"
            if key in environ:
                values[field] = environ[key]

        if "TRACE_LEVEL" in values:
            values["TRACE_LEVEL"] = values["TRACE_LEVEL"].upper()

        return cls(**values)


settings = Settings.load()
