"""Tracing for function compositions.

Pure compositions hide their intermediate values. ``trace(label)`` builds an
identity stage that reports the value flowing through it to a
:class:`TraceSink` and hands it on untouched, so it can be dropped anywhere
into a ``compose`` or ``pipe`` sequence without changing the result::

    slugify = compose(
        map_(join("-")),
        trace("after split"),
        map_(split(" ")),
        map_(lower_case),
    )

The value is passed by reference, not copied. A sink that keeps values
around sees later mutations made by whoever else holds them.

A sink that fails to record raises :class:`~composable.exceptions.SinkError`,
which keeps sink failures distinguishable from errors raised by the
composed stages themselves.
"""

import logging
import sys
import threading
import typing as tp
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from composable.core.config import Settings, settings
from composable.exceptions import SinkError
from composable.logger.logger import get_logger

logger = get_logger("trace")

__all__ = [
    "TraceRecord",
    "TraceSink",
    "StreamSink",
    "LoggerSink",
    "MemorySink",
    "trace",
    "get_default_sink",
    "set_default_sink",
]

T = tp.TypeVar("T")


class TraceRecord(BaseModel):
    """A single observation made by a trace stage."""

    label: str = Field(..., description="Label given to trace().")
    value: tp.Any = Field(..., description="The value seen by the stage.")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class TraceSink(ABC):
    """Abstract destination for trace observations."""

    @abstractmethod
    def record(self, label: str, value: tp.Any) -> None:
        """Record that ``value`` passed the stage named ``label``."""
        pass


class StreamSink(TraceSink):
    """Write ``"<label> <value>"`` lines to a text stream."""

    def __init__(self, stream: tp.Optional[tp.TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> tp.TextIO:
        # Resolved lazily so a replaced sys.stdout (e.g. capsys) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def record(self, label: str, value: tp.Any) -> None:
        self.stream.write(f"{label} {value!r}\n")


class LoggerSink(TraceSink):
    """Send observations through a :class:`logging.Logger`."""

    def __init__(
        self,
        log: tp.Optional[logging.Logger] = None,
        level: tp.Union[int, str] = logging.DEBUG,
    ):
        self.log = log if log is not None else logger
        self.level = (
            getattr(logging, level.upper()) if isinstance(level, str) else level
        )

    def record(self, label: str, value: tp.Any) -> None:
        self.log.log(self.level, "%s %r", label, value)


class MemorySink(TraceSink):
    """Keep observations in memory as :class:`TraceRecord` objects."""

    def __init__(self):
        self.records: tp.List[TraceRecord] = []
        self._lock = threading.Lock()

    def record(self, label: str, value: tp.Any) -> None:
        with self._lock:
            self.records.append(TraceRecord(label=label, value=value))

    @property
    def labels(self) -> tp.List[str]:
        return [r.label for r in self.records]

    def clear(self) -> None:
        with self._lock:
            self.records.clear()


def _sink_from_settings(config: Settings) -> TraceSink:
    if config.TRACE_SINK == "logger":
        level = getattr(logging, config.TRACE_LEVEL)
        # The package logger defaults to INFO; let this sink's records through
        if logger.getEffectiveLevel() > level:
            logger.setLevel(level)
        return LoggerSink(logger, level=level)
    return StreamSink()


_default_sink: TraceSink = _sink_from_settings(settings)


def get_default_sink() -> TraceSink:
    """Return the sink used by ``trace`` when none is given."""
    return _default_sink


def set_default_sink(sink: TraceSink) -> TraceSink:
    """Replace the process-wide default sink.

    Args:
        sink: The new default sink.

    Returns:
        The sink that was previously the default, so callers can restore it.

    Raises:
        TypeError: If ``sink`` is not a :class:`TraceSink`.
    """
    global _default_sink
    if not isinstance(sink, TraceSink):
        raise TypeError(f"Expected a TraceSink, got {type(sink).__name__}")
    previous, _default_sink = _default_sink, sink
    return previous


def trace(
    label: str, sink: tp.Optional[TraceSink] = None
) -> tp.Callable[[T], T]:
    """Build an identity stage that reports its input to a sink.

    Args:
        label: Text identifying the point in the composition.
        sink: Where to send observations. When omitted, the default sink at
            call time is used.

    Returns:
        A unary function that records ``(label, value)`` and returns
        ``value`` itself.

    Raises:
        SinkError: From the returned function, if the sink fails to record.
    """

    def traced(value: T) -> T:
        target = sink if sink is not None else _default_sink
        try:
            target.record(label, value)
        except Exception as exc:
            logger.error(f"Trace sink {type(target).__name__} failed for '{label}'")
            raise SinkError(label, exc) from exc
        return value

    traced.__name__ = f"trace({label!r})"
    return traced
