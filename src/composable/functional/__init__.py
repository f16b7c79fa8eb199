"""Functional primitives for composable.

Composition (``compose`` / ``pipe`` and their async counterparts), tracing,
currying and point-free helpers. Everything here is stateless apart from the
trace sinks, which exist to observe values flowing through a composition.
"""

from composable.functional.composition import (
    identity,
    compose,
    pipe,
    compose_async,
    pipe_async,
)
from composable.functional.trace import (
    TraceRecord,
    TraceSink,
    StreamSink,
    LoggerSink,
    MemorySink,
    trace,
    get_default_sink,
    set_default_sink,
)
from composable.functional.currying import arity, curry, partial_apply, with_count

__all__ = [
    "identity",
    "compose",
    "pipe",
    "compose_async",
    "pipe_async",
    "TraceRecord",
    "TraceSink",
    "StreamSink",
    "LoggerSink",
    "MemorySink",
    "trace",
    "get_default_sink",
    "set_default_sink",
    "arity",
    "curry",
    "partial_apply",
    "with_count",
]
