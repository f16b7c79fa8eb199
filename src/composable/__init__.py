"""composable: function composition and tracing utilities."""

from composable.exceptions import ApiError, ComposableError, SinkError
from composable.functional import compose, pipe, trace

__all__ = ["compose", "pipe", "trace", "ComposableError", "SinkError", "ApiError"]
