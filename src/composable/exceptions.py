"""Exception hierarchy for composable.

Errors raised by the functions a caller composes are never wrapped; they
reach the caller unchanged. The classes here cover failures that originate
outside the composed computation: a trace sink that cannot record, or a
remote API that cannot be read.
"""

import typing as tp

__all__ = ["ComposableError", "SinkError", "ApiError"]


class ComposableError(Exception):
    """Base class for errors raised by composable itself."""


class SinkError(ComposableError):
    """Raised when a trace sink fails to record an observation.

    Attributes:
        label: The trace label whose record failed.
    """

    def __init__(self, label: str, cause: tp.Optional[BaseException] = None):
        self.label = label
        self.cause = cause
        super().__init__(f"Trace sink failed to record '{label}': {cause!r}")


class ApiError(ComposableError):
    """Raised when a request made through ``get_from_api`` fails.

    Attributes:
        url: The full URL that was requested.
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Request to {url} failed: {message}")
