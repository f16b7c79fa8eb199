"""Logging for composable.

One handler is installed on the ``composable`` logger. Modules log through
children of it (``composable.trace``, ``composable.api`` ...), which inherit
that handler and level.
"""

import logging
import os
import sys
import typing as tp

__all__ = ["logger", "setup_logger", "get_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "composable",
    level: str | None = None,
    format_string: str | None = None,
    stream: tp.Optional[tp.TextIO] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level name. Falls back to COMPOSABLE_LOG_LEVEL, then
            LOG_LEVEL, then INFO.
        format_string: Custom format string
        stream: Stream for the handler, stdout when omitted

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("COMPOSABLE_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")

    logger = logging.getLogger(name)

    # A second call must not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_logger(suffix: str) -> logging.Logger:
    """Child of the package logger, e.g. ``get_logger("trace")``."""
    return logger.getChild(suffix)


logger = setup_logger()
