"""Logging setup for composable."""

from composable.logger.logger import logger, setup_logger, get_logger

__all__ = ["logger", "setup_logger", "get_logger"]
