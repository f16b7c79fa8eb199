"""Core models and settings."""

from composable.core.config import Settings, settings
from composable.core.models import MutableGlass, ImmutableGlass

__all__ = ["Settings", "settings", "MutableGlass", "ImmutableGlass"]
