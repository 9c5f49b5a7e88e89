"""
Settings package for tile-animator.

This package provides type-safe configuration management using Qt's
QSettings for cross-platform storage.

Usage:
    from tile_animator.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .animation import AnimationSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "AnimationSettings",
    "LoggingSettings",
]
