"""
Core settings management for tile-animator.
"""

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from .animation import AnimationSettings
from .logging import LoggingSettings
from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to animation and logging settings with
    automatic cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: Optional QSettings store (e.g. an INI file); the
                per-user native store is used when omitted
        """
        self.settings = settings if settings is not None else QSettings(
            "tile-animator", "tile_animator"
        )
        self.profile = profile

        # Use profile as a group: tile-animator/tile_animator/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._animation = AnimationSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        if not self.settings.contains("app/version"):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def animation(self) -> AnimationSettings:
        """Access animation clock settings subsystem."""
        return self._animation

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
