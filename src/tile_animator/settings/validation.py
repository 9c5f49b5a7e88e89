"""
Settings validation system for tile-animator.
"""

import logging
import math
from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)

# Tick intervals above this produce visible stutter
SMOOTH_TICK_LIMIT = 100


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        speed = self.settings.animation.raw_speed
        if not math.isfinite(speed) or speed <= 0:
            errors.append(f"Animation speed must be greater than zero: {speed}")

        interval = self.settings.animation.tick_interval
        if interval > SMOOTH_TICK_LIMIT:
            warnings.append(
                f"Tick interval of {interval}ms will make animations stutter"
            )

        level = self.settings.logging.console_log_level
        if level not in VALID_LEVELS:
            warnings.append(f"Unknown console log level: {level}")

        if errors:
            logger.debug(f"Settings validation failed with {len(errors)} errors")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
