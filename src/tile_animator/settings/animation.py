"""
Animation clock settings for tile-animator.
"""

import logging
import math
from typing import TYPE_CHECKING, List, cast

from .types import ConfigError

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


def coerce_speed(value: object) -> float:
    """Convert a speed multiplier to float, rejecting non-finite input.

    Raises:
        ConfigError: If the value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Speed must be a number, got {value!r}")
    speed = float(value)
    if not math.isfinite(speed):
        raise ConfigError(f"Speed must be finite, got {value!r}")
    return speed


def validate_speed(value: object) -> float:
    """Return value as a speed multiplier.

    Raises:
        ConfigError: If the value is not a finite number greater than zero
    """
    speed = coerce_speed(value)
    if speed <= 0:
        raise ConfigError(f"Speed must be greater than zero, got {value!r}")
    return speed


class AnimationSettings:
    """Manages animation clock settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Type-safe float retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return float(cast(str | float, value))
        except (ValueError, TypeError):
            return default

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    def _get_list(self, key: str) -> List[str]:
        """Type-safe list retrieval; INI storage returns one-item lists as str."""
        value = self.settings.value(key, [])
        if isinstance(value, list):
            return [str(item) for item in cast(list[object], value) if item]
        if isinstance(value, str) and value:
            return [value]
        return []

    @property
    def raw_speed(self) -> float:
        """Stored speed multiplier, unvalidated."""
        return self._get_float("animation/speed", 1.0)

    @property
    def speed(self) -> float:
        """Get speed multiplier (falls back to 1.0 if the stored value is invalid)."""
        value = self.raw_speed
        if not math.isfinite(value) or value <= 0:
            logger.warning(f"Invalid stored animation speed {value}, using 1.0")
            return 1.0
        return value

    @speed.setter
    def speed(self, value: float) -> None:
        """Set speed multiplier.

        Raises:
            ConfigError: If value is not a positive finite number
        """
        self.settings.setValue("animation/speed", validate_speed(value))
        self.settings.sync()

    @property
    def start_paused(self) -> bool:
        """Whether the clock starts paused."""
        return self._get_bool("animation/start_paused", False)

    @start_paused.setter
    def start_paused(self, value: bool) -> None:
        self.settings.setValue("animation/start_paused", value)
        self.settings.sync()

    @property
    def tick_interval(self) -> int:
        """Get tick interval in milliseconds (1-1000 ms)."""
        value = self._get_int("animation/tick_interval", 16)
        return max(1, min(1000, value))

    @tick_interval.setter
    def tick_interval(self, value: int) -> None:
        """Set tick interval in milliseconds (1-1000 ms)."""
        validated = max(1, min(1000, value))
        self.settings.setValue("animation/tick_interval", validated)
        self.settings.sync()

    @property
    def layers(self) -> List[str]:
        """Names of layers to animate; empty means every layer."""
        return self._get_list("animation/layers")

    @layers.setter
    def layers(self, value: List[str]) -> None:
        self.settings.setValue("animation/layers", list(value))
        self.settings.sync()
