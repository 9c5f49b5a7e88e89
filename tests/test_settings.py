"""Tests for settings management."""

import pytest

from tile_animator.settings import AppSettings, ConfigError, ConfigVersion


class TestAppSettings:
    """Test settings initialization and basic operations."""

    def test_defaults(self, app_settings: AppSettings) -> None:
        assert app_settings.animation.speed == 1.0
        assert app_settings.animation.start_paused is False
        assert app_settings.animation.tick_interval == 16
        assert app_settings.animation.layers == []
        assert app_settings.version == ConfigVersion.CURRENT.value

    def test_settings_file_path(self, app_settings: AppSettings) -> None:
        assert app_settings.get_settings_file_path().endswith("settings.ini")

    def test_validation_passes_by_default(self, app_settings: AppSettings) -> None:
        result = app_settings.validate()
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []


class TestAnimationSettings:
    """Test animation clock settings."""

    def test_speed_round_trip(self, app_settings: AppSettings) -> None:
        app_settings.animation.speed = 2.5
        assert app_settings.animation.speed == 2.5

    @pytest.mark.parametrize("speed", [0, -1.0, float("nan")])
    def test_invalid_speed_rejected(self, app_settings: AppSettings, speed: float) -> None:
        with pytest.raises(ConfigError):
            app_settings.animation.speed = speed
        assert app_settings.animation.speed == 1.0

    def test_tick_interval_clamped(self, app_settings: AppSettings) -> None:
        app_settings.animation.tick_interval = 0
        assert app_settings.animation.tick_interval == 1
        app_settings.animation.tick_interval = 99999
        assert app_settings.animation.tick_interval == 1000

    def test_layers_round_trip(self, app_settings: AppSettings) -> None:
        app_settings.animation.layers = ["ground", "water"]
        assert app_settings.animation.layers == ["ground", "water"]

    def test_stored_bad_speed_is_validation_error(self, app_settings: AppSettings) -> None:
        app_settings.settings.setValue("animation/speed", -3)

        assert app_settings.animation.speed == 1.0
        result = app_settings.validate()
        assert not result.is_valid
        assert "speed" in result.errors[0]

    def test_slow_tick_is_warning(self, app_settings: AppSettings) -> None:
        app_settings.animation.tick_interval = 250
        result = app_settings.validate()
        assert result.is_valid
        assert len(result.warnings) == 1


class TestLoggingSettings:
    """Test logging settings."""

    def test_defaults(self, app_settings: AppSettings) -> None:
        assert app_settings.logging.console_logging is True
        assert app_settings.logging.console_log_level == "INFO"
        assert app_settings.logging.file_logging is False
        assert app_settings.logging.log_file_path == "logs/tile_animator.csv"

    def test_invalid_level_ignored(self, app_settings: AppSettings) -> None:
        app_settings.logging.console_log_level = "debug"
        app_settings.logging.console_log_level = "LOUD"
        assert app_settings.logging.console_log_level == "DEBUG"

    def test_unknown_stored_level_is_warning(self, app_settings: AppSettings) -> None:
        app_settings.settings.setValue("logging/console_level", "CHATTY")
        result = app_settings.validate()
        assert result.is_valid
        assert any("CHATTY" in w for w in result.warnings)
