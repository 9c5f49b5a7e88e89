"""Tests for the Qt animation ticker."""

from typing import Any

from PySide6.QtCore import QCoreApplication

from tile_animator.animation import AnimationTicker, CellRef, GridTileSurface, TileAnimator
from tile_animator.settings import AppSettings


def _animator(water_tileset: dict[str, Any]) -> tuple[TileAnimator, GridTileSurface]:
    surface = GridTileSurface({"main": [[10]]})
    animator = TileAnimator(surface)
    animator.initialize(tileset_defs=[water_tileset])
    return animator, surface


class TestAnimationTicker:
    """Test timer lifecycle and delta dispatch."""

    def test_interval_clamped(self, qapp: QCoreApplication, water_tileset: dict[str, Any]) -> None:
        animator, _ = _animator(water_tileset)
        assert AnimationTicker(animator, interval_ms=0).interval == 1
        assert AnimationTicker(animator, interval_ms=5000).interval == 1000

    def test_start_stop(self, qapp: QCoreApplication, water_tileset: dict[str, Any]) -> None:
        animator, _ = _animator(water_tileset)
        ticker = AnimationTicker(animator, interval_ms=20)

        ticker.start()
        assert ticker.is_active()

        ticker.stop()
        ticker.stop()
        assert not ticker.is_active()

    def test_dispatch_steps_clock_and_signals(
        self, qapp: QCoreApplication, water_tileset: dict[str, Any]
    ) -> None:
        animator, surface = _animator(water_tileset)
        ticker = AnimationTicker(animator)
        emitted: list[int] = []
        ticker.frame_advanced.connect(lambda count: emitted.append(count))

        assert ticker._dispatch(150) == 0
        assert ticker._dispatch(100) == 1

        assert emitted == [1]
        assert surface.get_tile_index(CellRef("main", 0, 0)) == 11

    def test_animator_shutdown_stops_ticker(
        self, qapp: QCoreApplication, water_tileset: dict[str, Any]
    ) -> None:
        animator, _ = _animator(water_tileset)
        ticker = AnimationTicker(animator)
        ticker.start()

        animator.shutdown()

        assert not ticker.is_active()
        assert animator.cycle_count == 0

    def test_from_settings(
        self,
        qapp: QCoreApplication,
        app_settings: AppSettings,
        water_tileset: dict[str, Any],
    ) -> None:
        animator, _ = _animator(water_tileset)
        app_settings.animation.tick_interval = 40

        assert AnimationTicker.from_settings(animator, app_settings).interval == 40
