"""
Tile animation clock.

Advances every live animation cycle by the elapsed time pushed in by the
host and rewrites the tile index of the cells bound to a cycle whenever
that cycle lands on a new frame.
"""

import logging
import math
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Sequence, Tuple

from ..settings.animation import coerce_speed, validate_speed
from .models import AnimationCycle
from .registry import CycleRegistry, TilesetSource
from .surface import TileSurface

if TYPE_CHECKING:
    from ..settings import AppSettings

# Lowest speed multiplier accepted by set_speed
MIN_SPEED = 0.01


class TileAnimator:
    """Frame-indexed clock for animated tiles.

    Lifecycle: create, `initialize()` once the map is on the surface, call
    `step()` once per frame, `shutdown()` when the map goes away. Cells keep
    whatever frame they show at shutdown.
    """

    def __init__(
        self,
        surface: TileSurface,
        speed: float = 1.0,
        paused: bool = False,
    ):
        """Initialize the clock.

        Args:
            surface: Host tile surface the cycles read from and write to
            speed: Time multiplier applied to every step
            paused: Whether the clock starts paused

        Raises:
            ConfigError: If speed is not a positive finite number
        """
        self.surface = surface
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._speed = validate_speed(speed)
        self._paused = bool(paused)
        self._cycles: List[AnimationCycle] = []
        self._initialized = False
        self._default_layers: Optional[List[str]] = None
        self._detach: Optional[Callable[[], None]] = None

    @classmethod
    def from_settings(cls, surface: TileSurface, settings: "AppSettings") -> "TileAnimator":
        """Create a clock configured from application settings.

        Uses the stored speed, start-paused flag and tracked layer list.
        """
        animation = settings.animation
        animator = cls(surface, speed=animation.speed, paused=animation.start_paused)
        animator._default_layers = animation.layers or None
        return animator

    # === SETUP ===

    def initialize(
        self,
        layers: Optional[Sequence[str]] = None,
        tileset_defs: Iterable[TilesetSource] = (),
        speed: Optional[float] = None,
    ) -> None:
        """Build and bind the animation cycles.

        Replaces cycles from a previous call. On failure the previous state
        is left untouched.

        Args:
            layers: Layer names to track; None uses the configured layers,
                or every layer of the surface
            tileset_defs: Declared animations per tileset
            speed: Optional new speed multiplier

        Raises:
            SetupError: If a layer cannot be resolved or a tileset cannot be decoded
            ConfigError: If speed is not a positive finite number
        """
        new_speed = validate_speed(speed) if speed is not None else self._speed
        if layers is None:
            layers = self._default_layers

        cycles = CycleRegistry(self.surface).build(layers, tileset_defs)

        self._speed = new_speed
        self._cycles = cycles
        self._initialized = True
        self.logger.debug(
            f"Initialized with {len(cycles)} cycles at speed {self._speed}"
        )

    def attach_tick_source(self, detach: Callable[[], None]) -> None:
        """Register the callback that disconnects the host tick source.

        Called by `shutdown()`.
        """
        self._detach = detach

    def shutdown(self) -> None:
        """Detach from the tick source and discard all cycles."""
        if self._detach is not None:
            detach, self._detach = self._detach, None
            detach()
        if self._cycles:
            self.logger.debug(f"Shutting down, discarding {len(self._cycles)} cycles")
        self._cycles = []
        self._initialized = False

    # === PLAYBACK CONTROLS ===

    def pause(self) -> None:
        """Stop accumulating time. Phase is kept."""
        self._paused = True
        self.logger.debug("Animation paused")

    def resume(self) -> None:
        """Continue accumulating time from the paused phase."""
        self._paused = False
        self.logger.debug("Animation resumed")

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def speed(self) -> float:
        """Current time multiplier."""
        return self._speed

    def set_speed(self, factor: float) -> None:
        """Change the time multiplier from the next step on.

        Factors below MIN_SPEED are clamped. Time already accumulated on the
        current frame is not rescaled.

        Raises:
            ConfigError: If factor is not a finite number
        """
        speed = coerce_speed(factor)
        if speed < MIN_SPEED:
            self.logger.warning(f"Speed {speed} too low, clamped to {MIN_SPEED}")
            speed = MIN_SPEED
        self._speed = speed

    # === INTROSPECTION ===

    @property
    def cycles(self) -> Tuple[AnimationCycle, ...]:
        """Live cycles in declaration order."""
        return tuple(self._cycles)

    @property
    def cycle_count(self) -> int:
        return len(self._cycles)

    @property
    def cached_cell_count(self) -> int:
        """Number of bound cells across all live cycles."""
        return sum(len(cycle.bound_cells) for cycle in self._cycles)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # === TICK ===

    def step(self, delta_ms: float) -> int:
        """Advance all cycles by the elapsed time.

        Args:
            delta_ms: Host-measured time since the previous step

        Returns:
            Number of cycles that landed on a new frame
        """
        if self._paused or not self._cycles:
            return 0

        try:
            delta = float(delta_ms)
        except (TypeError, ValueError):
            self.logger.warning(f"Ignoring step with invalid delta: {delta_ms!r}")
            return 0
        if not math.isfinite(delta):
            self.logger.warning(f"Ignoring step with non-finite delta: {delta_ms!r}")
            return 0
        if delta <= 0:
            return 0

        effective = delta * self._speed
        transitioned = 0
        for cycle in self._cycles:
            if self._advance(cycle, effective):
                transitioned += 1
                self._write_cells(cycle)
        return transitioned

    @staticmethod
    def _advance(cycle: AnimationCycle, elapsed: float) -> bool:
        """Move a cycle forward by elapsed ms. Returns True if it changed frame."""
        cycle.timer_ms += elapsed
        if cycle.timer_ms < cycle.current_frame.duration_ms:
            return False

        # Whole periods leave the frame index where it is
        period = cycle.period_ms
        if cycle.timer_ms >= period:
            cycle.timer_ms %= period

        frame_count = len(cycle.frames)
        while cycle.timer_ms >= cycle.current_frame.duration_ms:
            cycle.timer_ms -= cycle.current_frame.duration_ms
            cycle.current_frame_idx = (cycle.current_frame_idx + 1) % frame_count
        return True

    def _write_cells(self, cycle: AnimationCycle) -> None:
        """Show the cycle's landed frame on every bound cell."""
        index = cycle.current_display_index
        failed = 0
        for cell in cycle.bound_cells:
            try:
                self.surface.set_tile_index(cell, index)
            except Exception as e:
                failed += 1
                # One report per cycle per step
                if failed == 1:
                    self.logger.error(
                        f"Error updating cell {tuple(cell)} of "
                        f"{cycle.source or cycle.base_index}: {e}",
                        exc_info=True,
                    )
        if failed > 1:
            self.logger.error(
                f"{failed} cells of {cycle.source or cycle.base_index} could not be updated"
            )
