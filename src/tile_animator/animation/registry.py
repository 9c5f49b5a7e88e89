"""
Cycle registry and cache builder.

Turns declared tileset animations into runtime cycles and binds each
cycle, once, to the cells currently showing its first frame. This is the
only place the clock scans whole layers.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union, cast

from .errors import SetupError
from .models import AnimationCycle, AnimationFrame, TilesetAnimations
from .surface import TileSurface

logger = logging.getLogger(__name__)

TilesetSource = Union[TilesetAnimations, dict[str, Any]]


class CycleRegistry:
    """Builds the live cycle list for a tile surface."""

    def __init__(self, surface: TileSurface):
        self.surface = surface
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def build(
        self,
        layer_names: Optional[Sequence[str]],
        tileset_defs: Iterable[TilesetSource],
    ) -> List[AnimationCycle]:
        """Run the full cache pass.

        Args:
            layer_names: Layers to track, or None for every surface layer
            tileset_defs: Declared animations per tileset

        Returns:
            Cycles with at least one bound cell, in declaration order

        Raises:
            SetupError: If a layer cannot be resolved or a tileset cannot be decoded
        """
        layers = self.resolve_layers(layer_names)
        cycles = self.build_cycles(tileset_defs)
        self.bind_cells(layers, cycles)
        live = self.prune(cycles)

        cached = sum(len(cycle.bound_cells) for cycle in live)
        self.logger.info(f"Cached {cached} cells for {len(live)} animated tiles")
        return live

    def resolve_layers(self, layer_names: Optional[Sequence[str]]) -> List[str]:
        """Resolve layer names to surface handles.

        Raises:
            SetupError: If the surface does not know a layer
        """
        names = self.surface.layer_names() if layer_names is None else list(layer_names)
        layers: List[str] = []
        for name in names:
            try:
                layer = self.surface.resolve_layer(name)
            except LookupError as e:
                raise SetupError(f"Cannot resolve tile layer '{name}': {e}") from e
            # A layer listed twice would bind its cells twice
            if layer not in layers:
                layers.append(layer)
        return layers

    def build_cycles(self, tileset_defs: Iterable[TilesetSource]) -> List[AnimationCycle]:
        """Create one cycle per declared animation.

        Definitions without frames, with a negative or non-finite frame
        duration, or whose frames add up to no time at all, are skipped with
        a warning.
        """
        cycles: List[AnimationCycle] = []
        for source in tileset_defs:
            tileset = self._as_tileset(source)

            for local_id, reason in sorted(tileset.invalid.items()):
                self.logger.warning(
                    f"Skipping animation of tile {local_id} in '{tileset.name}': {reason}"
                )

            for anim in tileset.declared():
                base_index = tileset.first_gid + anim.local_id
                if not anim.frames:
                    self.logger.warning(
                        f"Skipping animation of tile {anim.local_id} in '{tileset.name}': no frames"
                    )
                    continue
                reason = self._duration_defect(anim.frames)
                if reason:
                    self.logger.warning(
                        f"Skipping animation of tile {anim.local_id} in '{tileset.name}': {reason}"
                    )
                    continue
                cycles.append(
                    AnimationCycle(
                        base_index=base_index,
                        frames=anim.frames,
                        source=f"{tileset.name}#{anim.local_id}",
                    )
                )
        return cycles

    def bind_cells(self, layers: Sequence[str], cycles: Sequence[AnimationCycle]) -> None:
        """Attach every cell showing a cycle's first frame to that cycle."""
        by_base: Dict[int, List[AnimationCycle]] = {}
        for cycle in cycles:
            by_base.setdefault(cycle.base_index, []).append(cycle)

        if not by_base:
            return

        for layer in layers:
            for cell in self.surface.enumerate_cells(layer):
                matches = by_base.get(self.surface.get_tile_index(cell))
                if matches:
                    for cycle in matches:
                        cycle.bound_cells.append(cell)

    def prune(self, cycles: Sequence[AnimationCycle]) -> List[AnimationCycle]:
        """Drop cycles that no cell displays."""
        live: List[AnimationCycle] = []
        for cycle in cycles:
            if cycle.bound_cells:
                live.append(cycle)
            else:
                self.logger.debug(f"No cells show {cycle.source}, dropping its cycle")
        return live

    @staticmethod
    def _duration_defect(frames: Sequence[AnimationFrame]) -> Optional[str]:
        """Describe why frame durations cannot drive a cycle, or None."""
        for frame in frames:
            if not math.isfinite(frame.duration_ms) or frame.duration_ms < 0:
                return f"frame {frame.tile_id} has invalid duration {frame.duration_ms}"
        period = sum(frame.duration_ms for frame in frames)
        if not math.isfinite(period) or period <= 0:
            return "total duration is not positive"
        return None

    @staticmethod
    def _as_tileset(source: TilesetSource) -> TilesetAnimations:
        if isinstance(source, TilesetAnimations):
            return source
        if isinstance(source, dict):
            return TilesetAnimations.from_dict(cast(dict[str, Any], source))
        raise SetupError(f"Unsupported tileset animation data: {type(source).__name__}")
