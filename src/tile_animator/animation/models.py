"""
Data models for tile animation cycles.

Frames and animation definitions are immutable once loaded; an
`AnimationCycle` carries the runtime phase for one animated tile.
Each model is intentionally lightweight: no surface or timing logic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, cast

from .errors import SetupError


# =============================================================================
# Cell Handles
# =============================================================================

class CellRef(NamedTuple):
    """Opaque handle of one renderable cell on a tile surface.

    Resolved against the surface on every read/write, so the clock never
    holds references into host-owned layer structures.
    """
    layer: str
    x: int
    y: int


# =============================================================================
# Declared Animations
# =============================================================================

@dataclass(frozen=True)
class AnimationFrame:
    """One step of a cycle: which tile to display and for how long."""
    tile_id: int
    duration_ms: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnimationFrame":
        """Create AnimationFrame from a Tiled frame dict.

        Args:
            data: Dict with 'tileid' and 'duration' keys

        Returns:
            AnimationFrame instance
        """
        return cls(
            tile_id=int(data["tileid"]),
            duration_ms=float(data["duration"]),
        )


@dataclass(frozen=True)
class TileAnimationDef:
    """Animation declared on a single local tile id of a tileset."""
    local_id: int
    frames: Tuple[AnimationFrame, ...] = ()

    @classmethod
    def from_frames(cls, local_id: int, raw_frames: Any) -> "TileAnimationDef":
        """Create a definition from a raw Tiled `animation` list.

        Args:
            local_id: Tile id local to its tileset
            raw_frames: List of frame dicts (may be empty)

        Returns:
            TileAnimationDef instance

        Raises:
            ValueError: If a frame entry is malformed
        """
        if not isinstance(raw_frames, list):
            raise ValueError(f"animation of tile {local_id} is not a list")

        frames: list[AnimationFrame] = []
        for item in cast(list[Any], raw_frames):
            if not isinstance(item, dict):
                raise ValueError(f"animation frame of tile {local_id} is not a mapping")
            try:
                frames.append(AnimationFrame.from_dict(cast(dict[str, Any], item)))
            except (KeyError, TypeError) as e:
                raise ValueError(f"malformed frame in tile {local_id}: {e}") from e
        return cls(local_id=local_id, frames=tuple(frames))


@dataclass
class TilesetAnimations:
    """Animations declared by one tileset, keyed by local tile id.

    Tiles that carry metadata but no animation map to None.
    Invalid frame lists are kept in `invalid` so the registry can report
    them without failing the whole tileset.
    """
    name: str
    first_gid: int
    animations: Dict[int, Optional[TileAnimationDef]] = field(default_factory=lambda: {})
    invalid: Dict[int, str] = field(default_factory=lambda: {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TilesetAnimations":
        """Create TilesetAnimations from a decoded Tiled tileset.

        Both the exported JSON shape (`tiles` list with `id` entries) and the
        runtime shape (`tileData` mapping keyed by id strings) are accepted.

        Args:
            data: Decoded tileset mapping with a 'firstgid' key

        Returns:
            TilesetAnimations instance

        Raises:
            SetupError: If the mapping lacks a usable firstgid or tile table
        """
        try:
            first_gid = int(data["firstgid"])
        except (KeyError, TypeError, ValueError) as e:
            raise SetupError(f"Tileset has no valid firstgid: {e}") from e

        name = str(data.get("name", f"tileset@{first_gid}"))
        entries: List[Tuple[int, dict[str, Any]]] = []

        raw_tiles = data.get("tiles")
        raw_tile_data = data.get("tileData")
        try:
            if isinstance(raw_tiles, list):
                for tile in cast(list[Any], raw_tiles):
                    if isinstance(tile, dict):
                        tile_dict = cast(dict[str, Any], tile)
                        entries.append((int(tile_dict["id"]), tile_dict))
            elif isinstance(raw_tile_data, dict):
                for key, tile in cast(dict[Any, Any], raw_tile_data).items():
                    if isinstance(tile, dict):
                        entries.append((int(key), cast(dict[str, Any], tile)))
            elif raw_tiles is not None or raw_tile_data is not None:
                raise SetupError(f"Tileset '{name}' has an unreadable tile table")
        except (KeyError, TypeError, ValueError) as e:
            raise SetupError(f"Tileset '{name}' has a malformed tile id: {e}") from e

        result = cls(name=name, first_gid=first_gid)
        for local_id, tile in entries:
            raw_animation = tile.get("animation")
            if raw_animation is None:
                result.animations[local_id] = None
                continue
            try:
                result.animations[local_id] = TileAnimationDef.from_frames(
                    local_id, raw_animation
                )
            except ValueError as e:
                result.invalid[local_id] = str(e)
        return result

    def declared(self) -> List[TileAnimationDef]:
        """Return declared animations ordered by local tile id."""
        return [
            anim
            for _, anim in sorted(self.animations.items())
            if anim is not None
        ]


# =============================================================================
# Runtime Cycle
# =============================================================================

@dataclass
class AnimationCycle:
    """Runtime state of one animated tile.

    `frames[current_frame_idx]` is the frame currently on screen and
    `timer_ms` the time already spent on it. Bound cells are fixed after
    the cache pass.
    """
    base_index: int
    frames: Tuple[AnimationFrame, ...]
    source: str = ""
    timer_ms: float = 0.0
    current_frame_idx: int = 0
    bound_cells: List[CellRef] = field(default_factory=lambda: [])

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError(f"Animation cycle at index {self.base_index} has no frames")

    @property
    def current_frame(self) -> AnimationFrame:
        """Frame currently displayed."""
        return self.frames[self.current_frame_idx]

    @property
    def period_ms(self) -> float:
        """Duration of one full pass through all frames."""
        return sum(frame.duration_ms for frame in self.frames)

    def display_index(self, frame: AnimationFrame) -> int:
        """Tile index shown on screen for a frame of this cycle."""
        return self.base_index + (frame.tile_id - self.frames[0].tile_id)

    @property
    def current_display_index(self) -> int:
        return self.display_index(self.current_frame)
