"""
Tile animation package.

Provides the cycle registry that binds declared tileset animations to
cells of a tile surface, the clock that steps them, and a Qt tick source.
"""

from .clock import MIN_SPEED, TileAnimator
from .errors import SetupError, TileAnimatorError
from .models import (
    AnimationCycle, AnimationFrame, CellRef, TileAnimationDef, TilesetAnimations
)
from .registry import CycleRegistry
from .surface import GridTileSurface, TileSurface
from .ticker import AnimationTicker

__all__ = [
    # Clock
    'TileAnimator',
    'MIN_SPEED',
    'AnimationTicker',
    'CycleRegistry',

    # Surface
    'TileSurface',
    'GridTileSurface',

    # Data models
    'AnimationCycle',
    'AnimationFrame',
    'CellRef',
    'TileAnimationDef',
    'TilesetAnimations',

    # Errors
    'SetupError',
    'TileAnimatorError',
]
