"""
tile-animator: frame-indexed clock for animated map tiles

Binds declared tileset animations to the cells of a tile surface once and
advances them from a host-driven tick.
"""

__version__ = "0.1.0"
__author__ = "tile-animator Contributors"

# Core imports
from .animation import (
    AnimationTicker, CycleRegistry, GridTileSurface, TileAnimator, TileSurface
)
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

# Main data models
from .animation import (
    AnimationCycle, AnimationFrame, CellRef, SetupError, TileAnimationDef,
    TileAnimatorError, TilesetAnimations
)

__all__ = [
    # Clock
    'TileAnimator',
    'AnimationTicker',
    'CycleRegistry',

    # Surface
    'TileSurface',
    'GridTileSurface',

    # Settings and logging
    'AppSettings',
    'setup_logging',

    # Data models
    'AnimationCycle',
    'AnimationFrame',
    'CellRef',
    'TileAnimationDef',
    'TilesetAnimations',

    # Errors
    'ConfigError',
    'SetupError',
    'TileAnimatorError',
]
