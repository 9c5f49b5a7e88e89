"""
Exceptions raised by the tile animation clock.
"""


class TileAnimatorError(Exception):
    """Base class for tile animation errors."""
    pass


class SetupError(TileAnimatorError):
    """Raised when the clock cannot be initialized from host data.

    Covers layers the tile surface cannot resolve and tileset animation
    data that cannot be decoded at all.
    """
    pass
