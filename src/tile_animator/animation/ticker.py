"""
Qt tick source for the tile animation clock.

Drives `TileAnimator.step()` from a repeating QTimer, measuring the real
elapsed time between timeouts with a QElapsedTimer.
"""

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Signal

from .clock import TileAnimator

if TYPE_CHECKING:
    from ..settings import AppSettings

MIN_INTERVAL = 1
MAX_INTERVAL = 1000


class AnimationTicker(QObject):
    """Feeds elapsed time from the Qt event loop into a TileAnimator.

    `frame_advanced` is emitted with the number of transitioned cycles
    whenever a step changed at least one cycle, so views can repaint.
    """

    frame_advanced = Signal(int)

    def __init__(
        self,
        animator: TileAnimator,
        interval_ms: int = 16,
        parent: Optional[QObject] = None,
    ):
        """Initialize the ticker.

        Args:
            animator: Clock to drive
            interval_ms: Timer interval in milliseconds (1-1000 ms)
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self.animator = animator
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._interval = max(MIN_INTERVAL, min(MAX_INTERVAL, int(interval_ms)))

        self.timer = QTimer(self)
        self.timer.setSingleShot(False)
        self.timer.timeout.connect(self._on_timeout)

        self._elapsed = QElapsedTimer()

    @classmethod
    def from_settings(
        cls, animator: TileAnimator, settings: "AppSettings", parent: Optional[QObject] = None
    ) -> "AnimationTicker":
        """Create a ticker using the configured tick interval."""
        return cls(animator, interval_ms=settings.animation.tick_interval, parent=parent)

    @property
    def interval(self) -> int:
        """Timer interval in milliseconds."""
        return self._interval

    def start(self) -> None:
        """Attach to the animator and start ticking."""
        self.animator.attach_tick_source(self.stop)
        self._elapsed.restart()
        if not self.timer.isActive():
            self.timer.start(self._interval)
            self.logger.debug(f"Animation ticker started with interval: {self._interval}ms")

    def stop(self) -> None:
        """Stop ticking. Safe to call more than once."""
        if self.timer.isActive():
            self.timer.stop()
            self.logger.debug("Animation ticker stopped")

    def is_active(self) -> bool:
        return self.timer.isActive()

    def _on_timeout(self) -> None:
        """Handle timer tick - push measured elapsed time into the clock."""
        self._dispatch(float(self._elapsed.restart()))

    def _dispatch(self, delta_ms: float) -> int:
        transitioned = self.animator.step(delta_ms)
        if transitioned:
            self.frame_advanced.emit(transitioned)
        return transitioned
