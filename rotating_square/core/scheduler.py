"""
Frame scheduling.

Runs one callback per display refresh, paced by a pygame clock.
"""

from typing import Callable, Optional

import pygame

FrameCallback = Callable[[], None]


class FrameScheduler:
    """
    Holds the callback requested for the next frame.

    The application loop calls dispatch() once per iteration and
    wait() to pace iterations to the target frame rate. Callbacks
    re-request themselves to keep running.
    """

    def __init__(self, target_fps: int = 60):
        """
        Initialize the scheduler.

        Args:
            target_fps: Frame rate wait() paces to
        """
        self.target_fps = target_fps
        self.clock = pygame.time.Clock()
        self.delta_time = 0.0
        self._pending: Optional[FrameCallback] = None

    @property
    def pending(self) -> bool:
        """Check if a callback is waiting for the next frame."""
        return self._pending is not None

    def request_frame(self, callback: FrameCallback) -> None:
        """
        Run a callback on the next frame.

        A later request replaces an earlier one.
        """
        self._pending = callback

    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        self._pending = None

    def dispatch(self) -> bool:
        """
        Run the pending callback.

        Returns:
            True if a callback ran, False if none was pending
        """
        callback = self._pending
        self._pending = None
        if callback is None:
            return False
        callback()
        return True

    def wait(self) -> float:
        """
        Block until the next frame is due.

        Returns:
            Seconds since the previous wait()
        """
        self.delta_time = self.clock.tick(self.target_fps) / 1000.0
        return self.delta_time

    def get_fps(self) -> float:
        """Get the measured frame rate."""
        return self.clock.get_fps()
