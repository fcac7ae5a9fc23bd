"""
Animation driver.

Steps the rotation angle once per frame and asks the renderer to
draw each step.
"""

import logging
from typing import Optional

import pygame

from ..state import Session
from .renderer import SquareRenderer
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class AnimationDriver:
    """
    Owns the rotation angle and the per-frame loop.

    The angle starts at 0 and drops by a fixed step each tick. Once it
    falls below -360 it snaps back to 0; the snap is a reset, not a
    modulo, so the sequence is 0, -2, ..., -360, 0, ...
    """

    ROTATION_STEP = 2.0
    WRAP_LIMIT = -360.0

    def __init__(
        self,
        session: Session,
        renderer: SquareRenderer,
        scheduler: FrameScheduler,
        step: float = ROTATION_STEP
    ):
        """
        Initialize the driver.

        Args:
            session: Session holding the rotation angle
            renderer: Renderer called every tick
            scheduler: Scheduler providing the next frame
            step: Degrees subtracted per tick
        """
        self.session = session
        self.renderer = renderer
        self.scheduler = scheduler
        self.step = step

        self._surface: Optional[pygame.Surface] = None
        self._running = False
        self.tick_count = 0

    @property
    def running(self) -> bool:
        """Check if the animation loop is active."""
        return self._running

    @property
    def rotation_angle(self) -> float:
        """Get the angle the next tick will render."""
        return self.session.rotation_angle

    def start(self, surface: pygame.Surface) -> None:
        """
        Start animating onto a surface.

        Draws the first frame immediately; later frames follow on
        each scheduler dispatch until stop() is called.
        """
        if self._running:
            logger.warning("Animation already running")
            return

        self._surface = surface
        self.session.rotation_angle = 0.0
        self.tick_count = 0
        self._running = True
        logger.info(f"Animation started (step={self.step} deg/frame)")

        self._on_frame()

    def stop(self) -> None:
        """Stop the animation. Safe to call more than once."""
        if not self._running:
            return

        self._running = False
        self.scheduler.cancel()
        logger.info(f"Animation stopped after {self.tick_count} frames")

    def tick(self, surface: pygame.Surface) -> float:
        """
        Render one frame and advance the angle.

        Args:
            surface: Surface to draw on

        Returns:
            The angle the frame was rendered at
        """
        angle = self.session.rotation_angle
        self.renderer.render_frame(surface, angle)

        self.session.rotation_angle = angle - self.step
        if self.session.rotation_angle < self.WRAP_LIMIT:
            logger.debug("Rotation wrapped to 0")
            self.session.rotation_angle = 0.0

        self.tick_count += 1
        return angle

    def _on_frame(self) -> None:
        """Scheduler callback: tick, then request the next frame."""
        if not self._running:
            return

        self.tick(self._surface)

        if self._running:
            self.scheduler.request_frame(self._on_frame)
