"""
Main application class.

Handles the main loop, event processing and frame presentation.
"""

import logging

import pygame

from ..config import Config
from ..colors import COLORS
from ..input.manager import PivotSelector
from ..state import Session
from ..viewport import Viewport
from .animation import AnimationDriver
from .display import Display, DisplayError
from .renderer import SquareRenderer
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class Application:
    """
    Main application controller.

    Wires the display, input, renderer and animation driver together
    and runs them on a single loop. Key presses handled in one
    iteration are visible to the frame dispatched in that iteration.
    """

    def __init__(self, config: Config):
        """
        Initialize the application.

        Args:
            config: Application configuration

        Raises:
            DisplayError: If the window cannot be opened
        """
        self.config = config
        self.running = False

        # Initialize Pygame
        pygame.init()
        pygame.display.set_caption("Rotating Square")

        # Create display (fatal if it fails)
        try:
            self.display = Display(config)
        except DisplayError:
            pygame.quit()
            raise

        # Viewport is read once from the drawing surface
        surface = self.display.get_surface()
        self.session = Session(
            viewport=Viewport.from_surface(surface),
            world_window=config.world_window
        )

        self.pivot_selector = PivotSelector(self.session)
        self.renderer = SquareRenderer(self.session)
        self.scheduler = FrameScheduler(config.target_fps)
        self.animation = AnimationDriver(
            self.session,
            self.renderer,
            self.scheduler,
            step=config.rotation_step
        )

        # Debug info
        self.frame_count = 0
        self._font = None

    def run(self) -> None:
        """Main application loop."""
        self.running = True

        # First frame is drawn immediately
        self.animation.start(self.display.get_surface())
        self._present()

        while self.running:
            self.scheduler.wait()
            self.run_frame()

        self.animation.stop()

    def run_frame(self) -> None:
        """Run one loop iteration: events, animation tick, present."""
        self._process_events()
        if not self.running:
            return

        if self.scheduler.dispatch():
            self._present()

    def _process_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Quit requested")
                self.running = False
                return

            self.pivot_selector.process_event(event)

    def _present(self) -> None:
        """Draw overlays and present the frame."""
        self.frame_count += 1

        if self.config.show_fps:
            self._render_fps(self.display.get_surface())

        self.display.present()

    def _render_fps(self, surface: pygame.Surface) -> None:
        """Render FPS counter."""
        if self._font is None:
            self._font = pygame.font.Font(None, 16)
        fps = self.scheduler.get_fps()
        fps_text = self._font.render(f"FPS: {fps:.1f}", True, COLORS["text_secondary"])
        surface.blit(fps_text, (5, 5))

    def cleanup(self) -> None:
        """Clean up resources."""
        self.animation.stop()
        self.display.cleanup()

        # Quit pygame
        pygame.quit()
