"""
Display output.

Owns the window, the native drawing surface and the upscale to the
window size. Failing to open the window is fatal: there is no
fallback driver.
"""

import logging

import pygame

from ..config import Config

logger = logging.getLogger(__name__)


class DisplayError(RuntimeError):
    """Raised when the window or drawing surface cannot be acquired."""


class Display:
    """
    Manages the window and frame presentation.

    All drawing goes to a native surface, which is scaled up to the
    window size when presented.
    """

    def __init__(self, config: Config):
        """
        Open the window.

        Args:
            config: Application configuration

        Raises:
            DisplayError: If SDL cannot create the window
        """
        self.config = config

        flags = pygame.FULLSCREEN if config.fullscreen else 0
        try:
            self.window = pygame.display.set_mode(config.window_size, flags)
        except pygame.error as e:
            logger.error(f"Display initialization failed: {e}")
            raise DisplayError(f"Cannot open {config.window_width}x{config.window_height} window: {e}") from e

        logger.info(f"Using SDL video driver: {pygame.display.get_driver()}")
        logger.info(f"Window size: {config.window_width}x{config.window_height} pixels")

        # Create the native surface
        if config.scale_factor > 1:
            self.native_surface = pygame.Surface(config.native_size)
            self.scaled_surface = pygame.Surface(config.window_size)
        else:
            # Draw straight into the window
            self.native_surface = self.window
            self.scaled_surface = None

    def get_surface(self) -> pygame.Surface:
        """
        Get the native surface to draw on.

        Returns:
            The native-resolution surface
        """
        return self.native_surface

    def present(self) -> None:
        """Present the frame, scaling up if needed."""
        if self.scaled_surface is not None:
            # Nearest-neighbor for crisp pixels
            pygame.transform.scale(
                self.native_surface,
                self.config.window_size,
                self.scaled_surface
            )
            self.window.blit(self.scaled_surface, (0, 0))

        pygame.display.flip()

    def cleanup(self) -> None:
        """Release the window."""
        self.scaled_surface = None
        pygame.display.quit()
