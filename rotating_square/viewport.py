"""
World to pixel mapping.

Maps the symmetric world window [-n/2, n/2] x [-n/2, n/2] onto the
pixel rectangle [0, width] x [height, 0]. The Y axis is flipped
because pixel rows grow downwards.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame

# Default side of the world window
DEFAULT_WINDOW_SIZE = 5.0


@dataclass(frozen=True)
class Viewport:
    """Pixel dimensions of the drawing surface."""
    width: int
    height: int

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> "Viewport":
        """Read the dimensions once from a surface."""
        width, height = surface.get_size()
        return cls(width, height)

    @property
    def size(self) -> Tuple[int, int]:
        """Get size as tuple."""
        return (self.width, self.height)

    def project(
        self,
        x: float,
        y: float,
        window_size: float = DEFAULT_WINDOW_SIZE
    ) -> Tuple[float, float]:
        """
        Map a world point to pixel coordinates.

        Args:
            x: World x coordinate
            y: World y coordinate
            window_size: Side of the world window

        Returns:
            (px, py) pixel coordinates
        """
        n = window_size
        return (
            (x + n / 2) * self.width / n,
            (-y + n / 2) * self.height / n,
        )
