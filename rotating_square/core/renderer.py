"""
Square renderer.

Draws one frame of the rotating square onto a pygame surface.
"""

from typing import List, Tuple

import pygame

from ..colors import COLORS, with_alpha
from ..geometry import Geometry, SQUARE
from ..state import Session
from .transform import IDENTITY, Matrix2D

Point = Tuple[float, float]


class SquareRenderer:
    """
    Renders the square rotated about the selected pivot.

    Every frame is drawn from scratch: the surface is cleared, the
    vertices projected and transformed, and the polygon filled. The
    renderer keeps no state between calls; the angle comes from the
    caller and the pivot from the session.
    """

    def __init__(self, session: Session, geometry: Geometry = SQUARE):
        """
        Initialize the renderer.

        Args:
            session: Session providing viewport and pivot index
            geometry: Vertex store to draw
        """
        self.session = session
        self.geometry = geometry

    def project_vertices(self) -> List[Point]:
        """Project every vertex to pixel space, in vertex order."""
        viewport = self.session.viewport
        window = self.session.world_window
        return [
            viewport.project(vertex.x, vertex.y, window)
            for vertex in self.geometry.vertices()
        ]

    def pivot_transform(self, points: List[Point], rotation: float) -> Matrix2D:
        """
        Build the rotation about the pivot's projected point.

        Args:
            points: Projected vertices
            rotation: Rotation angle in degrees

        Returns:
            Transform that holds the pivot point fixed
        """
        pivot_x, pivot_y = points[self.session.pivot_index % len(points)]
        return IDENTITY.rotate_about(rotation, pivot_x, pivot_y)

    def render_frame(self, surface: pygame.Surface, rotation: float) -> List[Point]:
        """
        Draw one frame.

        Args:
            surface: Surface to draw on
            rotation: Rotation angle in degrees

        Returns:
            The transformed polygon points, in vertex order
        """
        # Clear the whole surface
        surface.fill(with_alpha(COLORS["background"]))

        points = self.project_vertices()
        matrix = self.pivot_transform(points, rotation)
        polygon = [matrix.transform_point(x, y) for x, y in points]

        # Closed path through the points, filled
        pygame.draw.polygon(surface, with_alpha(COLORS["square"]), polygon)

        return polygon
