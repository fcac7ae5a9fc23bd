"""
Session state.

Holds the mutable values shared by input handling, rendering and
animation. One session per window.
"""

from dataclasses import dataclass

from .viewport import Viewport, DEFAULT_WINDOW_SIZE


@dataclass
class Session:
    """
    Complete scene state.

    Updated by the pivot selector (pivot_index) and the animation
    driver (rotation_angle). Read by the renderer to draw the frame.
    """
    viewport: Viewport
    world_window: float = DEFAULT_WINDOW_SIZE

    # Index of the vertex held fixed while rotating (0-3)
    pivot_index: int = 0

    # Cumulative rotation in degrees
    rotation_angle: float = 0.0
