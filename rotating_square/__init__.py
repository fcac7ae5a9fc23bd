"""
Rotating Square.

A pygame demo that spins a square about one of its corners. Press
r, g, b or w to pick the corner the square turns around.
"""

__version__ = "1.0.0"

from .config import Config
from .geometry import Geometry, Vertex, SQUARE
from .state import Session
from .viewport import Viewport

__all__ = ["Config", "Geometry", "Vertex", "SQUARE", "Session", "Viewport"]
