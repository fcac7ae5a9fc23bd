"""
Core engine module.

Contains the main loop, animation driver and rendering pipeline.
"""

from .animation import AnimationDriver
from .app import Application
from .display import Display, DisplayError
from .renderer import SquareRenderer
from .scheduler import FrameScheduler
from .transform import Matrix2D, IDENTITY

__all__ = [
    "AnimationDriver",
    "Application",
    "Display",
    "DisplayError",
    "SquareRenderer",
    "FrameScheduler",
    "Matrix2D",
    "IDENTITY",
]
