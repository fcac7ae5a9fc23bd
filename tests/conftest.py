import os

# Headless SDL; must be set before pygame opens a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from rotating_square.core.renderer import SquareRenderer
from rotating_square.core.scheduler import FrameScheduler
from rotating_square.geometry import Geometry
from rotating_square.state import Session
from rotating_square.viewport import Viewport

WIDTH = 400
HEIGHT = 400


@pytest.fixture
def surface():
    """Off-screen drawing surface."""
    return pygame.Surface((WIDTH, HEIGHT))


@pytest.fixture
def session(surface):
    return Session(viewport=Viewport.from_surface(surface))


@pytest.fixture
def geometry():
    return Geometry()


@pytest.fixture
def renderer(session, geometry):
    return SquareRenderer(session, geometry)


@pytest.fixture
def scheduler():
    return FrameScheduler(target_fps=60)
