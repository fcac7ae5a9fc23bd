"""
Pivot selection input.

Maps key symbols to the vertex the square rotates about.
"""

import logging
from typing import Dict

import pygame

from ..state import Session

logger = logging.getLogger(__name__)


class PivotSelector:
    """
    Tracks the rotation pivot from keyboard input.

    Each recognized symbol selects one vertex. Anything else is
    ignored; there is no way to reset the selection.
    """

    # Symbol to vertex index
    KEY_MAP: Dict[str, int] = {
        "r": 0,
        "g": 1,
        "b": 2,
        "w": 3,
    }

    def __init__(self, session: Session):
        """
        Initialize the pivot selector.

        Args:
            session: Session whose pivot index is updated
        """
        self.session = session

    def on_key(self, key: str) -> bool:
        """
        Handle a key symbol.

        Args:
            key: Single character from a key press

        Returns:
            True if the symbol selected a pivot, False if ignored
        """
        index = self.KEY_MAP.get(key)
        if index is None:
            return False

        if index != self.session.pivot_index:
            logger.debug(f"Pivot changed: {self.session.pivot_index} -> {index}")
        self.session.pivot_index = index
        return True

    def current_pivot_index(self) -> int:
        """Get the selected pivot vertex index."""
        return self.session.pivot_index

    def process_event(self, event: pygame.event.Event) -> bool:
        """
        Process a pygame event.

        Args:
            event: Pygame event to process

        Returns:
            True if the event selected a pivot
        """
        if event.type == pygame.KEYDOWN:
            return self.on_key(getattr(event, "unicode", ""))

        return False
