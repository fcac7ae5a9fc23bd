"""
Input handling module.

Translates keyboard events into pivot selections.
"""

from .manager import PivotSelector

__all__ = [
    "PivotSelector",
]
