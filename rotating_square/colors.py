"""
Color palette.

Plain white canvas with a teal square, matching the classic
canvas demo look.
"""

from typing import Dict, Tuple

# Type aliases
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


# ─────────────────────────────────────────────────────────────────────────────
# Palette
# ─────────────────────────────────────────────────────────────────────────────

COLORS: Dict[str, RGB] = {
    # Backgrounds
    "background": (255, 255, 255),

    # Shape fill
    "square": (0, 204, 204),

    # Text
    "text_secondary": (53, 93, 104),
}


def with_alpha(color: RGB, alpha: int = 255) -> RGBA:
    """
    Add alpha channel to RGB color.

    Args:
        color: RGB color tuple
        alpha: Alpha value (0-255)

    Returns:
        RGBA color tuple
    """
    return (*color, alpha)
