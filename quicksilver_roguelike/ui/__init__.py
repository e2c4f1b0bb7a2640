"""
UI module.

Contains the color palette and font management.
"""

from .colors import COLORS, RGBA, WHITE, BLACK, RED, BLUE
from .fonts import FontManager

__all__ = [
    "COLORS",
    "RGBA",
    "WHITE",
    "BLACK",
    "RED",
    "BLUE",
    "FontManager",
]
