"""
Color palette.

Named RGBA colors for the demo. Glyphs are rasterized white so that
multiplying them by one of these colors tints them exactly.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

# Type alias
RGBA = Tuple[int, int, int, int]


WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
RED: RGBA = (255, 0, 0, 255)
BLUE: RGBA = (0, 0, 255, 255)


@dataclass(frozen=True)
class ColorPalette:
    """Color roles used by the map, entities and text."""

    background: RGBA      # Frame clear color
    text: RGBA            # Title and captions
    glyph: RGBA           # Atlas rasterization color (tinted at draw time)

    wall: RGBA
    floor: RGBA

    player: RGBA
    hostile: RGBA


# Walls and floor currently share one tint.
DEFAULT_PALETTE = ColorPalette(
    background=WHITE,
    text=BLACK,
    glyph=WHITE,

    wall=BLACK,
    floor=BLACK,

    player=BLUE,
    hostile=RED,
)


def _build_color_dict(palette: ColorPalette) -> Dict[str, RGBA]:
    """Build the COLORS dict from a palette."""
    return {
        "bg": palette.background,
        "text": palette.text,
        "glyph": palette.glyph,
        "wall": palette.wall,
        "floor": palette.floor,
        "player": palette.player,
        "hostile": palette.hostile,
    }


COLORS: Dict[str, RGBA] = _build_color_dict(DEFAULT_PALETTE)
