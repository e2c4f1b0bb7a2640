"""
Map generation.

The map is a fixed rectangle of tiles: a ring of walls around a floor.
"""

from dataclasses import dataclass
from typing import List

from ..ui.colors import COLORS, RGBA

WALL_GLYPH = "#"
FLOOR_GLYPH = "."


@dataclass(frozen=True)
class Tile:
    """One static grid cell of the map."""
    x: int
    y: int
    glyph: str
    color: RGBA


def is_border(x: int, y: int, width: int, height: int) -> bool:
    """Check if a cell lies on the outer ring of a width x height grid."""
    return x == 0 or x == width - 1 or y == 0 or y == height - 1


def generate_map(width: int, height: int) -> List[Tile]:
    """
    Generate a walled rectangular map.

    Cells are produced column by column (outer loop over x). A grid one
    cell wide or tall has every cell on its border, so it is all wall.

    Args:
        width: Map width in cells
        height: Map height in cells

    Returns:
        width * height tiles

    Raises:
        ValueError: If either dimension is less than 1
    """
    if width < 1 or height < 1:
        raise ValueError(f"Map size must be at least 1x1, got {width}x{height}")

    tiles: List[Tile] = []
    for x in range(width):
        for y in range(height):
            if is_border(x, y, width, height):
                tile = Tile(x, y, WALL_GLYPH, COLORS["wall"])
            else:
                tile = Tile(x, y, FLOOR_GLYPH, COLORS["floor"])
            tiles.append(tile)
    return tiles
