"""
Game data module.

Static map and entity generation, and the state that owns them.
"""

from .map import Tile, generate_map, WALL_GLYPH, FLOOR_GLYPH
from .entities import Entity, generate_entities, PLAYER_GLYPH, HOSTILE_GLYPH
from .state import GameState

__all__ = [
    "Tile",
    "generate_map",
    "WALL_GLYPH",
    "FLOOR_GLYPH",
    "Entity",
    "generate_entities",
    "PLAYER_GLYPH",
    "HOSTILE_GLYPH",
    "GameState",
]
