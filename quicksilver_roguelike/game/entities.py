"""
Entity catalog.

A fixed roster: two goblins and the player, who is always appended last.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..ui.colors import COLORS, RGBA

PLAYER_GLYPH = "@"
HOSTILE_GLYPH = "g"


@dataclass(frozen=True)
class Entity:
    """A grid-positioned actor."""
    x: int
    y: int
    glyph: str
    color: RGBA


def generate_hostiles() -> List[Entity]:
    """Create the fixed list of adversaries."""
    return [
        Entity(9, 6, HOSTILE_GLYPH, COLORS["hostile"]),
        Entity(2, 4, HOSTILE_GLYPH, COLORS["hostile"]),
    ]


def generate_entities() -> Tuple[List[Entity], int]:
    """
    Create the entity list with the player appended.

    Returns:
        Tuple of (entities, player_id) where player_id is the index of
        the player in entities
    """
    entities = generate_hostiles()
    player_id = len(entities)
    entities.append(Entity(5, 3, PLAYER_GLYPH, COLORS["player"]))
    return entities, player_id
