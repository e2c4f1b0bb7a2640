"""
Unit tests for the entity catalog.
"""
from quicksilver_roguelike.game.entities import (
    Entity, generate_entities, generate_hostiles, PLAYER_GLYPH, HOSTILE_GLYPH
)
from quicksilver_roguelike.ui.colors import BLUE, RED


def test_fixed_roster():
    entities, player_id = generate_entities()

    assert entities == [
        Entity(9, 6, "g", RED),
        Entity(2, 4, "g", RED),
        Entity(5, 3, "@", BLUE),
    ]
    assert player_id == 2


def test_player_is_last():
    entities, player_id = generate_entities()

    assert player_id == len(entities) - 1
    player = entities[player_id]
    assert player.glyph == PLAYER_GLYPH
    assert player.color == BLUE


def test_player_differs_from_hostiles():
    entities, player_id = generate_entities()
    player = entities[player_id]

    for index, entity in enumerate(entities):
        if index == player_id:
            continue
        assert entity.glyph == HOSTILE_GLYPH
        assert entity.glyph != player.glyph
        assert entity.color != player.color


def test_deterministic_and_fresh():
    first, first_id = generate_entities()
    first.clear()
    second, second_id = generate_entities()

    assert first_id == second_id
    assert len(second) == 3


def test_hostiles_only():
    assert [e.glyph for e in generate_hostiles()] == ["g", "g"]
