"""
Shared fixtures for the test suite.

Runs pygame headless and provides font directories, ready-made atlases
and text images so compositing can be checked pixel by pixel.
"""

import os
import shutil
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from quicksilver_roguelike.config import Config
from quicksilver_roguelike.core.assets import Asset
from quicksilver_roguelike.render.atlas import slice_glyph_strip
from quicksilver_roguelike.render.compositor import TextImages
from quicksilver_roguelike.ui.colors import BLACK, WHITE
from quicksilver_roguelike.ui.fonts import FontManager

GLYPHS = "#@g."
CELL = 24


@pytest.fixture(autouse=True)
def pygame_init():
    """Make sure pygame is initialized for every test."""
    pygame.init()
    yield


@pytest.fixture
def default_font_path() -> Path:
    """Path of the font file bundled with pygame."""
    return Path(pygame.__file__).parent / pygame.font.get_default_font()


@pytest.fixture
def font_dir(tmp_path, default_font_path) -> Path:
    """Asset directory holding both required font files."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    for filename in FontManager.FONT_FILES.values():
        shutil.copy(default_font_path, directory / filename)
    return directory


@pytest.fixture
def config(font_dir) -> Config:
    """Default configuration pointing at the temporary fonts."""
    return Config(asset_dir=font_dir)


@pytest.fixture
def fonts(font_dir) -> FontManager:
    return FontManager(font_dir)


def make_solid_atlas(glyphs: str = GLYPHS):
    """Atlas whose cells are fully opaque white squares."""
    strip = pygame.Surface((len(glyphs) * CELL, CELL), pygame.SRCALPHA)
    strip.fill(WHITE)
    return slice_glyph_strip(strip, glyphs, (CELL, CELL))


def loaded(name, value):
    """Asset that is already resolved."""
    asset = Asset(name, lambda: value)
    asset.load()
    return asset


def make_text_images() -> TextImages:
    """Ready text images: solid black 100x20 blocks."""
    def block():
        surface = pygame.Surface((100, 20), pygame.SRCALPHA)
        surface.fill(BLACK)
        return surface

    return TextImages(
        title=loaded("title", block()),
        mononoki_info=loaded("mononoki_info", block()),
        square_info=loaded("square_info", block()),
    )


@pytest.fixture
def solid_atlas():
    return loaded("tile_atlas", make_solid_atlas())


@pytest.fixture
def text_images() -> TextImages:
    return make_text_images()


@pytest.fixture
def frame() -> pygame.Surface:
    """Blank 800x600 target surface."""
    return pygame.Surface((800, 600), 0, 32)
