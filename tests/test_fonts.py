"""
Unit tests for font loading.
"""
from pathlib import Path

import pygame
import pytest

import quicksilver_roguelike
from quicksilver_roguelike.errors import FontLoadError
from quicksilver_roguelike.ui.colors import BLACK
from quicksilver_roguelike.ui.fonts import FontManager


def test_verify_with_all_fonts(fonts):
    fonts.verify()


def test_verify_reports_missing_file(font_dir):
    (font_dir / "square.ttf").unlink()

    with pytest.raises(FontLoadError, match="square.ttf"):
        FontManager(font_dir).verify()


def test_get_font_is_cached(fonts):
    font = fonts.get_font("mono", 20)

    assert isinstance(font, pygame.font.Font)
    assert fonts.get_font("mono", 20) is font
    assert fonts.get_font("mono", 72) is not font


def test_missing_file_raises(tmp_path):
    with pytest.raises(FontLoadError):
        FontManager(tmp_path).get_font("mono", 20)


def test_unknown_font_name(fonts):
    with pytest.raises(FontLoadError):
        fonts.get_font("comic", 20)


def test_corrupt_file_raises(font_dir):
    (font_dir / "square.ttf").write_bytes(b"not a font")

    with pytest.raises(FontLoadError):
        FontManager(font_dir).get_font("square", 24)


def test_corrupt_font_not_cached(font_dir, default_font_path):
    fonts = FontManager(font_dir)
    (font_dir / "square.ttf").write_bytes(b"not a font")

    with pytest.raises(FontLoadError):
        fonts.get_font("square", 24)

    (font_dir / "square.ttf").write_bytes(default_font_path.read_bytes())
    assert isinstance(fonts.get_font("square", 24), pygame.font.Font)


def test_render_text(fonts):
    surface = fonts.render_text("mono", "Quicksilver Roguelike", 20, BLACK)

    width, height = surface.get_size()
    assert width > 0 and height > 0


def test_default_asset_dir():
    package_root = Path(quicksilver_roguelike.__file__).parent.parent

    assert FontManager().asset_dir == package_root / "assets" / "fonts"
