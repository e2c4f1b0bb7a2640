"""
Glyph atlas.

Rasterizes a string of glyphs into one horizontal strip and slices it
into fixed-size cells, one per glyph. Every cell is a subsurface of the
shared strip, so the pixels exist once.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Tuple

import pygame

from ..errors import AtlasBuildError
from ..ui.colors import COLORS, RGBA
from ..ui.fonts import FontManager

logger = logging.getLogger(__name__)


def tint(image: pygame.Surface, color: RGBA) -> pygame.Surface:
    """
    Return a copy of image multiplied by color.

    White pixels become exactly color; transparent pixels stay
    transparent.
    """
    tinted = image.copy()
    tinted.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
    return tinted


class GlyphAtlas(Mapping):
    """
    Read-only mapping from glyph character to its cell surface.

    Attributes:
        strip: Surface every cell is cut from
        cell_size: (width, height) of each cell in pixels
    """

    def __init__(
        self,
        strip: pygame.Surface,
        cells: Dict[str, pygame.Surface],
        cell_size: Tuple[int, int]
    ):
        self.strip = strip
        self.cell_size = cell_size
        self._cells = dict(cells)
        self._tinted: Dict[Tuple[str, RGBA], pygame.Surface] = {}

    def __getitem__(self, glyph: str) -> pygame.Surface:
        return self._cells[glyph]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def tinted(self, glyph: str, color: RGBA) -> Optional[pygame.Surface]:
        """
        Get the cell for glyph multiplied by color.

        Each (glyph, color) pair is tinted once and reused.

        Returns:
            Tinted surface, or None if the glyph is not in the atlas
        """
        key = (glyph, color)
        if key in self._tinted:
            return self._tinted[key]

        cell = self._cells.get(glyph)
        if cell is None:
            return None

        image = tint(cell, color)
        self._tinted[key] = image
        return image

    def __repr__(self) -> str:
        return f"GlyphAtlas({''.join(self._cells)!r}, cell_size={self.cell_size})"


def _check_source(source: str) -> None:
    """Reject empty glyph strings and duplicate glyphs."""
    if not source:
        raise ValueError("Glyph source string is empty")
    seen = set()
    for glyph in source:
        if glyph in seen:
            raise ValueError(f"Duplicate glyph {glyph!r} in {source!r}")
        seen.add(glyph)


def slice_glyph_strip(
    strip: pygame.Surface,
    source: str,
    cell_size: Tuple[int, int]
) -> GlyphAtlas:
    """
    Slice a strip into one cell per glyph.

    The glyph at index i maps to the rectangle at (i * cell_width, 0)
    of size cell_size.

    Args:
        strip: Surface at least len(source) * cell_width wide
            and cell_height tall
        source: Glyphs in strip order, no duplicates
        cell_size: (width, height) of one cell

    Returns:
        The sliced atlas

    Raises:
        ValueError: If source is empty or has duplicate glyphs
        AtlasBuildError: If the strip is too small
    """
    _check_source(source)
    width, height = cell_size

    cells: Dict[str, pygame.Surface] = {}
    for index, glyph in enumerate(source):
        rect = pygame.Rect(index * width, 0, width, height)
        try:
            cells[glyph] = strip.subsurface(rect)
        except ValueError as e:
            raise AtlasBuildError(
                f"Cell {rect} for {glyph!r} is outside the {strip.get_size()} strip"
            ) from e

    return GlyphAtlas(strip, cells, cell_size)


def build_glyph_atlas(
    font: pygame.font.Font,
    source: str,
    cell_size: Tuple[int, int]
) -> GlyphAtlas:
    """
    Rasterize source with font and slice it into an atlas.

    The text is rendered white on a transparent canvas exactly
    len(source) cells wide, so every cell exists even when the font's
    advance is narrower than the cell.

    Raises:
        ValueError: If source is empty or has duplicate glyphs
        AtlasBuildError: If rasterization fails
    """
    _check_source(source)
    width, height = cell_size

    try:
        text = font.render(source, True, COLORS["glyph"])
        strip = pygame.Surface((len(source) * width, height), pygame.SRCALPHA)
        strip.fill((0, 0, 0, 0))
        strip.blit(text, (0, 0))
    except pygame.error as e:
        raise AtlasBuildError(f"Could not render the glyph strip {source!r}: {e}") from e

    logger.debug(f"Rendered glyph strip {source!r}: text={text.get_size()} strip={strip.get_size()}")
    return slice_glyph_strip(strip, source, cell_size)


def load_glyph_atlas(
    fonts: FontManager,
    source: str,
    cell_size: Tuple[int, int],
    font_name: str = "square",
    font_size: Optional[int] = None
) -> GlyphAtlas:
    """
    Load the atlas font and build the atlas from it.

    Args:
        fonts: Font manager to load from
        source: Glyphs to rasterize
        cell_size: (width, height) of one cell
        font_name: Font identifier
        font_size: Pixel size (None = cell height)

    Returns:
        The built atlas
    """
    font = fonts.get_font(font_name, font_size or cell_size[1])
    atlas = build_glyph_atlas(font, source, cell_size)
    logger.info(f"Built glyph atlas: {atlas!r}")
    return atlas
