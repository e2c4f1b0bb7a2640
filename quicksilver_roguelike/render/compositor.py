"""
Frame compositor.

Draws one frame: clear, title and captions, then the map tiles and the
entities from the glyph atlas. Entities are drawn after tiles so they
sit on top.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable

import pygame

from ..config import Config
from ..core.assets import Asset
from ..ui.colors import COLORS, RGBA
from .atlas import GlyphAtlas

logger = logging.getLogger(__name__)

# Vertical position of the title's center
TITLE_CENTER_Y = 40

# Captions are anchored to the bottom-left corner
CAPTION_X = 2
CAPTION_BOTTOM_OFFSETS = (60, 30)


@runtime_checkable
class Cell(Protocol):
    """Anything with a grid position, glyph and tint (tiles, entities)."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...

    @property
    def glyph(self) -> str: ...

    @property
    def color(self) -> RGBA: ...


@dataclass
class TextImages:
    """Pre-rasterized text drawn every frame."""
    title: Asset[pygame.Surface]
    mononoki_info: Asset[pygame.Surface]
    square_info: Asset[pygame.Surface]

    @property
    def captions(self) -> Tuple[Asset[pygame.Surface], ...]:
        """Caption lines, top to bottom."""
        return (self.mononoki_info, self.square_info)


class Compositor:
    """
    Draws the game state onto a surface.

    Holds only layout constants; nothing is carried between frames, so
    identical inputs always produce identical pixels.
    """

    def __init__(self, config: Config):
        """
        Initialize the compositor.

        Args:
            config: Application configuration (grid offset, cell size)
        """
        self.background = COLORS["bg"]
        self.offset = config.grid_offset
        self.cell_width, self.cell_height = config.cell_size

    def cell_position(self, x: int, y: int) -> Tuple[int, int]:
        """Get the screen position of a grid cell's top-left corner."""
        return (
            self.offset[0] + x * self.cell_width,
            self.offset[1] + y * self.cell_height,
        )

    def draw(
        self,
        surface: pygame.Surface,
        atlas: Asset[GlyphAtlas],
        tiles: Iterable[Cell],
        entities: Iterable[Cell],
        text_images: TextImages
    ) -> None:
        """
        Draw one frame.

        Args:
            surface: Target surface
            atlas: Glyph atlas; if not ready the grid is skipped this frame
            tiles: Map tiles in draw order
            entities: Entities in draw order, drawn over the tiles
            text_images: Title and captions

        Raises:
            AssetNotReadyError: If the title or a caption is not loaded
        """
        surface.fill(self.background)

        self.draw_text(surface, text_images)

        drawn = atlas.execute(
            lambda glyphs: self._draw_layers(surface, glyphs, tiles, entities)
        )
        if drawn is None:
            logger.debug("Glyph atlas not ready, skipping grid")

    def draw_text(self, surface: pygame.Surface, text_images: TextImages) -> None:
        """Draw the title and the caption lines."""
        width, height = surface.get_size()

        title = text_images.title.get()
        surface.blit(title, title.get_rect(center=(width // 2, TITLE_CENTER_Y)))

        for caption, bottom_offset in zip(text_images.captions, CAPTION_BOTTOM_OFFSETS):
            surface.blit(caption.get(), (CAPTION_X, height - bottom_offset))

    def _draw_layers(
        self,
        surface: pygame.Surface,
        atlas: GlyphAtlas,
        tiles: Iterable[Cell],
        entities: Iterable[Cell]
    ) -> bool:
        self.draw_grid(surface, atlas, tiles)
        self.draw_grid(surface, atlas, entities)
        return True

    def draw_grid(
        self,
        surface: pygame.Surface,
        atlas: GlyphAtlas,
        cells: Iterable[Cell]
    ) -> int:
        """
        Draw cells in sequence order.

        Glyphs missing from the atlas are skipped without error.

        Returns:
            Number of cells drawn
        """
        count = 0
        for cell in cells:
            image: Optional[pygame.Surface] = atlas.tinted(cell.glyph, cell.color)
            if image is None:
                continue
            surface.blit(image, self.cell_position(cell.x, cell.y))
            count += 1
        return count
