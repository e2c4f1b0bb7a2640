"""
Font management.

Handles font loading and text rasterization.

Fonts:
- mononoki: Title and attribution captions
  (https://madmalik.github.io/mononoki/, SIL Open Font License 1.1)
- Square: Tile glyphs for the atlas
  (http://strlen.com/square/, CC BY 3.0)
"""

import logging
import pygame
from typing import Dict, Optional, Tuple
from pathlib import Path

from ..errors import FontLoadError
from .colors import RGBA

logger = logging.getLogger(__name__)


class FontManager:
    """
    Loads fonts from the asset directory and caches them by size.

    There is no system-font fallback. A missing or unreadable font file
    raises FontLoadError, which aborts startup.
    """

    # Font file names (in the asset directory)
    FONT_FILES = {
        "mono": "mononoki-Regular.ttf",
        "square": "square.ttf",
    }

    def __init__(self, asset_dir: Optional[Path] = None):
        """
        Initialize the font manager.

        Args:
            asset_dir: Directory containing the font files
                (None = discover assets/fonts next to the package)
        """
        pygame.font.init()

        self.asset_dir = Path(asset_dir) if asset_dir else self._find_asset_dir()
        logger.info(f"Font asset directory: {self.asset_dir}")

        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}

    def _find_asset_dir(self) -> Path:
        """Find the assets directory."""
        # Package lives one level below the repository root
        current = Path(__file__).parent.parent.parent
        assets = current / "assets" / "fonts"
        logger.debug(f"Looking for fonts in: {assets}")
        if not assets.exists():
            logger.warning(f"Font directory not found: {assets}")
        return assets

    def font_path(self, font_name: str) -> Path:
        """
        Resolve the file path of a named font.

        Args:
            font_name: Font identifier ("mono" or "square")

        Returns:
            Path to the font file

        Raises:
            FontLoadError: If the name is unknown
        """
        try:
            filename = self.FONT_FILES[font_name]
        except KeyError:
            raise FontLoadError(f"Unknown font: {font_name!r}") from None
        return self.asset_dir / filename

    def verify(self) -> None:
        """
        Check that every font file is present.

        Raises:
            FontLoadError: Naming the first missing file
        """
        for font_name in self.FONT_FILES:
            path = self.font_path(font_name)
            if not path.is_file():
                raise FontLoadError(f"Font file not found: {path}")
        logger.info(f"Available font files: {sorted(self.FONT_FILES.values())}")

    def get_font(self, font_name: str, size: int) -> pygame.font.Font:
        """
        Get a font at the specified size.

        Args:
            font_name: Font identifier ("mono" or "square")
            size: Font size in pixels

        Returns:
            Pygame font object
        """
        cache_key = (font_name, size)

        if cache_key in self._fonts:
            return self._fonts[cache_key]

        font = self._load_font(font_name, size)
        self._fonts[cache_key] = font
        return font

    def _load_font(self, font_name: str, size: int) -> pygame.font.Font:
        """Load a font from file."""
        font_path = self.font_path(font_name)
        logger.debug(f"Trying to load font: {font_path}")

        if not font_path.is_file():
            raise FontLoadError(f"Font file not found: {font_path}")

        try:
            font = pygame.font.Font(str(font_path), size)
            # Opening is lazy; a broken file only fails once a glyph is rasterized
            font.size("#")
            font.render("#", True, (255, 255, 255))
        except (pygame.error, OSError, ValueError) as e:
            raise FontLoadError(f"Failed to load {font_path}: {e}") from e

        logger.info(f"Loaded font: {font_path.name} size={size}")
        return font

    def render_text(
        self,
        font_name: str,
        text: str,
        size: int,
        color: RGBA
    ) -> pygame.Surface:
        """
        Rasterize a line of text.

        Args:
            font_name: Font identifier
            text: Text to render
            size: Font size in pixels
            color: Foreground color (background stays transparent)

        Returns:
            Anti-aliased surface with per-pixel alpha
        """
        font = self.get_font(font_name, size)
        try:
            return font.render(text, True, color)
        except pygame.error as e:
            raise FontLoadError(f"Failed to render {text!r} with {font_name}: {e}") from e
