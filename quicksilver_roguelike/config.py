"""
Application configuration.

All fixed values of the demo live here so window creation, map layout
and compositing read them from one place.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Main application configuration."""

    # ─────────────────────────────────────────────────────────────────────────
    # Display Settings
    # ─────────────────────────────────────────────────────────────────────────

    window_title: str = "Quicksilver Roguelike"
    window_width: int = 800
    window_height: int = 600

    # Let SDL scale the window contents (pygame.SCALED). Off keeps the
    # rendering pixel-perfect at the native window size.
    display_scaling: bool = False

    # Target frame rate
    target_fps: int = 60

    # ─────────────────────────────────────────────────────────────────────────
    # Map Layout
    # ─────────────────────────────────────────────────────────────────────────

    map_width: int = 20
    map_height: int = 15

    # Pixel size of one grid cell (and one atlas glyph)
    cell_width: int = 24
    cell_height: int = 24

    # Glyphs rasterized into the tile atlas: wall, player, goblin, floor
    tile_glyphs: str = "#@g."

    # Screen-space translation applied to the whole grid
    grid_offset_x: int = 50
    grid_offset_y: int = 150

    # ─────────────────────────────────────────────────────────────────────────
    # Fonts & Text
    # ─────────────────────────────────────────────────────────────────────────

    # Directory holding mononoki-Regular.ttf and square.ttf
    # (None = discover assets/fonts next to the package)
    asset_dir: Optional[Path] = None

    title_size: int = 72
    caption_size: int = 20

    # ─────────────────────────────────────────────────────────────────────────
    # Computed Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def window_size(self) -> tuple[int, int]:
        """Get window size as tuple."""
        return (self.window_width, self.window_height)

    @property
    def map_size(self) -> tuple[int, int]:
        """Get map size in cells as tuple."""
        return (self.map_width, self.map_height)

    @property
    def cell_size(self) -> tuple[int, int]:
        """Get cell size in pixels as tuple."""
        return (self.cell_width, self.cell_height)

    @property
    def grid_offset(self) -> tuple[int, int]:
        """Get the grid's top-left screen position."""
        return (self.grid_offset_x, self.grid_offset_y)

    def __post_init__(self):
        """Normalize the asset directory to a Path."""
        if self.asset_dir is not None:
            self.asset_dir = Path(self.asset_dir)


# Default configuration instance
DEFAULT_CONFIG = Config()
