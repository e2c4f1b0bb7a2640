"""
Game state.

Owns everything the compositor draws: the glyph atlas, the map, the
entity list and the pre-rasterized text. All of it is built once.
"""

import logging
from typing import List

from ..config import Config
from ..core.assets import Asset
from ..render.atlas import GlyphAtlas, load_glyph_atlas
from ..render.compositor import TextImages
from ..ui.colors import COLORS
from ..ui.fonts import FontManager
from .entities import Entity, generate_entities
from .map import Tile, generate_map

logger = logging.getLogger(__name__)

TITLE_TEXT = "Quicksilver Roguelike"
MONONOKI_INFO_TEXT = "Mononoki font by Matthias Tellen, terms: SIL Open Font License 1.1"
SQUARE_INFO_TEXT = "Square font by Wouter Van Oortmerssen, terms: CC BY 3.0"


class GameState:
    """
    Static render state of the demo.

    Attributes:
        atlas: Glyph atlas asset
        text_images: Title and caption assets
        map: Tiles of the map
        entities: Entities, player last
        player_id: Index of the player in entities
    """

    def __init__(self, config: Config, fonts: FontManager):
        """
        Create the state and queue its assets.

        Assets are not loaded here; call load_assets().

        Args:
            config: Application configuration
            fonts: Font manager used by the asset loaders
        """
        self.config = config
        self.fonts = fonts

        text_color = COLORS["text"]

        def render_text(text: str, size: int):
            return lambda: fonts.render_text("mono", text, size, text_color)

        self.text_images = TextImages(
            title=Asset("title", render_text(TITLE_TEXT, config.title_size)),
            mononoki_info=Asset(
                "mononoki_info", render_text(MONONOKI_INFO_TEXT, config.caption_size)
            ),
            square_info=Asset(
                "square_info", render_text(SQUARE_INFO_TEXT, config.caption_size)
            ),
        )

        self.atlas: Asset[GlyphAtlas] = Asset(
            "tile_atlas",
            lambda: load_glyph_atlas(fonts, config.tile_glyphs, config.cell_size),
        )

        self.map: List[Tile] = generate_map(config.map_width, config.map_height)
        self.entities: List[Entity]
        self.entities, self.player_id = generate_entities()

        logger.info(
            f"Generated {config.map_width}x{config.map_height} map "
            f"and {len(self.entities)} entities, player at "
            f"({self.player.x}, {self.player.y})"
        )

    @property
    def player(self) -> Entity:
        """Get the player entity."""
        return self.entities[self.player_id]

    @property
    def assets(self) -> List[Asset]:
        """All deferred assets, in load order."""
        return [
            self.text_images.title,
            self.text_images.mononoki_info,
            self.text_images.square_info,
            self.atlas,
        ]

    def load_assets(self) -> None:
        """
        Resolve every asset synchronously.

        Raises:
            FontLoadError: If a font file is missing or unreadable
            AtlasBuildError: If the glyph atlas cannot be built
            AssetLoadError: If any other loader fails
        """
        self.fonts.verify()
        for asset in self.assets:
            asset.load()
        logger.info("All assets loaded")

    @classmethod
    def create(cls, config: Config) -> "GameState":
        """Create a state with its own font manager and load every asset."""
        state = cls(config, FontManager(config.asset_dir))
        state.load_assets()
        return state

