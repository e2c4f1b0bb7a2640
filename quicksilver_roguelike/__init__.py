"""
Quicksilver Roguelike.

A small tile-based rendering demo: fonts are rasterized into a glyph
atlas, and a static walled map plus a handful of entities are
composited from it every frame.
"""

__version__ = "0.1.0"

from .config import Config, DEFAULT_CONFIG
from .errors import (
    RoguelikeError,
    FontLoadError,
    AtlasBuildError,
    AssetLoadError,
    AssetNotReadyError,
)

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "RoguelikeError",
    "FontLoadError",
    "AtlasBuildError",
    "AssetLoadError",
    "AssetNotReadyError",
]
