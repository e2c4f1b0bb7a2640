"""
Rendering module.

Glyph atlas construction and per-frame compositing.
"""

from .atlas import GlyphAtlas, build_glyph_atlas, slice_glyph_strip, load_glyph_atlas, tint
from .compositor import Compositor, TextImages

__all__ = [
    "GlyphAtlas",
    "build_glyph_atlas",
    "slice_glyph_strip",
    "load_glyph_atlas",
    "Compositor",
    "TextImages",
    "tint",
]
