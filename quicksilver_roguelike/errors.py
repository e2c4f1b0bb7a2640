"""
Error types.

Startup failures (fonts, atlas, asset loaders) are fatal. A required
asset that is read before it has resolved is the only error the frame
loop recovers from.
"""


class RoguelikeError(Exception):
    """Base class for all application errors."""


class FontLoadError(RoguelikeError):
    """A font file is missing or could not be opened."""


class AtlasBuildError(RoguelikeError):
    """Rasterizing or slicing the glyph atlas failed."""


class AssetLoadError(RoguelikeError):
    """A deferred asset's loader failed."""


class AssetNotReadyError(RoguelikeError):
    """A required asset was used before it finished loading."""

    def __init__(self, name: str):
        super().__init__(f"Asset not ready: {name}")
        self.name = name
