"""
Core engine module.

Contains window management and deferred asset handles. The application
loop lives in core.app.
"""

from .assets import Asset
from .renderer import Renderer

__all__ = ["Asset", "Renderer"]
