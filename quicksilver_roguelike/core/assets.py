"""
Deferred asset handles.

An Asset wraps a loader that produces a rasterized surface (or atlas).
Assets are resolved once during startup; the draw pass reads them
through get() for required assets and execute() for optional ones.
"""

import logging
from typing import Callable, Generic, Optional, TypeVar

import pygame

from ..errors import AssetLoadError, AssetNotReadyError, RoguelikeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Asset(Generic[T]):
    """
    One-shot handle for a value produced by a loader.

    The loader runs at most once. Its result is cached for the lifetime
    of the handle and never reloaded.
    """

    def __init__(self, name: str, loader: Callable[[], T]):
        """
        Create an unresolved asset.

        Args:
            name: Human-readable name used in logs and errors
            loader: Zero-argument callable producing the value
        """
        self.name = name
        self._loader = loader
        self._value: Optional[T] = None
        self._ready = False

    @property
    def ready(self) -> bool:
        """Check if the asset has been loaded."""
        return self._ready

    def load(self) -> T:
        """
        Run the loader if it has not run yet.

        Returns:
            The loaded value

        Raises:
            RoguelikeError: Application errors from the loader pass through
            AssetLoadError: Wrapping any pygame or OS error from the loader
        """
        if self._ready:
            return self._value

        logger.debug(f"Loading asset: {self.name}")
        try:
            value = self._loader()
        except RoguelikeError:
            raise
        except (pygame.error, OSError, ValueError) as e:
            raise AssetLoadError(f"Failed to load {self.name}: {e}") from e

        self._value = value
        self._ready = True
        return value

    def get(self) -> T:
        """
        Get the loaded value of a required asset.

        Raises:
            AssetNotReadyError: If load() has not completed
        """
        if not self._ready:
            raise AssetNotReadyError(self.name)
        return self._value

    def execute(self, action: Callable[[T], R]) -> Optional[R]:
        """
        Run an action with the value if it is ready.

        Used for optional assets: when the asset is not loaded yet the
        action is skipped and None is returned.
        """
        if not self._ready:
            return None
        return action(self._value)

    def __repr__(self) -> str:
        state = "ready" if self._ready else "pending"
        return f"Asset({self.name!r}, {state})"
