"""
Window management.

Creates the display surface and presents finished frames. Falls back
to SDL's dummy video driver when no display is available.
"""

import logging
import os
import pygame

from ..config import Config

logger = logging.getLogger(__name__)


class Renderer:
    """
    Owns the window surface.

    Frames are drawn directly onto the window at its native size.
    """

    def __init__(self, config: Config):
        """
        Initialize the renderer.

        Args:
            config: Application configuration
        """
        self.config = config
        self.headless = False

        flags = pygame.SCALED if config.display_scaling else 0

        try:
            self.window = pygame.display.set_mode(config.window_size, flags)
            logger.info(f"Using SDL video driver: {pygame.display.get_driver()}")
        except pygame.error as e:
            # SDL video failed, render offscreen instead
            logger.warning(f"SDL video initialization failed: {e}")
            logger.info("Falling back to dummy video driver")
            os.environ['SDL_VIDEODRIVER'] = 'dummy'
            pygame.display.quit()
            pygame.display.init()
            self.window = pygame.display.set_mode(config.window_size)
            self.headless = True

        logger.info(f"Window: {config.window_width}x{config.window_height}")

    def get_surface(self) -> pygame.Surface:
        """
        Get the surface to draw on.

        Returns:
            The window surface
        """
        return self.window

    def present(self) -> None:
        """Present the frame to the display."""
        pygame.display.flip()

    def cleanup(self) -> None:
        """Close the window."""
        pygame.display.quit()
