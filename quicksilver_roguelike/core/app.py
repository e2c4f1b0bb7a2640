"""
Main application class.

Initializes the window and game state once, then redraws every tick
until the window is closed.
"""

import logging
import pygame

from ..config import Config
from ..errors import AssetNotReadyError
from ..game.state import GameState
from ..render.compositor import Compositor
from .renderer import Renderer

logger = logging.getLogger(__name__)


class Application:
    """
    Main application controller.

    Owns the renderer, the game state and the compositor, and runs the
    frame loop.
    """

    def __init__(self, config: Config):
        """
        Initialize the application.

        Args:
            config: Application configuration

        Raises:
            FontLoadError: If a font file is missing
            AtlasBuildError: If the glyph atlas cannot be built
            AssetLoadError: If a text image cannot be rasterized
        """
        self.config = config
        self.running = False

        # Initialize Pygame
        pygame.init()
        pygame.display.set_caption(config.window_title)

        # Create renderer (handles the window)
        self.renderer = Renderer(config)

        # Fonts, atlas, map and entities are all built here, once
        self.state = GameState.create(config)
        self.compositor = Compositor(config)

        # Timing
        self.clock = pygame.time.Clock()

        # Debug info
        self.frame_count = 0
        self.skipped_frames = 0

    def run(self) -> None:
        """Main application loop."""
        self.running = True

        while self.running:
            self.clock.tick(self.config.target_fps)
            self.frame_count += 1

            # Process events
            self._process_events()

            # Render
            self._render()

    def _process_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

    def _render(self) -> None:
        """Render the current frame."""
        surface = self.renderer.get_surface()

        try:
            self.compositor.draw(
                surface,
                self.state.atlas,
                self.state.map,
                self.state.entities,
                self.state.text_images,
            )
        except AssetNotReadyError as e:
            # Try again next tick
            self.skipped_frames += 1
            logger.debug(f"Frame {self.frame_count} skipped: {e}")
            return

        self.renderer.present()

    def cleanup(self) -> None:
        """Clean up resources."""
        self.renderer.cleanup()

        # Quit pygame
        pygame.quit()
