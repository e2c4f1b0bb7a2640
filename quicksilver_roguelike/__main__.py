"""
Application entry point.

Usage:
    python -m quicksilver_roguelike [options]

Options:
    --verbose       Enable debug logging
    --fps N         Target frame rate [default: 60]
    --assets DIR    Directory containing mononoki-Regular.ttf and square.ttf
"""

import argparse
import logging
import sys
from pathlib import Path

import pygame

from . import __version__
from .config import Config
from .core.app import Application
from .errors import RoguelikeError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    # Console handler
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)

    # Root logger
    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)

    logging.info("Logging initialized")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description=f"Quicksilver Roguelike v{__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frame rate (default: 60)"
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=None,
        help="Font directory (default: assets/fonts)"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging first
    setup_logging(verbose=args.verbose)

    logger = logging.getLogger(__name__)
    logger.info("Quicksilver Roguelike starting...")

    config = Config(target_fps=args.fps, asset_dir=args.assets)

    try:
        app = Application(config)
    except RoguelikeError as e:
        logger.error(f"Startup failed: {e}")
        pygame.quit()
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        app.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
