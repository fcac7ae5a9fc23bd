"""
Application entry point.

Usage:
    python -m rotating_square [options]

Options:
    --width N       Native surface width in pixels [default: 400]
    --height N      Native surface height in pixels [default: 400]
    --scale N       Display scale factor (1, 2, 3 or 4) [default: 1]
    --fps N         Target frame rate [default: 60]
    --fullscreen    Run in fullscreen mode
    --show-fps      Draw an FPS counter
    --dev           Development mode (debug logging, FPS counter)
    --verbose, -v   Enable debug logging

Keys:
    r, g, b, w      Rotate about vertex 0, 1, 2 or 3
"""

import argparse
import logging
import sys

from . import __version__
from .config import Config
from .core.app import Application
from .core.display import DisplayError


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
        description=f"Rotating Square v{__version__}"
    )
    parser.add_argument(
        "--width", type=int, default=400,
        help="Native surface width in pixels (default: 400)"
    )
    parser.add_argument(
        "--height", type=int, default=400,
        help="Native surface height in pixels (default: 400)"
    )
    parser.add_argument(
        "--scale", type=int, default=1, choices=[1, 2, 3, 4],
        help="Display scale factor (default: 1)"
    )
    parser.add_argument(
        "--fps", type=int, default=60,
        help="Target frame rate (default: 60)"
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Run in fullscreen mode"
    )
    parser.add_argument(
        "--show-fps",
        action="store_true",
        help="Draw an FPS counter"
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Enable development mode (debug logging, FPS counter)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from parsed arguments."""
    return Config(
        native_width=args.width,
        native_height=args.height,
        scale_factor=args.scale,
        fullscreen=args.fullscreen,
        target_fps=args.fps,
        dev_mode=args.dev,
        show_fps=args.show_fps
    )


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging first
    setup_logging(verbose=args.verbose or args.dev)

    logger = logging.getLogger(__name__)
    logger.info(f"Rotating Square v{__version__} starting...")

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    logger.info(f"Config: size={config.native_width}x{config.native_height}, scale={config.scale_factor}, fps={config.target_fps}")

    try:
        app = Application(config)
    except DisplayError as e:
        logger.error(f"Cannot start: {e}")
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
    finally:
        app.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
