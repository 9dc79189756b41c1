"""
Main entry point for the 'Eye Laser' asteroid game.
"""
import argparse
import logging
import random
import sys

from eye_laser import __version__
from eye_laser.config.game_settings import SCREEN_SETTINGS


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Eye Laser - destroy asteroids with lasers aimed by your head, using YOLO11-Pose"
    )
    parser.add_argument(
        "--version", action="store_true", help="Print version information and exit"
    )
    parser.add_argument(
        "--camera", type=int, default=0, help="Camera device ID to use (default: 0)"
    )
    parser.add_argument(
        "--model",
        type=str,
        default="yolo11n-pose.pt",
        help="Path to YOLO11-Pose model (default: yolo11n-pose.pt)",
    )
    parser.add_argument(
        "--device",
        type=str,
        default=None,
        help="Inference device, e.g. 'cpu' or 'cuda' (default: cuda if available)",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=0.5,
        help="Person detection confidence threshold (default: 0.5)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=SCREEN_SETTINGS["default_width"],
        help="Game window width (default: 1280)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=SCREEN_SETTINGS["default_height"],
        help="Game window height (default: 720)",
    )
    parser.add_argument(
        "--classic",
        action="store_true",
        help="Play without score and high score",
    )
    parser.add_argument(
        "--show-camera",
        action="store_true",
        help="Show the mirrored camera image behind the game",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for asteroid spawning"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)

    if args.version:
        print(f"Eye Laser version {__version__}")
        return 0

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')
    logger = logging.getLogger("AsteroidGame")

    # Imported late so --version works without the camera and model stack
    from eye_laser.games.asteroid_game import AsteroidGame

    rng = random.Random(args.seed) if args.seed is not None else None

    mode = "classic" if args.classic else "scoring"
    logger.info(f"Starting asteroid game in {mode} mode...")

    try:
        game = AsteroidGame(
            camera_id=args.camera,
            model_path=args.model,
            screen_width=args.width,
            screen_height=args.height,
            confidence_threshold=args.confidence,
            device=args.device,
            scoring=not args.classic,
            show_camera=args.show_camera,
            rng=rng
        )
    except RuntimeError as e:
        logger.error(str(e))
        return 1

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
