"""
Entry point for AimRush.

Run from the repository root:
    python -m games.AimRush.main --difficulty hard --resolution 1024x600
"""

import argparse
from typing import List, Optional, Tuple

from aimrush.logging import configure_logging, get_logger
from games.AimRush import config
from games.AimRush.game_info import ARGUMENTS, DESCRIPTION, NAME, get_engine

log = get_logger('main')


def parse_resolution(value: str) -> Tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a (width, height) tuple.

    Raises:
        argparse.ArgumentTypeError: If the value is malformed or not positive
    """
    try:
        width, height = (int(part) for part in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Resolution must look like 1280x720, got {value!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Resolution must be positive, got {value!r}")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI from the ARGUMENTS table in game_info."""
    parser = argparse.ArgumentParser(prog=NAME, description=DESCRIPTION)
    for argument in ARGUMENTS:
        options = {key: value for key, value in argument.items() if key != 'name'}
        if argument['name'] == '--resolution':
            options['type'] = parse_resolution
        parser.add_argument(argument['name'], **options)
    return parser


def engine_options(args: argparse.Namespace) -> dict:
    """Translate parsed arguments into GameEngine keyword arguments."""
    width, height = args.resolution or (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
    return {
        'width': width,
        'height': height,
        'difficulty': args.difficulty,
        'theme': args.theme,
        'seed': args.seed if args.seed is not None else config.RNG_SEED,
        'audio_enabled': not args.no_audio,
        'haptics_enabled': not args.no_haptics,
    }


def main(argv: Optional[List[str]] = None):
    """Parse the command line and run the game."""
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    options = engine_options(args)
    log.info("Starting %s with %s", NAME, options)
    engine = get_engine(**options)

    try:
        # Run the game loop
        engine.run()
    finally:
        # Ensure pygame quits cleanly
        engine.quit()


if __name__ == "__main__":
    main()
