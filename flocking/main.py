"""
Main entry point for Flocking.
Parses options, validates them and opens the flock window.
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import QTimer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flocking",
        description="Animate a flock of boids. Click to add a boid, "
                    "Space to pause, R to rebuild the flock.",
    )
    parser.add_argument("--flock-size", type=int, help="initial number of boids")
    parser.add_argument("--sight-range", type=float,
                        help="squared distance under which two boids are neighbors")
    parser.add_argument("--max-velocity", type=float, help="per-axis speed limit")
    parser.add_argument("--period", type=int, dest="tick_period_ms",
                        help="milliseconds between ticks")
    parser.add_argument("--seed", type=int, help="seed for reproducible flocks")
    parser.add_argument("--no-trail", action="store_true", help="do not draw trails")
    parser.add_argument("--dotted", action="store_true", help="draw trails as dots")
    parser.add_argument("--log-file", help="also write the log to this file")
    parser.add_argument("--debug", action="store_true", help="verbose console log")
    return parser


def options_from_args(args: argparse.Namespace) -> dict:
    """Collect only the options given on the command line."""
    options = {}
    for key in ("flock_size", "sight_range", "max_velocity", "tick_period_ms", "seed"):
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    if args.no_trail:
        options["draw_trail"] = False
    if args.dotted:
        options["draw_dotted"] = True
    return options


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Initialize logger first
    from flocking.utils.logger import logger, set_log_level, LogLevel

    if args.debug:
        set_log_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    from flocking.boids import FlockConfig
    from flocking.errors import ConfigurationError

    try:
        config = FlockConfig.from_options(options_from_args(args))
    except ConfigurationError as e:
        logger.error("Invalid options", component="APP", details=str(e))
        return 2

    logger.info("Flocking starting", component="APP")

    app = QApplication(sys.argv[:1])

    from flocking.gui.main_window import FlockWindow

    window = FlockWindow(config)
    window.show()
    # Wait for the first layout so the flock spawns across the real canvas size
    QTimer.singleShot(0, window.begin)

    try:
        return app.exec_()
    finally:
        logger.disable_file_logging()


if __name__ == "__main__":
    sys.exit(main())
