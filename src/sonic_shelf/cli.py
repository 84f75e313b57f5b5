"""
Sonic Shelf CLI - Entry point

Parses command-line options and hands over to the interactive player.
"""

import argparse
import sys
from pathlib import Path

from sonic_shelf.core.config import VALID_LOG_LEVELS, VALID_OUTPUTS


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the sonic-shelf command."""
    parser = argparse.ArgumentParser(
        prog="sonic-shelf",
        description="Sonic Shelf - a terminal player for your local music library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Keys: p play/stop, h/l prev/next, j/k move, -/+ volume, s shuffle,\n"
            "a queue, / search, Space select, Tab change view, : command, q quit"
        ),
    )

    parser.add_argument(
        "directories",
        nargs="*",
        metavar="DIR",
        help="Music directories to index (replaces library_paths from config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="Configuration file (default: ./config.toml or ~/.config/sonic-shelf/config.toml)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Scan the library, print a summary and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Override the log level from config",
    )
    parser.add_argument(
        "--output",
        choices=VALID_OUTPUTS,
        help="Audio output: auto (mpv if installed), mpv, or null (silent)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the sonic-shelf command."""
    args = build_parser().parse_args(argv)

    # Delegate to main interactive mode
    from .main import run

    sys.exit(run(args))


if __name__ == "__main__":
    main()
