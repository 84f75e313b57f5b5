"""
Sonic Shelf - application wiring and the interactive session
"""

import argparse
from pathlib import Path

from loguru import logger

from sonic_shelf.core import config
from sonic_shelf.core import console
from sonic_shelf.core.output import setup_loguru
from sonic_shelf.domain import library, playback


def apply_overrides(cfg: config.Config, args: argparse.Namespace) -> config.Config:
    """Let command-line options take precedence over the config file."""
    if args.directories:
        cfg.music.library_paths = [str(Path(d).expanduser()) for d in args.directories]
    if args.log_level:
        cfg.logging.level = args.log_level
    if args.output:
        cfg.player.output = args.output
    return cfg


def build_library(cfg: config.Config) -> library.LibraryIndex:
    """Scan the configured directories into a new index.

    Directories that cannot be read are reported and skipped; the tracks
    from the others are kept.
    """
    index = library.LibraryIndex(
        supported_formats=cfg.music.supported_formats,
        follow_symlinks=cfg.music.follow_symlinks,
    )

    try:
        added = index.scan(cfg.music.library_paths)
        logger.info(f"Indexed {added} tracks from {len(index.source_dirs)} directories")
    except library.LibraryScanError as e:
        for directory, error in e.failures.items():
            console.warn(f"Could not scan {directory}: {error}")

    return index


def print_library_summary(index: library.LibraryIndex) -> None:
    """Print library statistics for --list."""
    stats = library.get_library_stats(index.tracks)

    overview = [
        f"Tracks:  {stats['total_tracks']}",
        f"Artists: {stats['artists']}",
        f"Albums:  {stats['albums']}",
        f"Genres:  {stats['genres']}",
    ]
    if stats["formats"]:
        formats = ", ".join(f"{ext} {count}" for ext, count in stats["formats"].items())
        overview.append(f"Formats: {formats}")

    console.print_section("📚 Library Overview:", overview)
    console.blank_line()
    console.print_section(
        "📁 Sources:",
        (f"[{number}] {directory}" for number, directory in enumerate(index.source_dirs)),
    )


def run(args: argparse.Namespace) -> int:
    """
    Run Sonic Shelf with parsed command-line arguments.

    Returns:
        Process exit code
    """
    config.ensure_directories()
    cfg = apply_overrides(config.load_config(args.config), args)

    setup_loguru(
        config.get_log_file_path(cfg),
        level=cfg.logging.level,
        max_file_size_mb=cfg.logging.max_file_size_mb,
        backup_count=cfg.logging.backup_count,
    )

    index = build_library(cfg)

    if args.list:
        print_library_summary(index)
        return 0

    if index.is_empty():
        console.warn("No music found. Add directories later with ':add <dir>'.")

    engine = playback.AudioEngine(
        playback.create_output_device(cfg.player), volume=cfg.player.volume
    )
    controller = playback.PlayerController(index, engine, volume=cfg.player.volume)
    engine.start()

    try:
        from .ui.blessed import run_interactive_ui

        run_interactive_ui(controller, cfg)
    except Exception:
        logger.exception("UI crashed")
        console.error("Sonic Shelf stopped unexpectedly, see the log file")
        return 1
    finally:
        controller.shutdown()

    return 0
