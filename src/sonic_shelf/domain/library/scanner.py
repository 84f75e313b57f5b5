"""
Music library discovery.

Walks directories for audio files and turns each one into a Track.
"""

import os
from pathlib import Path
from typing import Callable, Iterator, Optional

from loguru import logger

from .metadata import extract_track_metadata
from .models import Track

DEFAULT_FORMATS = (".mp3", ".ogg", ".flac")


def _raise_walk_error(error: OSError) -> None:
    raise error


def is_supported_format(local_path: Path, supported_formats: tuple[str, ...]) -> bool:
    """Check if file format is supported (extension compared case-insensitively)."""
    return local_path.suffix.lower() in {ext.lower() for ext in supported_formats}


def iter_candidate_files(directory: Path, follow_symlinks: bool = True) -> Iterator[Path]:
    """Yield every file under ``directory``, recursively, in sorted walk order.

    Symbolic links to directories are followed when ``follow_symlinks`` is
    set; a directory already visited (same device and inode) is not entered
    twice, so link cycles terminate.

    Raises:
        OSError: If ``directory`` or any directory below it cannot be listed
    """
    visited: set[tuple[int, int]] = set()

    for root, dirnames, filenames in os.walk(
        directory, followlinks=follow_symlinks, onerror=_raise_walk_error
    ):
        stat = os.stat(root)
        key = (stat.st_dev, stat.st_ino)
        if key in visited:
            logger.debug(f"Skipping already visited directory: {root}")
            dirnames[:] = []
            continue
        visited.add(key)

        dirnames.sort()
        for name in sorted(filenames):
            yield Path(root) / name


def scan_directory(
    directory: Path,
    supported_formats: tuple[str, ...] = DEFAULT_FORMATS,
    follow_symlinks: bool = True,
    extract: Callable[[str], Track] = extract_track_metadata,
    progress_callback: Optional[Callable[[str, Track], None]] = None,
) -> list[Track]:
    """Scan a directory for music files and extract metadata.

    Args:
        directory: Directory to scan
        supported_formats: File extensions to keep
        follow_symlinks: Whether to descend into symlinked directories
        extract: Builds a Track from a file path
        progress_callback: Optional callback function(local_path, track)

    Returns:
        List of Track objects in walk order

    Raises:
        OSError: If the directory cannot be traversed. Nothing is returned
            for a directory whose walk fails part way.
    """
    tracks = []

    for local_path in iter_candidate_files(directory, follow_symlinks):
        if not is_supported_format(local_path, supported_formats):
            continue
        if not local_path.is_file():
            continue

        track = extract(str(local_path))
        tracks.append(track)

        if progress_callback:
            progress_callback(str(local_path), track)

    logger.info(f"Scanned {directory}: {len(tracks)} tracks")
    return tracks
