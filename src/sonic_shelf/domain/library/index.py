"""
In-memory library index.

Holds the flat list of discovered tracks and the directories they came from,
with incremental add/remove by source directory.
"""

import os
import random
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from .exceptions import DirectoryIndexError, DirectoryNotFoundError, LibraryScanError
from .metadata import extract_track_metadata
from .models import Track
from .scanner import DEFAULT_FORMATS, scan_directory


def normalize_directory(directory: str | Path) -> Path:
    """Expand ``~`` and make a directory absolute without resolving symlinks."""
    return Path(os.path.abspath(Path(directory).expanduser()))


class LibraryIndex:
    """Ordered tracks plus the ordered source directories they were found in.

    Every track path lies under one of ``source_dirs`` at the time it was
    added, and no path appears twice.
    """

    def __init__(
        self,
        supported_formats: Iterable[str] = DEFAULT_FORMATS,
        follow_symlinks: bool = True,
        extract: Callable[[str], Track] = extract_track_metadata,
    ):
        self.supported_formats = tuple(supported_formats)
        self.follow_symlinks = follow_symlinks
        self._extract = extract
        self._tracks: list[Track] = []
        self._source_dirs: list[Path] = []
        self._paths: set[str] = set()
        # path -> position, rebuilt lazily after any reorder or removal
        self._positions: Optional[dict[str, int]] = None

    @property
    def tracks(self) -> list[Track]:
        return self._tracks

    @property
    def source_dirs(self) -> list[Path]:
        return self._source_dirs

    def __len__(self) -> int:
        return len(self._tracks)

    def __getitem__(self, position: int) -> Track:
        return self._tracks[position]

    def is_empty(self) -> bool:
        return not self._tracks

    def position_of(self, path: str) -> Optional[int]:
        """Current position of the track with ``path``, or None if absent."""
        if path not in self._paths:
            return None
        if self._positions is None:
            self._positions = {
                track.path: position for position, track in enumerate(self._tracks)
            }
        return self._positions.get(path)

    def _scan_one(self, directory: Path) -> int:
        """Scan ``directory`` and append its new tracks. Returns how many were added."""
        found = scan_directory(
            directory,
            supported_formats=self.supported_formats,
            follow_symlinks=self.follow_symlinks,
            extract=self._extract,
        )

        added = 0
        for track in found:
            if track.path in self._paths:
                continue
            self._tracks.append(track)
            self._paths.add(track.path)
            added += 1
        self._positions = None

        if directory not in self._source_dirs:
            self._source_dirs.append(directory)
        return added

    def scan(self, directories: Iterable[str | Path]) -> int:
        """Scan several directories, keeping results from the ones that succeed.

        Returns:
            Number of tracks added

        Raises:
            LibraryScanError: After all directories were tried, if any of
                them could not be traversed
        """
        failures: dict[Path, OSError] = {}
        added = 0

        for entry in directories:
            directory = normalize_directory(entry)
            try:
                added += self._scan_one(directory)
            except OSError as e:
                logger.warning(f"Failed to scan {directory}: {e}")
                failures[directory] = e

        if failures:
            raise LibraryScanError(failures)
        return added

    def add_directory(self, directory: str | Path) -> int:
        """Scan a new directory into the library.

        Returns:
            Number of tracks added

        Raises:
            DirectoryNotFoundError: If the directory does not exist
            LibraryScanError: If it exists but cannot be traversed
        """
        directory = normalize_directory(directory)
        if not directory.is_dir():
            raise DirectoryNotFoundError(directory)

        try:
            added = self._scan_one(directory)
        except OSError as e:
            raise LibraryScanError({directory: e}) from e

        logger.info(f"Added directory {directory} ({added} new tracks)")
        return added

    def remove_directory(self, position: int) -> Path:
        """Drop a source directory and every track nested under it.

        Returns:
            The removed directory

        Raises:
            DirectoryIndexError: If ``position`` is out of range
        """
        if not 0 <= position < len(self._source_dirs):
            raise DirectoryIndexError(position, len(self._source_dirs))

        removed_dir = self._source_dirs[position]
        kept = [
            track
            for track in self._tracks
            if not Path(track.path).is_relative_to(removed_dir)
        ]
        removed = len(self._tracks) - len(kept)

        self._tracks = kept
        self._paths = {track.path for track in kept}
        self._positions = None
        del self._source_dirs[position]

        logger.info(f"Removed directory {removed_dir} ({removed} tracks)")
        return removed_dir

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Uniformly permute the tracks in place."""
        (rng or random).shuffle(self._tracks)
        self._positions = None
