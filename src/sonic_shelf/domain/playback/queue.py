"""
Playback queue: user-ordered tracks consumed before linear advance.

Entries are chosen by library position but stored by track path, so a
shuffle does not change which track an entry refers to, and entries for
tracks that leave the library are dropped instead of pointing elsewhere.
"""

from collections import deque
from typing import Iterator

from loguru import logger

from sonic_shelf.domain.library.index import LibraryIndex


class PlaybackQueue:
    """FIFO of pending tracks, validated against the library it belongs to."""

    def __init__(self, library: LibraryIndex):
        self._library = library
        self._paths: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def enqueue(self, position: int) -> bool:
        """Append the track at ``position``. Out-of-range positions are ignored.

        Returns:
            True if an entry was added
        """
        if not 0 <= position < len(self._library):
            logger.debug(f"Ignoring queue request for invalid position {position}")
            return False
        self._paths.append(self._library[position].path)
        return True

    def dequeue_or_default(self, fallback: int) -> int:
        """Pop the front entry and return its current position.

        Entries whose track is no longer in the library are discarded on the
        way. Returns ``fallback`` when no usable entry remains.
        """
        while self._paths:
            path = self._paths.popleft()
            position = self._library.position_of(path)
            if position is not None:
                return position
            logger.debug(f"Dropping queued track no longer in library: {path}")
        return fallback

    def positions(self) -> list[int]:
        """Current library positions of the queued tracks, front first."""
        positions = []
        for path in self._paths:
            position = self._library.position_of(path)
            if position is not None:
                positions.append(position)
        return positions

    def discard_missing(self) -> int:
        """Drop entries whose track has left the library. Returns how many."""
        before = len(self._paths)
        self._paths = deque(
            path for path in self._paths if self._library.position_of(path) is not None
        )
        return before - len(self._paths)

    def clear(self) -> None:
        self._paths.clear()
