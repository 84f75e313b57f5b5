"""
Player controller: the only code that changes playback state.

Owns the library index, the playback queue, the current-track cursor, the
playing flag and the volume. Every change that needs sound is forwarded to
the AudioEngine as a command; the controller never touches the device.

``is_playing`` is optimistic: it turns True when Play is sent and only turns
False again on stop or when the engine reports that the Play failed.
"""

import random
from pathlib import Path
from typing import NamedTuple, Optional

from loguru import logger

from sonic_shelf.domain.library.index import LibraryIndex
from sonic_shelf.domain.library.models import Track

from .commands import Event, Play, PlaybackFailed, SetVolume, Stop
from .engine import AudioEngine
from .queue import PlaybackQueue


class PlayerSnapshot(NamedTuple):
    """Immutable copy of player state, taken once per UI frame."""

    tracks: tuple[Track, ...]
    current_index: int
    is_playing: bool
    volume: float
    queue: tuple[int, ...]
    source_dirs: tuple[Path, ...]
    last_error: Optional[str] = None

    @property
    def current_track(self) -> Optional[Track]:
        if not self.tracks:
            return None
        return self.tracks[self.current_index]


class PlayerController:
    """State machine over {stopped, playing} plus a cursor into the library."""

    def __init__(
        self,
        library: LibraryIndex,
        engine: AudioEngine,
        volume: float = 1.0,
        rng: Optional[random.Random] = None,
    ):
        self.library = library
        self.queue = PlaybackQueue(library)
        self._engine = engine
        self._rng = rng or random.Random()
        self.current_index = 0
        self.is_playing = False
        self.volume = max(0.0, min(1.0, volume))
        self.last_error: Optional[str] = None
        self._play_request = 0

    @property
    def tracks(self) -> list[Track]:
        return self.library.tracks

    @property
    def current_track(self) -> Optional[Track]:
        if self.library.is_empty():
            return None
        return self.library[self.current_index]

    # --- playback -----------------------------------------------------------

    def play_current(self) -> None:
        """Start the current track. Does nothing with an empty library."""
        track = self.current_track
        if track is None:
            return

        self._play_request += 1
        self._engine.submit(Play(track.path, request=self._play_request))
        self.is_playing = True
        self.last_error = None
        logger.debug(f"Play requested: {track.path}")

    def stop(self) -> None:
        """Stop playback. Safe to call when already stopped."""
        self._engine.submit(Stop())
        self.is_playing = False

    def toggle_playback(self) -> None:
        if self.is_playing:
            self.stop()
        else:
            self.play_current()

    def next(self) -> None:
        """Advance to the next queued track, or the next track in the library.

        Queue entries take priority. Without one the cursor moves forward,
        wrapping to the first track. Playback continues if it was running.
        """
        count = len(self.library)
        if count == 0:
            return

        linear = (self.current_index + 1) % count
        self.current_index = self.queue.dequeue_or_default(linear)
        if self.is_playing:
            self.play_current()

    def previous(self) -> None:
        """Move back one track, wrapping to the last track from the first."""
        count = len(self.library)
        if count == 0:
            return

        self.current_index = (self.current_index - 1) % count
        if self.is_playing:
            self.play_current()

    def select(self, position: int) -> None:
        """Make ``position`` the current track and play it."""
        if not 0 <= position < len(self.library):
            return
        self.current_index = position
        self.play_current()

    def set_volume(self, delta: float) -> None:
        """Change volume by ``delta``, clamped to 0.0 - 1.0.

        The new level is always sent so it applies to the next sink even
        while stopped.
        """
        self.volume = max(0.0, min(1.0, self.volume + delta))
        self._engine.submit(SetVolume(self.volume))

    def shuffle(self) -> None:
        """Randomly reorder the library and jump to its first track.

        Queued tracks keep referring to the same files at their new
        positions.
        """
        self.library.shuffle(self._rng)
        self.current_index = 0
        logger.info(f"Shuffled {len(self.library)} tracks")
        if self.is_playing:
            self.play_current()

    def add_to_queue(self, position: int) -> bool:
        """Queue the track at ``position``; invalid positions are ignored.

        Returns:
            True if the track was queued
        """
        return self.queue.enqueue(position)

    # --- library ------------------------------------------------------------

    def add_directory(self, directory: str | Path) -> int:
        """Index another directory. Errors from the index propagate.

        Returns:
            Number of tracks added
        """
        return self.library.add_directory(directory)

    def remove_directory(self, position: int) -> Path:
        """Remove a source directory and its tracks. Errors propagate.

        The cursor follows the current track if it survives. If it was
        removed, the cursor is clamped into range and playback stops.
        """
        current = self.current_track
        removed_dir = self.library.remove_directory(position)
        self.queue.discard_missing()

        surviving = (
            self.library.position_of(current.path) if current is not None else None
        )
        if surviving is not None:
            self.current_index = surviving
            return removed_dir

        self.current_index = min(self.current_index, max(len(self.library) - 1, 0))
        if self.is_playing:
            self.stop()
        return removed_dir

    # --- feedback -----------------------------------------------------------

    def poll_events(self) -> list[Event]:
        """Apply engine notifications published since the last call."""
        events = self._engine.poll_events()
        for event in events:
            if isinstance(event, PlaybackFailed):
                logger.warning(f"Playback failed for {event.path}: {event.reason}")
                current = self.current_track
                if (
                    event.request == self._play_request
                    and current is not None
                    and current.path == event.path
                ):
                    self.is_playing = False
                    self.last_error = event.reason
        return events

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            tracks=tuple(self.library.tracks),
            current_index=self.current_index,
            is_playing=self.is_playing,
            volume=self.volume,
            queue=tuple(self.queue.positions()),
            source_dirs=tuple(self.library.source_dirs),
            last_error=self.last_error,
        )

    def shutdown(self) -> None:
        """Stop the engine worker."""
        self._engine.shutdown()
