"""Tests for the playback queue."""

import random

from sonic_shelf.domain.playback import PlaybackQueue


class TestEnqueue:
    """Tests for adding entries."""

    def test_valid_positions(self, library) -> None:
        queue = PlaybackQueue(library)
        assert queue.enqueue(3)
        assert queue.enqueue(0)
        assert queue.positions() == [3, 0]
        assert len(queue) == 2

    def test_out_of_range_is_ignored(self, library) -> None:
        """Invalid positions add nothing."""
        queue = PlaybackQueue(library)
        assert not queue.enqueue(5)
        assert not queue.enqueue(-1)
        assert len(queue) == 0

    def test_same_track_twice(self, library) -> None:
        """A track may be queued more than once."""
        queue = PlaybackQueue(library)
        queue.enqueue(1)
        queue.enqueue(1)
        assert queue.positions() == [1, 1]

    def test_stores_paths(self, library) -> None:
        queue = PlaybackQueue(library)
        queue.enqueue(2)
        assert list(queue) == [library[2].path]


class TestDequeue:
    """Tests for consuming entries."""

    def test_fifo(self, library) -> None:
        queue = PlaybackQueue(library)
        queue.enqueue(4)
        queue.enqueue(2)
        assert queue.dequeue_or_default(0) == 4
        assert queue.dequeue_or_default(0) == 2

    def test_fallback_when_empty(self, library) -> None:
        queue = PlaybackQueue(library)
        assert queue.dequeue_or_default(3) == 3

    def test_follows_track_through_shuffle(self, library) -> None:
        """An entry keeps pointing at the same track after a shuffle."""
        queue = PlaybackQueue(library)
        queue.enqueue(0)
        path = library[0].path

        library.shuffle(random.Random(1))

        assert library[queue.dequeue_or_default(0)].path == path

    def test_skips_entries_for_removed_tracks(self, library, music_tree) -> None:
        """Entries whose track left the library are dropped on the way."""
        queue = PlaybackQueue(library)
        queue.enqueue(0)
        queue.enqueue(4)

        library.remove_directory(0)

        assert queue.dequeue_or_default(99) == 0
        assert queue.dequeue_or_default(99) == 99


class TestMaintenance:
    """Tests for pruning and clearing."""

    def test_discard_missing(self, library) -> None:
        queue = PlaybackQueue(library)
        queue.enqueue(1)
        queue.enqueue(4)
        queue.enqueue(2)

        library.remove_directory(0)

        assert queue.discard_missing() == 2
        assert queue.positions() == [0]

    def test_positions_skip_missing(self, library) -> None:
        """positions() only lists tracks still in the library."""
        queue = PlaybackQueue(library)
        queue.enqueue(0)
        queue.enqueue(4)
        library.remove_directory(1)
        assert queue.positions() == [0]

    def test_clear(self, library) -> None:
        queue = PlaybackQueue(library)
        queue.enqueue(0)
        queue.clear()
        assert len(queue) == 0
