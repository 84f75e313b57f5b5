"""Tests for the player controller state machine."""

import random

import pytest

from sonic_shelf.domain.library import DirectoryIndexError, DirectoryNotFoundError
from sonic_shelf.domain.playback import (
    Play,
    PlaybackFailed,
    PlaybackStarted,
    PlayerController,
    SetVolume,
    Stop,
)


@pytest.fixture
def controller(library, fake_engine) -> PlayerController:
    return PlayerController(library, fake_engine, volume=0.5, rng=random.Random(0))


def path_at(controller: PlayerController, position: int) -> str:
    return controller.library[position].path


def failure_of(command: Play, reason: str) -> PlaybackFailed:
    """The event the engine publishes when ``command`` cannot be played."""
    return PlaybackFailed(command.path, reason, request=command.request)


class TestPlayStop:
    """Tests for play, stop and toggle."""

    def test_initial_state(self, controller) -> None:
        assert controller.current_index == 0
        assert not controller.is_playing
        assert controller.volume == 0.5
        assert controller.current_track.title == "Song 1"

    def test_play_current(self, controller, fake_engine) -> None:
        controller.play_current()
        assert controller.is_playing
        assert fake_engine.submitted == [Play(path_at(controller, 0))]

    def test_toggle(self, controller, fake_engine) -> None:
        controller.toggle_playback()
        controller.toggle_playback()
        assert not controller.is_playing
        assert fake_engine.submitted == [Play(path_at(controller, 0)), Stop()]

    def test_stop_when_stopped(self, controller, fake_engine) -> None:
        """Stopping twice is harmless."""
        controller.stop()
        controller.stop()
        assert not controller.is_playing

    def test_empty_library(self, make_index, fake_engine) -> None:
        """Playback commands are no-ops without tracks."""
        controller = PlayerController(make_index(), fake_engine)

        controller.play_current()
        controller.next()
        controller.previous()
        controller.select(0)

        assert controller.current_track is None
        assert not controller.is_playing
        assert fake_engine.submitted == []

    def test_volume_is_clamped_on_creation(self, library, fake_engine) -> None:
        assert PlayerController(library, fake_engine, volume=3.0).volume == 1.0


class TestNavigation:
    """Tests for next, previous and select."""

    def test_next_while_stopped_only_moves(self, controller, fake_engine) -> None:
        controller.next()
        assert controller.current_index == 1
        assert fake_engine.submitted == []

    def test_next_while_playing_plays(self, controller, fake_engine) -> None:
        controller.play_current()
        controller.next()
        assert fake_engine.submitted[-1] == Play(path_at(controller, 1))

    def test_next_wraps(self, controller) -> None:
        controller.current_index = 4
        controller.next()
        assert controller.current_index == 0

    def test_previous_wraps(self, controller) -> None:
        controller.previous()
        assert controller.current_index == 4

    def test_queue_takes_priority(self, controller) -> None:
        """Queued tracks come first, then linear order resumes from there."""
        controller.add_to_queue(3)
        controller.add_to_queue(1)

        controller.next()
        assert controller.current_index == 3
        controller.next()
        assert controller.current_index == 1
        controller.next()
        assert controller.current_index == 2

    def test_add_to_queue_invalid(self, controller) -> None:
        assert not controller.add_to_queue(9)
        assert len(controller.queue) == 0

    def test_select_plays(self, controller, fake_engine) -> None:
        controller.select(2)
        assert controller.current_index == 2
        assert controller.is_playing
        assert fake_engine.submitted == [Play(path_at(controller, 2))]

    def test_select_out_of_range(self, controller, fake_engine) -> None:
        controller.select(5)
        assert controller.current_index == 0
        assert fake_engine.submitted == []


class TestVolume:
    """Tests for volume changes."""

    def test_step_up_and_down(self, controller, fake_engine) -> None:
        controller.set_volume(0.25)
        controller.set_volume(-0.5)
        assert controller.volume == pytest.approx(0.25)
        assert fake_engine.submitted == [SetVolume(0.75), SetVolume(0.25)]

    def test_clamped(self, controller, fake_engine) -> None:
        controller.set_volume(2.0)
        assert controller.volume == 1.0
        controller.set_volume(-5.0)
        assert controller.volume == 0.0
        assert fake_engine.submitted == [SetVolume(1.0), SetVolume(0.0)]


class TestShuffle:
    """Tests for shuffling from the controller."""

    def test_resets_cursor(self, controller) -> None:
        controller.current_index = 3
        controller.shuffle()
        assert controller.current_index == 0
        assert len(controller.tracks) == 5

    def test_replays_when_playing(self, controller, fake_engine) -> None:
        controller.play_current()
        controller.shuffle()
        assert fake_engine.submitted[-1] == Play(path_at(controller, 0))

    def test_stopped_stays_silent(self, controller, fake_engine) -> None:
        controller.shuffle()
        assert fake_engine.submitted == []


class TestDirectories:
    """Tests for adding and removing directories through the controller."""

    def test_add_directory(self, make_index, fake_engine, music_tree) -> None:
        controller = PlayerController(make_index(music_tree["other"]), fake_engine)
        assert controller.add_directory(music_tree["music"]) == 4
        assert len(controller.tracks) == 5

    def test_add_missing_directory(self, controller, music_tree) -> None:
        with pytest.raises(DirectoryNotFoundError):
            controller.add_directory(music_tree["root"] / "missing")

    def test_cursor_follows_surviving_track(self, controller, fake_engine) -> None:
        """Removing another directory keeps the current track and playback."""
        controller.select(4)
        current = controller.current_track

        controller.remove_directory(0)

        assert controller.current_track == current
        assert controller.current_index == 0
        assert controller.is_playing

    def test_removed_current_track_stops(
        self, controller, fake_engine, music_tree
    ) -> None:
        """Removing the playing track clamps the cursor and stops."""
        controller.select(3)

        removed = controller.remove_directory(0)

        assert removed == music_tree["music"]
        assert controller.current_index == 0
        assert not controller.is_playing
        assert fake_engine.submitted[-1] == Stop()

    def test_removing_everything(self, controller) -> None:
        controller.remove_directory(1)
        controller.remove_directory(0)
        assert controller.current_index == 0
        assert controller.current_track is None

    def test_queue_is_pruned(self, controller) -> None:
        controller.add_to_queue(0)
        controller.add_to_queue(4)
        controller.remove_directory(0)
        assert list(controller.queue.positions()) == [0]
        assert len(controller.queue) == 1

    def test_invalid_position(self, controller) -> None:
        with pytest.raises(DirectoryIndexError):
            controller.remove_directory(2)


class TestEvents:
    """Tests for handling engine feedback."""

    def test_failure_of_current_track_stops(self, controller, fake_engine) -> None:
        controller.play_current()
        path = path_at(controller, 0)
        fake_engine.pending_events = [failure_of(fake_engine.submitted[-1], "corrupt")]

        events = controller.poll_events()

        assert events == [PlaybackFailed(path, "corrupt")]
        assert not controller.is_playing
        assert controller.last_error == "corrupt"

    def test_stale_failure_is_ignored(self, controller, fake_engine) -> None:
        """A failure for a track that is no longer current changes nothing."""
        controller.play_current()
        first_play = fake_engine.submitted[-1]
        controller.select(1)
        fake_engine.pending_events = [failure_of(first_play, "corrupt")]

        controller.poll_events()

        assert controller.is_playing
        assert controller.last_error is None

    def test_next_play_clears_error(self, controller, fake_engine) -> None:
        controller.play_current()
        fake_engine.pending_events = [failure_of(fake_engine.submitted[-1], "bad")]
        controller.poll_events()

        controller.select(1)

        assert controller.last_error is None

    def test_failure_of_replaced_play_of_same_track(
        self, controller, fake_engine
    ) -> None:
        """Playing the same track twice ignores the first attempt's failure."""
        controller.play_current()
        first_play = fake_engine.submitted[-1]
        controller.next()
        controller.previous()
        assert fake_engine.submitted[-1].path == first_play.path

        fake_engine.pending_events = [failure_of(first_play, "device busy")]
        controller.poll_events()

        assert controller.is_playing
        assert controller.last_error is None

    def test_each_play_gets_a_new_request(self, controller, fake_engine) -> None:
        controller.play_current()
        controller.stop()
        controller.play_current()
        plays = [c for c in fake_engine.submitted if isinstance(c, Play)]
        assert [p.request for p in plays] == [1, 2]

    def test_started_event_passes_through(self, controller, fake_engine) -> None:
        fake_engine.pending_events = [PlaybackStarted("/m/a.mp3")]
        assert controller.poll_events() == [PlaybackStarted("/m/a.mp3")]


class TestSnapshot:
    """Tests for the per-frame snapshot."""

    def test_contents(self, controller, music_tree) -> None:
        controller.add_to_queue(2)
        controller.select(1)

        snap = controller.snapshot()

        assert snap.current_index == 1
        assert snap.is_playing
        assert snap.volume == 0.5
        assert snap.queue == (2,)
        assert snap.source_dirs == (music_tree["music"], music_tree["other"])
        assert snap.current_track.title == "Song 2"
        assert len(snap.tracks) == 5

    def test_snapshot_is_detached(self, controller) -> None:
        """Later changes do not leak into an earlier snapshot."""
        snap = controller.snapshot()
        controller.remove_directory(0)
        assert len(snap.tracks) == 5


def test_shutdown_stops_engine(controller, fake_engine) -> None:
    controller.shutdown()
    assert fake_engine.shut_down
