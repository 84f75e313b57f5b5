"""Tests for building view rows from a player snapshot."""

from pathlib import Path

import pytest

from sonic_shelf.domain.library import Track
from sonic_shelf.domain.playback import PlayerSnapshot
from sonic_shelf.ui.blessed.state import UIState
from sonic_shelf.ui.blessed.state_selectors import Row, build_rows, selected_row


@pytest.fixture
def snapshot() -> PlayerSnapshot:
    tracks = (
        Track("/m/1.mp3", "Blue in Green", "Miles Davis", "Kind of Blue", "Jazz"),
        Track("/m/2.mp3", "Teardrop", "Massive Attack", "Mezzanine", "Trip-Hop"),
        Track("/m/3.mp3", "So What", "Miles Davis", "Kind of Blue", "Jazz"),
        Track("/m/4.mp3", "Angel", "Massive Attack", "Mezzanine", "Trip-Hop"),
    )
    return PlayerSnapshot(
        tracks=tracks,
        current_index=0,
        is_playing=False,
        volume=1.0,
        queue=(3, 0),
        source_dirs=(Path("/m"),),
    )


class TestBuildRows:
    """Test rows for each view."""

    def test_songs(self, snapshot):
        rows = build_rows(snapshot, UIState(view_mode="songs"))
        assert rows == [
            Row("Blue in Green", 0),
            Row("Teardrop", 1),
            Row("So What", 2),
            Row("Angel", 3),
        ]

    def test_artists(self, snapshot):
        rows = build_rows(snapshot, UIState(view_mode="artists"))
        assert rows == [
            Row("Massive Attack", artist="Massive Attack"),
            Row("Miles Davis", artist="Miles Davis"),
        ]

    def test_artist_drill_down(self, snapshot):
        state = UIState(view_mode="artists", selected_artist="Miles Davis")
        assert build_rows(snapshot, state) == [Row("Blue in Green", 0), Row("So What", 2)]

    def test_albums_point_at_first_track(self, snapshot):
        rows = build_rows(snapshot, UIState(view_mode="albums"))
        assert rows == [
            Row("Kind of Blue (by Miles Davis)", 0),
            Row("Mezzanine (by Massive Attack)", 1),
        ]

    def test_genres(self, snapshot):
        rows = build_rows(snapshot, UIState(view_mode="genres"))
        assert rows == [Row("Jazz", 0), Row("Trip-Hop", 1)]

    def test_queue_in_order(self, snapshot):
        rows = build_rows(snapshot, UIState(view_mode="queue"))
        assert rows == [
            Row("Massive Attack - Angel", 3),
            Row("Miles Davis - Blue in Green", 0),
        ]

    def test_search(self, snapshot):
        state = UIState(view_mode="search", search_input="blue")
        assert build_rows(snapshot, state) == [
            Row("Miles Davis - Blue in Green", 0),
            Row("Miles Davis - So What", 2),
        ]

    def test_empty_search(self, snapshot):
        assert build_rows(snapshot, UIState(view_mode="search")) == []

    def test_empty_library(self):
        empty = PlayerSnapshot((), 0, False, 1.0, (), ())
        for view in ("songs", "artists", "albums", "genres", "queue", "search"):
            assert build_rows(empty, UIState(view_mode=view)) == []

    def test_unknown_view(self, snapshot):
        with pytest.raises(ValueError):
            build_rows(snapshot, UIState(view_mode="playlists"))


class TestSelectedRow:
    """Test row lookup under the cursor."""

    def test_in_range(self):
        rows = [Row("a", 0), Row("b", 1)]
        assert selected_row(rows, UIState(selected=1)) == Row("b", 1)

    def test_out_of_range(self):
        assert selected_row([], UIState()) is None
        assert selected_row([Row("a", 0)], UIState(selected=3)) is None
