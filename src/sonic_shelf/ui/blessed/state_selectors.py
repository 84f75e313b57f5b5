"""Selectors that turn a player snapshot into the rows of the current view.

Rows are rebuilt from a fresh snapshot every frame; a row's ``position`` is
the library position at the time of that snapshot, so key handlers never act
on positions from an older library order.
"""

from typing import NamedTuple, Optional

from sonic_shelf.domain.library import (
    albums_with_artist,
    group_by,
    search,
    tracks_by_artist,
)
from sonic_shelf.domain.library.metadata import get_display_name
from sonic_shelf.domain.playback import PlayerSnapshot

from .state import UIState


class Row(NamedTuple):
    """One line of the library browser."""

    label: str
    position: Optional[int] = None  # Library position this row plays/queues
    artist: Optional[str] = None  # Set on artist rows (drill-down target)


def _first_position(snapshot: PlayerSnapshot, field: str, value: str) -> Optional[int]:
    for position, track in enumerate(snapshot.tracks):
        if getattr(track, field) == value:
            return position
    return None


def build_rows(snapshot: PlayerSnapshot, state: UIState) -> list[Row]:
    """Rows for ``state.view_mode`` computed from ``snapshot``."""
    tracks = snapshot.tracks
    view = state.view_mode

    if view == "songs":
        return [Row(track.title, position) for position, track in enumerate(tracks)]

    if view == "artists":
        if state.selected_artist is not None:
            return [
                Row(track.title, position)
                for position, track in tracks_by_artist(tracks, state.selected_artist)
            ]
        return [Row(artist, artist=artist) for artist in group_by(tracks, "artist")]

    if view == "albums":
        return [
            Row(f"{album} (by {artist})", _first_position(snapshot, "album", album))
            for album, artist in albums_with_artist(tracks)
        ]

    if view == "genres":
        return [
            Row(genre, _first_position(snapshot, "genre", genre))
            for genre in group_by(tracks, "genre")
        ]

    if view == "queue":
        return [
            Row(get_display_name(tracks[position]), position)
            for position in snapshot.queue
        ]

    if view == "search":
        return [
            Row(get_display_name(track), position)
            for position, track in search(tracks, state.search_input)
        ]

    raise ValueError(f"Unknown view mode: {view}")


def selected_row(rows: list[Row], state: UIState) -> Optional[Row]:
    """The row under the cursor, or None when the view is empty."""
    if 0 <= state.selected < len(rows):
        return rows[state.selected]
    return None
