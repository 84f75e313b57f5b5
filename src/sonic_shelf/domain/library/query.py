"""
Read-only views over the track list.

Every function here is pure and recomputed on demand from the current
tracks; nothing is cached between calls.
"""

from collections import Counter
from pathlib import Path
from typing import Any, Sequence

from .models import Track

GROUP_FIELDS = ("artist", "album", "genre")


def group_by(tracks: Sequence[Track], field: str) -> list[str]:
    """Distinct values of ``field`` across tracks, sorted (case-sensitive).

    Raises:
        ValueError: If ``field`` is not one of artist, album or genre
    """
    if field not in GROUP_FIELDS:
        raise ValueError(f"Cannot group by {field!r}, expected one of {GROUP_FIELDS}")
    return sorted({getattr(track, field) for track in tracks})


def albums_with_artist(tracks: Sequence[Track]) -> list[tuple[str, str]]:
    """Each distinct album paired with one of its artists.

    The artist is the first one in sorted (album, artist) order, so the
    pairing is deterministic.
    """
    pairs = sorted({(track.album, track.artist) for track in tracks})
    albums: dict[str, str] = {}
    for album, artist in pairs:
        albums.setdefault(album, artist)
    return list(albums.items())


def tracks_by_artist(tracks: Sequence[Track], artist: str) -> list[tuple[int, Track]]:
    """All (position, track) pairs with an exact artist match, in library order."""
    return [
        (position, track)
        for position, track in enumerate(tracks)
        if track.artist == artist
    ]


def search(tracks: Sequence[Track], query: str) -> list[tuple[int, Track]]:
    """Search tracks by title, artist, or album (case-insensitive substring).

    An empty query matches nothing.
    """
    if not query:
        return []

    query = query.lower()
    return [
        (position, track)
        for position, track in enumerate(tracks)
        if query in track.title.lower()
        or query in track.artist.lower()
        or query in track.album.lower()
    ]


def get_library_stats(tracks: Sequence[Track]) -> dict[str, Any]:
    """Get statistics about the music library."""
    formats = Counter(Path(track.path).suffix.lower() for track in tracks)
    return {
        "total_tracks": len(tracks),
        "artists": len({track.artist for track in tracks}),
        "albums": len({track.album for track in tracks}),
        "genres": len({track.genre for track in tracks}),
        "formats": dict(sorted(formats.items())),
    }
