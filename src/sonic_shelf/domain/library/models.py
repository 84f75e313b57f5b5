"""
Music library domain models.

Contains data structures for representing music tracks.
"""

from typing import NamedTuple

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"
UNKNOWN_GENRE = "Unknown Genre"


class Track(NamedTuple):
    """Represents one indexed audio file with its metadata.

    Tracks are built once at discovery time and never mutated. The path is
    the track's identity within the library.
    """

    path: str
    title: str
    artist: str = UNKNOWN_ARTIST
    album: str = UNKNOWN_ALBUM
    genre: str = UNKNOWN_GENRE
