"""
Music metadata extraction.

Reads embedded tags with Mutagen and falls back to parsing the file name
("Artist - Title") when a file carries no usable tags.
"""

import re
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from .models import UNKNOWN_ALBUM, UNKNOWN_ARTIST, UNKNOWN_GENRE, Track

FILENAME_SEPARATOR = " - "

# ID3 (MP3) frame names first, then Vorbis comment keys (OGG, FLAC)
TITLE_TAGS = ["TIT2", "TITLE", "title"]
ARTIST_TAGS = ["TPE1", "ARTIST", "artist"]
ALBUM_TAGS = ["TALB", "ALBUM", "album"]
GENRE_TAGS = ["TCON", "GENRE", "genre"]

_ARTIST_JOINERS = ("&", "feat.", "featuring")
_MULTI_SPACE = re.compile(r" {2,}")


def normalize_artist(artist: str) -> str:
    """Put spaces around artist joiners and collapse repeated spaces.

    >>> normalize_artist("A&B feat.C")
    'A & B feat. C'
    """
    for joiner in _ARTIST_JOINERS:
        artist = artist.replace(joiner, f" {joiner} ")
    return _MULTI_SPACE.sub(" ", artist).strip()


def extract_metadata_from_filename(local_path: str) -> dict[str, str]:
    """Extract artist and title from a "Artist - Title.ext" file name."""
    stem = Path(local_path).stem

    if FILENAME_SEPARATOR in stem:
        artist, title = stem.split(FILENAME_SEPARATOR, 1)
        return {"artist": normalize_artist(artist), "title": title}

    return {"artist": UNKNOWN_ARTIST, "title": stem}


def get_tag_value(audio_file: Any, tag_names: list[str]) -> Optional[str]:
    """Get tag value, trying multiple possible tag names."""
    tags = getattr(audio_file, "tags", None)
    if not tags:
        return None

    for tag_name in tag_names:
        try:
            value = tags.get(tag_name)
        except (KeyError, ValueError):
            # Vorbis comments raise ValueError for keys they cannot hold
            continue
        if not value:
            continue
        # ID3 frames expose .text, Vorbis comments are plain lists
        if hasattr(value, "text"):
            value = value.text
        if isinstance(value, list):
            value = value[0] if value else None
        if value:
            text = str(value).strip()
            if text:
                return text
    return None


def read_embedded_tags(local_path: str) -> dict[str, str]:
    """Read whichever of title/artist/album/genre the file carries.

    Returns an empty dict when Mutagen cannot read the file.
    """
    try:
        audio_file = MutagenFile(local_path)
    except (MutagenError, OSError, ValueError) as e:
        logger.debug(f"No readable tags in {local_path}: {e}")
        return {}

    if audio_file is None:
        return {}

    found = {
        "title": get_tag_value(audio_file, TITLE_TAGS),
        "artist": get_tag_value(audio_file, ARTIST_TAGS),
        "album": get_tag_value(audio_file, ALBUM_TAGS),
        "genre": get_tag_value(audio_file, GENRE_TAGS),
    }
    return {name: value for name, value in found.items() if value}


def build_track(local_path: str, tags: dict[str, str]) -> Track:
    """Combine the filename heuristic with embedded tags into a Track."""
    fallback = extract_metadata_from_filename(local_path)

    artist = tags.get("artist")
    return Track(
        path=local_path,
        title=tags.get("title") or fallback["title"],
        artist=normalize_artist(artist) if artist else fallback["artist"],
        album=tags.get("album") or UNKNOWN_ALBUM,
        genre=tags.get("genre") or UNKNOWN_GENRE,
    )


def extract_track_metadata(local_path: str) -> Track:
    """Build a Track for a file, preferring embedded tags over its name."""
    return build_track(local_path, read_embedded_tags(local_path))


def get_display_name(track: Track) -> str:
    """Get a display-friendly name for the track."""
    return f"{track.artist} - {track.title}"
