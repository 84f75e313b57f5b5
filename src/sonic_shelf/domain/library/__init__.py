"""Library domain - file discovery, metadata and the in-memory index.

This domain handles:
- Track data model
- Metadata extraction (embedded tags and filename fallback)
- Directory scanning
- The library index and read-only query views
"""

# Models
from .models import UNKNOWN_ALBUM, UNKNOWN_ARTIST, UNKNOWN_GENRE, Track

# Errors
from .exceptions import (
    DirectoryIndexError,
    DirectoryNotFoundError,
    LibraryError,
    LibraryScanError,
)

# Metadata
from .metadata import (
    build_track,
    extract_metadata_from_filename,
    extract_track_metadata,
    get_display_name,
    get_tag_value,
    normalize_artist,
    read_embedded_tags,
)

# Scanning
from .scanner import is_supported_format, iter_candidate_files, scan_directory

# Index and views
from .index import LibraryIndex, normalize_directory
from .query import (
    albums_with_artist,
    get_library_stats,
    group_by,
    search,
    tracks_by_artist,
)

__all__ = [
    # Models
    "Track",
    "UNKNOWN_ALBUM",
    "UNKNOWN_ARTIST",
    "UNKNOWN_GENRE",
    # Errors
    "LibraryError",
    "DirectoryNotFoundError",
    "DirectoryIndexError",
    "LibraryScanError",
    # Metadata
    "build_track",
    "extract_metadata_from_filename",
    "extract_track_metadata",
    "get_display_name",
    "get_tag_value",
    "normalize_artist",
    "read_embedded_tags",
    # Scanner
    "is_supported_format",
    "iter_candidate_files",
    "scan_directory",
    # Index
    "LibraryIndex",
    "normalize_directory",
    # Query
    "albums_with_artist",
    "get_library_stats",
    "group_by",
    "search",
    "tracks_by_artist",
]
