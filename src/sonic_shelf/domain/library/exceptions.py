"""Library-specific exceptions for error handling."""

from pathlib import Path


class LibraryError(Exception):
    """Base exception for library operations."""

    pass


class DirectoryNotFoundError(LibraryError):
    """Raised when a directory to add does not exist."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"Directory does not exist: {directory}")


class DirectoryIndexError(LibraryError, IndexError):
    """Raised when a source directory position is out of range."""

    def __init__(self, position: int, count: int):
        self.position = position
        self.count = count
        super().__init__(f"Invalid directory index {position} (have {count})")


class LibraryScanError(LibraryError, OSError):
    """Raised when one or more directories could not be traversed.

    Tracks from directories that scanned cleanly are kept; ``failures`` maps
    each failed directory to the underlying OS error.
    """

    def __init__(self, failures: dict[Path, OSError]):
        self.failures = failures
        names = ", ".join(str(d) for d in failures)
        super().__init__(f"Could not scan: {names}")
