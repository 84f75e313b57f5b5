"""Playback-specific exceptions for error handling."""


class PlaybackError(Exception):
    """Base exception for playback operations."""

    pass


class DecodeError(PlaybackError):
    """Raised when a file cannot be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode {path}: {reason}")


class OutputDeviceError(PlaybackError):
    """Raised when the audio output device is unavailable or stops responding."""

    pass
