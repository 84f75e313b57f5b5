"""Shared fixtures: temporary music trees and fake playback collaborators."""

from pathlib import Path

import pytest

from sonic_shelf.domain.library import LibraryIndex, Track, build_track
from sonic_shelf.domain.playback import DecodeError, OutputDeviceError
from sonic_shelf.domain.playback.device import AudioSource


def filename_only(local_path: str) -> Track:
    """Track builder that ignores embedded tags (test files are empty)."""
    return build_track(local_path, {})


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.fixture
def music_tree(tmp_path: Path) -> dict[str, Path]:
    """Two library roots with nested folders and some non-audio files.

    music/
        Artist A - Song 1.mp3
        Artist A - Song 2.flac
        notes.txt
        sub/
            Artist B - Song 3.ogg
            LOUD - SHOUT.MP3
            cover.jpg
    other/
        Artist C - Song 4.mp3
    """
    music = tmp_path / "music"
    other = tmp_path / "other"

    touch(music / "Artist A - Song 1.mp3")
    touch(music / "Artist A - Song 2.flac")
    touch(music / "notes.txt")
    touch(music / "sub" / "Artist B - Song 3.ogg")
    touch(music / "sub" / "LOUD - SHOUT.MP3")
    touch(music / "sub" / "cover.jpg")
    touch(other / "Artist C - Song 4.mp3")

    return {"root": tmp_path, "music": music, "sub": music / "sub", "other": other}


@pytest.fixture
def library(music_tree: dict[str, Path]) -> LibraryIndex:
    """Index over both roots: four tracks from music/, one from other/."""
    index = LibraryIndex(extract=filename_only)
    index.scan([music_tree["music"], music_tree["other"]])
    return index


class FakeEngine:
    """Stands in for AudioEngine: records commands, replays queued events."""

    def __init__(self):
        self.submitted = []
        self.pending_events = []
        self.shut_down = False

    def submit(self, command) -> None:
        self.submitted.append(command)

    def poll_events(self) -> list:
        events, self.pending_events = self.pending_events, []
        return events

    def shutdown(self, timeout: float = 2.0) -> None:
        self.shut_down = True


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


class FakeSink:
    def __init__(self, number: int, log: list):
        self.number = number
        self.log = log

    def set_volume(self, level: float) -> None:
        self.log.append(("set_volume", self.number, level))

    def append(self, source: AudioSource) -> None:
        self.log.append(("append", self.number, source.path))

    def play(self) -> None:
        self.log.append(("play", self.number))

    def stop(self) -> None:
        self.log.append(("stop", self.number))


class FakeOutputDevice:
    """Output device that records every call made by the engine thread.

    Paths in ``undecodable`` raise DecodeError and paths in ``crashing`` raise
    a RuntimeError. ``open_error`` makes the device unavailable, ``open_crash``
    makes opening raise PermissionError and ``close_error`` makes close fail.
    """

    def __init__(
        self,
        undecodable=(),
        crashing=(),
        open_error: bool = False,
        open_crash: bool = False,
        close_error: bool = False,
    ):
        self.undecodable = set(undecodable)
        self.crashing = set(crashing)
        self.open_error = open_error
        self.open_crash = open_crash
        self.close_error = close_error
        self.log: list = []
        self.sinks = 0
        self.closed = False

    def open_default_output(self) -> str:
        if self.open_error:
            raise OutputDeviceError("no sound card")
        if self.open_crash:
            raise PermissionError("socket is not ours")
        self.log.append(("open",))
        return "handle"

    def decode(self, path: str) -> AudioSource:
        if path in self.crashing:
            raise RuntimeError("decoder crashed")
        if path in self.undecodable:
            raise DecodeError(path, "not audio")
        return AudioSource(path=path)

    def new_sink(self, handle: str) -> FakeSink:
        self.sinks += 1
        self.log.append(("new_sink", self.sinks))
        return FakeSink(self.sinks, self.log)

    def close(self, handle: str) -> None:
        if self.close_error:
            raise OSError("close failed")
        self.closed = True
        self.log.append(("close",))


@pytest.fixture
def fake_device() -> FakeOutputDevice:
    return FakeOutputDevice()


@pytest.fixture
def make_index():
    """Factory for indexes that build tracks from file names only."""

    def _make(*directories, **kwargs) -> LibraryIndex:
        index = LibraryIndex(extract=filename_only, **kwargs)
        if directories:
            index.scan(directories)
        return index

    return _make


@pytest.fixture
def make_device():
    """Factory for FakeOutputDevice with custom failure settings."""
    return FakeOutputDevice
