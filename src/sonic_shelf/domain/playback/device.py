"""
Audio output devices for the playback engine.

An output device opens a handle, checks that files are decodable, and hands
out sinks that play one source each. The engine is the only caller; nothing
here is thread-safe on its own.

Two devices are provided:
- MpvOutputDevice drives an idle mpv process over its JSON IPC socket
- NullOutputDevice validates files but produces no sound
"""

import json
import os
import socket
import subprocess
import tempfile
import time
from pathlib import Path
from typing import Any, NamedTuple, Optional, Protocol

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from sonic_shelf.core.config import PlayerConfig

from .exceptions import DecodeError, OutputDeviceError

MPV_SOCKET_TIMEOUT = 5.0
MPV_COMMAND_TIMEOUT = 2.0


class AudioSource(NamedTuple):
    """A file that passed decoding checks and is ready to append to a sink."""

    path: str
    duration: Optional[float] = None


class Sink(Protocol):
    def set_volume(self, level: float) -> None: ...

    def append(self, source: AudioSource) -> None: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...


class OutputDevice(Protocol):
    def open_default_output(self) -> Any: ...

    def decode(self, path: str) -> AudioSource: ...

    def new_sink(self, handle: Any) -> Sink: ...

    def close(self, handle: Any) -> None: ...


def probe_audio(path: str) -> AudioSource:
    """Open ``path`` and parse its audio stream header.

    Raises:
        DecodeError: If the file is missing, unreadable, or not audio
    """
    try:
        with open(path, "rb"):
            pass
    except OSError as e:
        raise DecodeError(path, e.strerror or str(e)) from e

    try:
        audio_file = MutagenFile(path)
    except (MutagenError, ValueError) as e:
        raise DecodeError(path, str(e) or type(e).__name__) from e

    if audio_file is None:
        raise DecodeError(path, "unrecognized audio format")

    duration = getattr(getattr(audio_file, "info", None), "length", None)
    return AudioSource(path=path, duration=duration)


# --- mpv ---------------------------------------------------------------------


class MpvHandle(NamedTuple):
    socket_path: str
    process: subprocess.Popen


def check_mpv_available() -> bool:
    """Check if MPV is available on the system."""
    try:
        result = subprocess.run(
            ["mpv", "--version"], capture_output=True, text=True, timeout=5
        )
        return result.returncode == 0
    except (subprocess.SubprocessError, FileNotFoundError, OSError):
        return False


def send_mpv_command(socket_path: Optional[str], command: dict[str, Any]) -> bool:
    """Send JSON IPC command to MPV."""
    if not socket_path or not os.path.exists(socket_path):
        return False

    try:
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
            sock.settimeout(MPV_COMMAND_TIMEOUT)
            sock.connect(socket_path)
            sock.sendall((json.dumps(command) + "\n").encode("utf-8"))
            response = sock.recv(4096).decode("utf-8").strip()
    except OSError:
        return False

    if not response:
        return True

    # mpv may interleave event lines with the reply; the reply has "error"
    for line in response.splitlines():
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            continue
        if "error" in data:
            return data["error"] == "success"
    return False


class MpvSink:
    """One track's worth of playback on the shared mpv process."""

    def __init__(self, handle: MpvHandle):
        self._handle = handle
        self._source: Optional[AudioSource] = None

    def _command(self, *args: Any) -> bool:
        return send_mpv_command(self._handle.socket_path, {"command": list(args)})

    def set_volume(self, level: float) -> None:
        volume = round(max(0.0, min(1.0, level)) * 100)
        if not self._command("set_property", "volume", volume):
            logger.warning(f"mpv did not accept volume {volume}")

    def append(self, source: AudioSource) -> None:
        # Load paused so play() decides when sound starts
        self._command("set_property", "pause", True)
        if not self._command("loadfile", source.path, "replace"):
            raise DecodeError(source.path, "mpv could not load file")
        self._source = source

    def play(self) -> None:
        if self._source is None:
            return
        if not self._command("set_property", "pause", False):
            raise OutputDeviceError("mpv did not respond to unpause")

    def stop(self) -> None:
        if self._source is None:
            return
        self._command("stop")


class MpvOutputDevice:
    """Output device backed by one idle mpv process per engine."""

    def __init__(self, socket_path: Optional[str] = None):
        self.socket_path = socket_path

    def open_default_output(self) -> MpvHandle:
        """Start MPV with JSON IPC and wait for its socket.

        Raises:
            OutputDeviceError: If mpv cannot be started or never answers
        """
        if self.socket_path:
            socket_path = self.socket_path
        else:
            temp_dir = Path(tempfile.gettempdir())
            socket_path = str(temp_dir / f"sonic-shelf-mpv-{os.getpid()}.sock")

        logger.info(f"Starting MPV player with socket: {socket_path}")

        if os.path.exists(socket_path):
            logger.debug(f"Removing existing socket: {socket_path}")
            try:
                os.unlink(socket_path)
            except OSError as e:
                raise OutputDeviceError(f"Cannot remove stale mpv socket: {e}") from e

        cmd = [
            "mpv",
            "--idle=yes",
            "--no-video",
            "--no-terminal",
            f"--input-ipc-server={socket_path}",
            "--load-scripts=no",
        ]

        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except (subprocess.SubprocessError, OSError) as e:
            raise OutputDeviceError(f"Failed to start mpv: {e}") from e

        start_time = time.time()
        while not os.path.exists(socket_path):
            if time.time() - start_time > MPV_SOCKET_TIMEOUT:
                process.kill()
                raise OutputDeviceError(
                    f"mpv socket not created after {MPV_SOCKET_TIMEOUT}s"
                )
            time.sleep(0.1)

        if not send_mpv_command(socket_path, {"command": ["get_property", "idle-active"]}):
            process.kill()
            raise OutputDeviceError("mpv socket connection test failed")

        logger.info("MPV started successfully")
        return MpvHandle(socket_path=socket_path, process=process)

    def decode(self, path: str) -> AudioSource:
        return probe_audio(path)

    def new_sink(self, handle: MpvHandle) -> MpvSink:
        return MpvSink(handle)

    def close(self, handle: Optional[MpvHandle]) -> None:
        """Stop MPV process and cleanup."""
        if handle is None:
            return

        try:
            handle.process.kill()
            handle.process.wait(timeout=2.0)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"mpv did not exit cleanly: {e}")

        if os.path.exists(handle.socket_path):
            try:
                os.unlink(handle.socket_path)
            except OSError:
                pass


# --- null --------------------------------------------------------------------


class NullSink:
    """Sink that tracks play state without producing sound."""

    def __init__(self):
        self.source: Optional[AudioSource] = None
        self.volume = 1.0
        self.playing = False

    def set_volume(self, level: float) -> None:
        self.volume = level

    def append(self, source: AudioSource) -> None:
        self.source = source

    def play(self) -> None:
        self.playing = self.source is not None

    def stop(self) -> None:
        self.playing = False


class NullOutputDevice:
    """Silent output, used when no real player is available."""

    def open_default_output(self) -> None:
        logger.info("Using silent output device")
        return None

    def decode(self, path: str) -> AudioSource:
        return probe_audio(path)

    def new_sink(self, handle: None) -> NullSink:
        return NullSink()

    def close(self, handle: None) -> None:
        pass


def create_output_device(player_config: PlayerConfig) -> OutputDevice:
    """Pick the output device named by config ("auto" prefers mpv)."""
    output = player_config.output

    if output == "null":
        return NullOutputDevice()

    if output == "auto" and not check_mpv_available():
        logger.warning("mpv not found on PATH, playback will be silent")
        return NullOutputDevice()

    return MpvOutputDevice(player_config.mpv_socket_path)
