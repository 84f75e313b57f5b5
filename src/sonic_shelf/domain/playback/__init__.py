"""Playback domain - audio engine, output devices and player state.

This domain handles:
- Output devices (mpv over JSON IPC, or silent)
- The audio engine worker and its command/event messages
- The playback queue
- The player controller (current track, play state, volume)
"""

# Errors
from .exceptions import DecodeError, OutputDeviceError, PlaybackError

# Engine messages
from .commands import (
    Command,
    Event,
    Play,
    PlaybackFailed,
    PlaybackStarted,
    SetVolume,
    Shutdown,
    Stop,
)

# Output devices
from .device import (
    AudioSource,
    MpvOutputDevice,
    NullOutputDevice,
    OutputDevice,
    Sink,
    check_mpv_available,
    create_output_device,
    probe_audio,
    send_mpv_command,
)

# Engine and state
from .engine import AudioEngine
from .queue import PlaybackQueue
from .controller import PlayerController, PlayerSnapshot

__all__ = [
    # Errors
    "PlaybackError",
    "DecodeError",
    "OutputDeviceError",
    # Messages
    "Command",
    "Event",
    "Play",
    "Stop",
    "SetVolume",
    "Shutdown",
    "PlaybackStarted",
    "PlaybackFailed",
    # Devices
    "AudioSource",
    "Sink",
    "OutputDevice",
    "MpvOutputDevice",
    "NullOutputDevice",
    "check_mpv_available",
    "create_output_device",
    "probe_audio",
    "send_mpv_command",
    # Engine and state
    "AudioEngine",
    "PlaybackQueue",
    "PlayerController",
    "PlayerSnapshot",
]
