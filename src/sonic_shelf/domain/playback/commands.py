"""
Messages exchanged with the audio engine.

Commands flow from the control thread to the engine worker. Events flow
back the other way. Both are immutable and transferred, never shared.
"""

from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Play:
    """Replace whatever is playing with ``path``.

    ``request`` is echoed back in the resulting event so the sender can
    tell which of several plays of the same file an outcome belongs to.
    """

    path: str
    request: int = field(default=0, compare=False)
    done: Optional[Future] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Stop:
    """Stop the active sink (the sink is kept for later volume changes)."""

    done: Optional[Future] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SetVolume:
    """Remember ``level`` (0.0 - 1.0) and apply it to the active sink."""

    level: float
    done: Optional[Future] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Shutdown:
    """Leave the worker loop. Nothing queued after this is processed."""

    done: Optional[Future] = field(default=None, compare=False, repr=False)


Command = Union[Play, Stop, SetVolume, Shutdown]


@dataclass(frozen=True)
class PlaybackStarted:
    path: str
    request: int = field(default=0, compare=False)


@dataclass(frozen=True)
class PlaybackFailed:
    path: str
    reason: str
    request: int = field(default=0, compare=False)


Event = Union[PlaybackStarted, PlaybackFailed]
