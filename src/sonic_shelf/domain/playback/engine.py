"""
Audio engine: the single owner of the output device.

Runs in a background thread and executes commands strictly one at a time,
in the order they were submitted. The device handle and the active sink are
local to that thread; the control thread only ever talks to it through the
command queue and hears back through the event queue.
"""

import queue
import threading
from concurrent.futures import Future
from typing import Any, Optional

from loguru import logger

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
from .device import OutputDevice, Sink
from .exceptions import OutputDeviceError, PlaybackError


class AudioEngine:
    """Serializes playback commands against one output device.

    Submitting never blocks: both queues are unbounded. Results come back as
    events (see ``poll_events``) and, for callers that attach one, on the
    command's ``done`` future.
    """

    def __init__(self, device: OutputDevice, volume: float = 1.0):
        """
        Initialize the engine (the worker is not started yet).

        Args:
            device: Output device the worker will open and own
            volume: Volume applied to every new sink until changed
        """
        self._device = device
        self._initial_volume = volume
        self._commands: queue.Queue[Command] = queue.Queue()
        self._events: queue.Queue[Event] = queue.Queue()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the worker thread."""
        if self._thread is not None:
            return

        self._thread = threading.Thread(
            target=self._run, name="AudioEngine", daemon=True
        )
        self._thread.start()

    def submit(self, command: Command) -> None:
        """Queue a command for the worker."""
        self._commands.put(command)

    def poll_events(self) -> list[Event]:
        """Drain every event published since the last call, without blocking."""
        events = []
        while True:
            try:
                events.append(self._events.get_nowait())
            except queue.Empty:
                return events

    def shutdown(self, timeout: float = 2.0) -> None:
        """Ask the worker to exit and wait for it."""
        if self._thread is None:
            return
        self.submit(Shutdown())
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            logger.warning(f"AudioEngine did not stop within {timeout}s")

    # --- worker ---------------------------------------------------------------

    def _run(self) -> None:
        """Worker loop: open the device, then process commands until Shutdown."""
        handle: Any = None
        device_error: Optional[OutputDeviceError] = None
        sink: Optional[Sink] = None
        volume = self._initial_volume

        try:
            handle = self._device.open_default_output()
        except OutputDeviceError as e:
            logger.error(f"Audio output unavailable: {e}")
            device_error = e
        except Exception as e:
            logger.exception("Unexpected error opening audio output")
            device_error = OutputDeviceError(str(e))

        while True:
            command = self._commands.get()

            if isinstance(command, Shutdown):
                try:
                    if sink is not None:
                        self._stop_sink(sink)
                    if device_error is None:
                        self._device.close(handle)
                except Exception:
                    logger.exception("Failed to close audio output")
                logger.info("AudioEngine shut down")
                _resolve(command.done)
                break

            try:
                if isinstance(command, Play):
                    if sink is not None:
                        self._stop_sink(sink)
                        sink = None
                    if device_error is not None:
                        raise OutputDeviceError(f"No audio output: {device_error}")
                    sink = self._start(handle, command.path, volume)
                    self._events.put(PlaybackStarted(command.path, command.request))

                elif isinstance(command, Stop):
                    if sink is not None:
                        sink.stop()

                elif isinstance(command, SetVolume):
                    volume = command.level
                    if sink is not None:
                        sink.set_volume(volume)

                _resolve(command.done)

            except PlaybackError as e:
                logger.warning(f"{type(command).__name__} failed: {e}")
                if isinstance(command, Play):
                    self._events.put(
                        PlaybackFailed(command.path, str(e), command.request)
                    )
                _fail(command.done, e)

            except Exception as e:
                logger.exception(f"Unexpected error handling {command!r}")
                if isinstance(command, Play):
                    self._events.put(
                        PlaybackFailed(command.path, str(e), command.request)
                    )
                _fail(command.done, e)

    def _start(self, handle: Any, path: str, volume: float) -> Sink:
        """Decode ``path`` and start it on a fresh sink."""
        source = self._device.decode(path)
        sink = self._device.new_sink(handle)
        sink.set_volume(volume)
        sink.append(source)
        sink.play()
        logger.info(f"Playing {path}")
        return sink

    @staticmethod
    def _stop_sink(sink: Sink) -> None:
        try:
            sink.stop()
        except PlaybackError as e:
            logger.warning(f"Failed to stop sink: {e}")


def _resolve(done: Optional[Future]) -> None:
    if done is not None and not done.done():
        done.set_result(None)


def _fail(done: Optional[Future], error: BaseException) -> None:
    if done is not None and not done.done():
        done.set_exception(error)
