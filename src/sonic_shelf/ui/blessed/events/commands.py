"""Command execution logic.

Key handlers stay pure and describe what should happen as an
InternalCommand; this module applies those commands to the player
controller and reports the outcome as a transient message.
"""

from dataclasses import replace
from typing import Callable

from loguru import logger

from sonic_shelf.domain.library import LibraryError, get_display_name
from sonic_shelf.domain.playback import PlayerController
from sonic_shelf.ui.blessed.state import InternalCommand, UIState, set_message

# (updated state, should quit)
HandlerResult = tuple[UIState, bool]

COMMAND_LINE_HELP = "Commands: add <dir>, remove <n>"


def _follow_current_track(controller: PlayerController, ui_state: UIState) -> UIState:
    """In the songs view, move the cursor onto the current track."""
    if ui_state.view_mode != "songs" or controller.current_track is None:
        return ui_state
    return replace(ui_state, selected=controller.current_index)


# -----------------------------------------------------------------------------
# Handlers
# Each handler has signature: (controller, ui_state, data) -> (UIState, bool)
# -----------------------------------------------------------------------------


def _handle_toggle_playback(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    controller.toggle_playback()
    return ui_state, False


def _handle_next(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    controller.next()
    return _follow_current_track(controller, ui_state), False


def _handle_previous(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    controller.previous()
    return _follow_current_track(controller, ui_state), False


def _handle_shuffle(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    controller.shuffle()
    ui_state = set_message(ui_state, f"Shuffled {len(controller.tracks)} tracks")
    return _follow_current_track(controller, ui_state), False


def _handle_volume(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    controller.set_volume(data["direction"] * data["step"])
    return set_message(ui_state, f"Volume: {round(controller.volume * 100)}%"), False


def _handle_select(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    controller.select(data["position"])
    return ui_state, False


def _handle_queue(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    position = data["position"]
    if not controller.add_to_queue(position):
        return ui_state, False
    track = controller.tracks[position]
    return set_message(ui_state, f"Added to queue: {get_display_name(track)}"), False


def _handle_quit(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    return ui_state, True


def run_command_line(
    controller: PlayerController, ui_state: UIState, line: str
) -> UIState:
    """Run one ":" command: ``add <dir>`` or ``remove <n>``."""
    name, _, argument = line.strip().partition(" ")
    argument = argument.strip()

    if name == "add" and argument:
        try:
            added = controller.add_directory(argument)
        except LibraryError as e:
            return set_message(ui_state, f"Error: {e}")
        return set_message(ui_state, f"Directory added ({added} new tracks)")

    if name == "remove" and argument:
        try:
            position = int(argument)
        except ValueError:
            return set_message(ui_state, f"Not a directory number: {argument}")
        try:
            removed = controller.remove_directory(position)
        except LibraryError as e:
            return set_message(ui_state, f"Error: {e}")
        return set_message(ui_state, f"Directory removed: {removed}")

    return set_message(ui_state, f"Unknown command: {line}. {COMMAND_LINE_HELP}")


def _handle_command_line(
    controller: PlayerController, ui_state: UIState, data: dict
) -> HandlerResult:
    return run_command_line(controller, ui_state, data["line"]), False


COMMAND_HANDLERS: dict[
    str, Callable[[PlayerController, UIState, dict], HandlerResult]
] = {
    "toggle_playback": _handle_toggle_playback,
    "next": _handle_next,
    "previous": _handle_previous,
    "shuffle": _handle_shuffle,
    "volume": _handle_volume,
    "select": _handle_select,
    "queue": _handle_queue,
    "command_line": _handle_command_line,
    "quit": _handle_quit,
}


def execute_command(
    controller: PlayerController,
    ui_state: UIState,
    command: InternalCommand,
    volume_step: float = 0.05,
) -> HandlerResult:
    """
    Apply a command produced by the key handlers.

    Args:
        controller: Player controller
        ui_state: Current UI state
        command: Command to run
        volume_step: Volume change for one volume key press

    Returns:
        Tuple of (updated UI state, should_quit)
    """
    handler = COMMAND_HANDLERS.get(command.action)
    if handler is None:
        logger.warning(f"Unknown internal command: {command.action}")
        return ui_state, False

    data = dict(command.data)
    if command.action == "volume":
        data["step"] = volume_step

    logger.debug(f"Executing {command.action} {data}")
    return handler(controller, ui_state, data)
