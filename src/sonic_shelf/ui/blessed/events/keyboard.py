"""Keyboard event handling dispatcher for all modes.

Key Functions:
    - handle_key: Main keyboard dispatcher
    - should_accept_key: Key-repeat debounce
"""

from blessed.keyboard import Keystroke

from sonic_shelf.ui.blessed.state import InternalCommand, UIState
from sonic_shelf.ui.blessed.state_selectors import Row

from .keys import (
    handle_command_line_key,
    handle_normal_mode_key,
    handle_search_key,
    parse_key,
)


def detect_mode(state: UIState) -> str:
    """
    Detect the current input mode based on UI state.

    Returns:
        Mode name: "command_line", "search" or "normal"
    """
    if state.command_mode:
        return "command_line"
    elif state.search_mode:
        return "search"
    else:
        return "normal"


def should_accept_key(
    state: UIState, now: float, last_key_time: float, key_delay_ms: int
) -> bool:
    """Reject browsing keys arriving within ``key_delay_ms`` of the last one.

    Typing in search and command line modes is never dropped.
    """
    if detect_mode(state) != "normal":
        return True
    return (now - last_key_time) * 1000 >= key_delay_ms


def handle_key(
    state: UIState,
    key: Keystroke,
    rows: list[Row],
    visible_rows: int = 10,
) -> tuple[UIState, InternalCommand | None]:
    """
    Handle keyboard input and return updated state.

    Args:
        state: Current UI state
        key: blessed Keystroke
        rows: Rows of the current view
        visible_rows: Height of the list viewport (for scroll calculations)

    Returns:
        Tuple of (updated state, command to execute or None)
    """
    event = parse_key(key)

    match detect_mode(state):
        case "command_line":
            return handle_command_line_key(state, event)
        case "search":
            return handle_search_key(state, event)
        case _:
            return handle_normal_mode_key(state, event, rows, visible_rows)
