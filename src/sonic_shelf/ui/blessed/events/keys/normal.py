"""Normal mode keyboard handlers (browsing, playback and volume keys)."""

from sonic_shelf.ui.blessed.state import (
    InternalCommand,
    UIState,
    clear_artist_selection,
    leave_search,
    move_cursor,
    next_view,
    select_artist,
    set_message,
    start_command,
    start_search,
)
from sonic_shelf.ui.blessed.state_selectors import Row, selected_row

# Keys that map straight to a controller action
PLAYBACK_KEYS = {
    "p": InternalCommand(action="toggle_playback"),
    "h": InternalCommand(action="previous"),
    "l": InternalCommand(action="next"),
    "s": InternalCommand(action="shuffle"),
    "+": InternalCommand(action="volume", data={"direction": 1}),
    "=": InternalCommand(action="volume", data={"direction": 1}),
    "-": InternalCommand(action="volume", data={"direction": -1}),
    "q": InternalCommand(action="quit"),
}


def _handle_select(
    state: UIState, row: Row | None
) -> tuple[UIState, InternalCommand | None]:
    """Space: drill into an artist, or play the row's track."""
    if row is None:
        return state, None

    if row.artist is not None:
        return select_artist(state, row.artist), None

    if row.position is None:
        return state, None
    return state, InternalCommand(action="select", data={"position": row.position})


def _handle_escape(state: UIState) -> UIState:
    if state.view_mode == "search":
        return leave_search(state)
    if state.view_mode == "artists" and state.selected_artist is not None:
        return clear_artist_selection(state)
    return state


def handle_normal_mode_key(
    state: UIState, event: dict, rows: list[Row], visible_rows: int
) -> tuple[UIState, InternalCommand | None]:
    """
    Handle keys while browsing.

    Args:
        state: Current UI state
        event: Parsed key event
        rows: Rows of the current view, built from this frame's snapshot
        visible_rows: Height of the list viewport

    Returns:
        Tuple of (updated state, command to execute or None)
    """
    char = event["char"]

    if event["type"] == "tab":
        return next_view(state), None

    if event["type"] == "escape":
        return _handle_escape(state), None

    if char == "j" or event["type"] == "arrow_down":
        return move_cursor(state, 1, len(rows), visible_rows), None

    if char == "k" or event["type"] == "arrow_up":
        return move_cursor(state, -1, len(rows), visible_rows), None

    if char == " " or event["type"] == "enter":
        return _handle_select(state, selected_row(rows, state))

    if char == "a":
        row = selected_row(rows, state)
        if row is None or row.position is None:
            return set_message(state, "Nothing to queue here"), None
        return state, InternalCommand(action="queue", data={"position": row.position})

    if char == "/":
        return start_search(state), None

    if char == ":":
        return start_command(state), None

    if char in PLAYBACK_KEYS:
        command = PLAYBACK_KEYS[char]
        return state, InternalCommand(action=command.action, data=dict(command.data))

    if event["type"] == "ctrl_c":
        return state, InternalCommand(action="quit")

    return state, None
