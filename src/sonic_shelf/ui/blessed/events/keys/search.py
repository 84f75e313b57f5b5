"""Search typing keyboard handler."""

from sonic_shelf.ui.blessed.state import (
    InternalCommand,
    UIState,
    append_search_char,
    delete_search_char,
    stop_search_typing,
)


def handle_search_key(
    state: UIState, event: dict
) -> tuple[UIState, InternalCommand | None]:
    """Type into the search box. Escape stops typing but keeps the results."""
    if event["type"] in ("escape", "enter"):
        return stop_search_typing(state), None

    if event["type"] == "backspace":
        return delete_search_char(state), None

    if event["type"] == "char":
        return append_search_char(state, event["char"]), None

    return state, None
