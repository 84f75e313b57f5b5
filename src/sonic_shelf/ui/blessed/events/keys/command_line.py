"""Command-line (":") mode keyboard handler."""

from sonic_shelf.ui.blessed.state import (
    InternalCommand,
    UIState,
    append_command_char,
    cancel_command,
    delete_command_char,
)


def handle_command_line_key(
    state: UIState, event: dict
) -> tuple[UIState, InternalCommand | None]:
    """Edit the command line; Enter submits it, Escape discards it."""
    if event["type"] == "enter":
        line = state.command_input.strip()
        state = cancel_command(state)
        if not line:
            return state, None
        return state, InternalCommand(action="command_line", data={"line": line})

    if event["type"] == "escape":
        return cancel_command(state), None

    if event["type"] == "backspace":
        return delete_command_char(state), None

    if event["type"] == "char":
        return append_command_char(state, event["char"]), None

    return state, None
