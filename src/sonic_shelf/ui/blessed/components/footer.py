"""Footer rendering: command line, search box, messages or key help."""

from blessed import Terminal

from ..helpers import truncate, write_at
from ..state import UIState, should_show_message

HELP_TEXT = (
    "p: Play/Stop | h/l: Prev/Next | j/k: Move | -/+: Volume | s: Shuffle | "
    "a: Queue | /: Search | Space: Select | Tab: View | :: Command | q: Quit"
)


def footer_text(ui_state: UIState) -> tuple[str, str]:
    """The footer line and its style name for the current state."""
    if ui_state.command_mode:
        return f":{ui_state.command_input}█", "bold_white"
    if ui_state.search_mode:
        return f"Search: {ui_state.search_input}█  (Esc to stop typing)", "bold_white"
    if should_show_message(ui_state):
        style = "bold_red" if ui_state.message.startswith("Error") else "bold_yellow"
        return ui_state.message, style
    return HELP_TEXT, "white"


def render_footer(term: Terminal, ui_state: UIState, layout: dict[str, int]) -> None:
    """Render the separator and the footer line."""
    y = layout["footer_y"]
    width = layout["width"]

    write_at(term, 0, y, term.cyan("─" * max(width - 1, 0)))
    text, style = footer_text(ui_state)
    write_at(term, 0, y + 1, getattr(term, style)(truncate(text, width - 1)))
