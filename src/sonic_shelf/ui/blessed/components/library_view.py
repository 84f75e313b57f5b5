"""Library browser rendering: title, view tabs and the scrolling list."""

from blessed import Terminal

from sonic_shelf.domain.playback import PlayerSnapshot

from ..helpers import truncate, write_at
from ..state import VIEW_MODES, VIEW_TITLES, UIState
from ..state_selectors import Row

SELECTED_MARKER = ">> "
ICON = "♪"
TRACK_VIEWS = ("songs", "artists", "queue", "search")


def render_header(
    term: Terminal, snapshot: PlayerSnapshot, ui_state: UIState, layout: dict[str, int]
) -> None:
    """Render the title line, the view tabs and the list caption."""
    width = layout["left_width"]

    title = f"{ICON} SONIC SHELF {ICON}"
    count = f"{len(snapshot.tracks)} tracks"
    spacer = " " * max(width - len(title) - len(count) - 1, 1)
    write_at(term, 0, 0, term.bold_cyan(title) + spacer + term.white(count))

    tabs = []
    for mode in VIEW_MODES:
        label = f" {VIEW_TITLES[mode]} "
        tabs.append(term.black_on_cyan(label) if mode == ui_state.view_mode else term.cyan(label))
    write_at(term, 0, 1, "│".join(tabs))

    caption = VIEW_TITLES[ui_state.view_mode]
    if ui_state.view_mode == "artists" and ui_state.selected_artist is not None:
        caption = f"{caption} › {ui_state.selected_artist}"
    elif ui_state.view_mode == "search" and ui_state.search_input:
        caption = f"{caption}: {ui_state.search_input}"
    caption = truncate(f"─ {caption} ", width - 1)
    write_at(term, 0, 2, term.cyan(caption + "─" * max(width - 1 - len(caption), 0)))


def _empty_hint(ui_state: UIState) -> str:
    if ui_state.view_mode == "queue":
        return "Queue is empty. Press 'a' on a track to add it."
    if ui_state.view_mode == "search":
        return "Press '/' and type to search titles, artists and albums."
    return "No tracks. Add a directory with ':add <dir>'."


def render_library_view(
    term: Terminal,
    snapshot: PlayerSnapshot,
    ui_state: UIState,
    rows: list[Row],
    layout: dict[str, int],
) -> None:
    """
    Render the rows of the current view with the cursor and the playing track.

    Args:
        term: blessed Terminal instance
        snapshot: Player state for this frame
        ui_state: Current UI state
        rows: Rows of the current view
        layout: Region positions from calculate_layout
    """
    y = layout["list_y"]
    height = layout["list_height"]
    text_width = layout["left_width"] - len(SELECTED_MARKER) - 1

    if not rows:
        write_at(term, 0, y, term.white("   " + truncate(_empty_hint(ui_state), text_width)))
        for i in range(1, height):
            write_at(term, 0, y + i, "")
        return

    # Album and genre rows point at a group's first track, not a single track
    marks_current = ui_state.view_mode in TRACK_VIEWS
    current = snapshot.current_index if snapshot.tracks else None

    for i in range(height):
        index = ui_state.scroll_offset + i
        if index >= len(rows):
            write_at(term, 0, y + i, "")
            continue

        row = rows[index]
        label = truncate(row.label, text_width)
        is_selected = index == ui_state.selected
        is_current = marks_current and row.artist is None and row.position == current

        if is_current:
            style = term.bold_green
        elif row.artist is not None:
            style = term.bold_white
        else:
            style = term.white

        marker = SELECTED_MARKER if is_selected else " " * len(SELECTED_MARKER)
        line = style(marker + label)
        if is_selected:
            line = term.reverse(line)
        write_at(term, 0, y + i, line)
