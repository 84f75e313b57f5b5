"""UI state management - immutable state updates."""

from dataclasses import dataclass, field, replace
from time import time
from typing import Any, Optional

from sonic_shelf.ui.blessed.helpers.scrolling import (
    calculate_scroll_offset,
    clamp_selection,
    move_selection,
)

# Tab order; Tab cycles through these
VIEW_MODES = ("songs", "artists", "albums", "genres", "queue", "search")

VIEW_TITLES = {
    "songs": "Songs",
    "artists": "Artists",
    "albums": "Albums",
    "genres": "Genres",
    "queue": "Queue",
    "search": "Search",
}

# Seconds a transient message stays on screen
MESSAGE_TIMEOUT = 4.0


@dataclass
class InternalCommand:
    """Type-safe internal command protocol for UI -> command executor communication."""

    action: str  # Command action type
    data: dict[str, Any] = field(default_factory=dict)  # Command data


@dataclass
class UIState:
    """
    UI-specific state - immutable updates only.

    All state transformations return new UIState instances. Player state
    (tracks, current track, queue, volume) lives in the controller and
    reaches the UI as a PlayerSnapshot, never here.
    """

    # Library browser
    view_mode: str = "songs"
    selected: int = 0  # Row under the cursor in the current view
    scroll_offset: int = 0
    selected_artist: Optional[str] = None  # Artist drill-down in the artists view

    # Search input
    search_mode: bool = False  # Typing goes into search_input
    search_input: str = ""

    # ":" command line
    command_mode: bool = False
    command_input: str = ""

    # Transient feedback
    message: Optional[str] = None
    message_time: Optional[float] = None


def create_initial_state() -> UIState:
    """Create the initial UI state."""
    return UIState()


# ============================================================================
# VIEWS & SELECTION
# ============================================================================


def set_view(state: UIState, view_mode: str) -> UIState:
    """Switch views, resetting the cursor and any artist drill-down."""
    if view_mode not in VIEW_MODES:
        raise ValueError(f"Unknown view mode: {view_mode}")
    return replace(
        state, view_mode=view_mode, selected=0, scroll_offset=0, selected_artist=None
    )


def next_view(state: UIState) -> UIState:
    """Cycle to the next view in tab order."""
    index = VIEW_MODES.index(state.view_mode)
    return set_view(state, VIEW_MODES[(index + 1) % len(VIEW_MODES)])


def move_cursor(
    state: UIState, delta: int, total_rows: int, visible_rows: int
) -> UIState:
    """Move the cursor by ``delta`` rows, clamped, keeping it on screen."""
    selected = move_selection(state.selected, delta, total_rows)
    scroll = calculate_scroll_offset(
        selected, state.scroll_offset, visible_rows, total_rows
    )
    return replace(state, selected=selected, scroll_offset=scroll)


def sync_selection(state: UIState, total_rows: int, visible_rows: int) -> UIState:
    """Clamp cursor and scroll to the rows of the current frame.

    Rows are rebuilt from a fresh snapshot each frame, so a shrinking
    library or queue can leave the cursor past the end.
    """
    selected = clamp_selection(state.selected, total_rows)
    scroll = calculate_scroll_offset(
        selected, state.scroll_offset, visible_rows, total_rows
    )
    if selected == state.selected and scroll == state.scroll_offset:
        return state
    return replace(state, selected=selected, scroll_offset=scroll)


def select_artist(state: UIState, artist: str) -> UIState:
    """Drill into one artist's tracks."""
    return replace(state, selected_artist=artist, selected=0, scroll_offset=0)


def clear_artist_selection(state: UIState) -> UIState:
    """Leave the artist drill-down and return to the artist list."""
    return replace(state, selected_artist=None, selected=0, scroll_offset=0)


# ============================================================================
# SEARCH
# ============================================================================


def start_search(state: UIState) -> UIState:
    """Enter the search view with typing captured by the search box."""
    state = set_view(state, "search")
    return replace(state, search_mode=True)


def stop_search_typing(state: UIState) -> UIState:
    """Stop capturing keys; results stay on screen."""
    return replace(state, search_mode=False)


def leave_search(state: UIState) -> UIState:
    """Clear the query and go back to the songs view."""
    state = replace(state, search_mode=False, search_input="")
    return set_view(state, "songs")


def append_search_char(state: UIState, char: str) -> UIState:
    return replace(state, search_input=state.search_input + char, selected=0, scroll_offset=0)


def delete_search_char(state: UIState) -> UIState:
    if not state.search_input:
        return state
    return replace(state, search_input=state.search_input[:-1], selected=0, scroll_offset=0)


# ============================================================================
# COMMAND LINE
# ============================================================================


def start_command(state: UIState) -> UIState:
    """Open the ":" command line and drop any old message."""
    return replace(
        state, command_mode=True, command_input="", message=None, message_time=None
    )


def cancel_command(state: UIState) -> UIState:
    return replace(state, command_mode=False, command_input="")


def append_command_char(state: UIState, char: str) -> UIState:
    return replace(state, command_input=state.command_input + char)


def delete_command_char(state: UIState) -> UIState:
    if not state.command_input:
        return state
    return replace(state, command_input=state.command_input[:-1])


# ============================================================================
# FEEDBACK
# ============================================================================


def set_message(state: UIState, message: str) -> UIState:
    """Show a transient message on the footer line."""
    return replace(state, message=message, message_time=time())


def clear_message(state: UIState) -> UIState:
    return replace(state, message=None, message_time=None)


def should_show_message(state: UIState, now: Optional[float] = None) -> bool:
    """Check if the message should still be displayed."""
    if not state.message or state.message_time is None:
        return False
    now = time() if now is None else now
    return (now - state.message_time) < MESSAGE_TIMEOUT
