"""Main event loop and entry point for blessed UI."""

import sys
import time

from blessed import Terminal
from loguru import logger

from sonic_shelf.core.config import Config
from sonic_shelf.domain.playback import PlaybackFailed, PlayerController, PlayerSnapshot

from .components import (
    calculate_layout,
    render_dashboard,
    render_footer,
    render_header,
    render_library_view,
)
from .events.commands import execute_command
from .events.keyboard import handle_key, should_accept_key
from .state import (
    UIState,
    clear_message,
    create_initial_state,
    set_message,
    should_show_message,
    sync_selection,
)
from .state_selectors import Row, build_rows


def apply_player_events(controller: PlayerController, ui_state: UIState) -> UIState:
    """
    Drain engine notifications into the controller and surface failures.

    Args:
        controller: Player controller
        ui_state: Current UI state

    Returns:
        Updated UI state (with an error message if a Play failed)
    """
    for event in controller.poll_events():
        if isinstance(event, PlaybackFailed):
            ui_state = set_message(ui_state, f"Error: {event.reason}")
    return ui_state


def render_frame(
    term: Terminal,
    snapshot: PlayerSnapshot,
    ui_state: UIState,
    rows: list[Row],
    layout: dict[str, int],
) -> None:
    """Draw one full frame: left column first, then the side panel over it."""
    render_header(term, snapshot, ui_state, layout)
    render_library_view(term, snapshot, ui_state, rows, layout)
    render_dashboard(term, snapshot, layout)
    render_footer(term, ui_state, layout)
    sys.stdout.flush()


def run_interactive_ui(controller: PlayerController, config: Config) -> None:
    """
    Run the main interactive UI event loop.

    Args:
        controller: Player controller over an already scanned library
        config: Application configuration
    """
    term = Terminal()

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            main_loop(term, controller, config)
        except KeyboardInterrupt:
            logger.info("Ctrl+C detected - leaving UI")


def main_loop(term: Terminal, controller: PlayerController, config: Config) -> None:
    """
    Main event loop - functional style.

    Each tick: apply engine events, take a snapshot, rebuild the rows of the
    current view, redraw if anything visible changed, then wait for a key.

    Args:
        term: blessed Terminal instance
        controller: Player controller
        config: Application configuration
    """
    ui_state = create_initial_state()
    last_frame = None
    last_key_time = 0.0
    should_quit = False

    print(term.clear)

    while not should_quit:
        ui_state = apply_player_events(controller, ui_state)
        if ui_state.message and not should_show_message(ui_state):
            ui_state = clear_message(ui_state)

        snapshot = controller.snapshot()
        layout = calculate_layout(term)
        rows = build_rows(snapshot, ui_state)
        ui_state = sync_selection(ui_state, len(rows), layout["list_height"])

        frame = (snapshot, ui_state, layout)
        if frame != last_frame:
            if last_frame is not None and last_frame[2] != layout:
                # Terminal resized
                print(term.clear)
            render_frame(term, snapshot, ui_state, rows, layout)
            last_frame = frame

        # Wait for input (with timeout so engine events still get applied)
        key = term.inkey(timeout=config.ui.refresh_interval)
        if not key:
            continue

        now = time.monotonic()
        if not should_accept_key(
            ui_state, now, last_key_time, config.ui.key_delay_ms
        ):
            continue
        last_key_time = now

        ui_state, command = handle_key(ui_state, key, rows, layout["list_height"])
        if command is not None:
            ui_state, should_quit = execute_command(
                controller, ui_state, command, config.player.volume_step
            )

    logger.info("Leaving UI")
