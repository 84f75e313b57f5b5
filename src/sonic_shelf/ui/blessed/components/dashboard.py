"""Now playing panel rendering: current track, status, queue and sources."""

from blessed import Terminal

from sonic_shelf.domain.library import get_display_name
from sonic_shelf.domain.playback import PlayerSnapshot

from ..helpers import truncate, write_at

NOW_PLAYING_HEIGHT = 10
MAX_SOURCE_LINES = 6


def format_now_playing(snapshot: PlayerSnapshot) -> list[tuple[str, str]]:
    """
    Lines of the now playing box as (text, style name) pairs.

    Kept free of terminal calls so it can be checked without a TTY.
    """
    lines = [("Now Playing", "bold_cyan")]
    track = snapshot.current_track

    if track is None:
        lines.append(("", "white"))
        lines.append(("Nothing playing", "white"))
        return lines

    lines.append((f"Title: {track.title}", "bold_white"))
    lines.append((f"Artist: {track.artist}", "white"))
    lines.append((f"Album: {track.album}", "white"))
    lines.append((f"Genre: {track.genre}", "white"))
    lines.append(("", "white"))

    if snapshot.is_playing:
        lines.append(("Status: Playing", "bold_green"))
    else:
        lines.append(("Status: Stopped", "bold_yellow"))
    lines.append((f"Volume: {round(snapshot.volume * 100)}%", "white"))

    if snapshot.last_error:
        lines.append((f"Error: {snapshot.last_error}", "bold_red"))

    return lines


def render_dashboard(
    term: Terminal, snapshot: PlayerSnapshot, layout: dict[str, int]
) -> None:
    """
    Render the right-hand panel.

    Drawn after the library list on the same rows; every write clears to
    the end of the line, so stale panel text never survives a frame.

    Args:
        term: blessed Terminal instance
        snapshot: Player state for this frame
        layout: Region positions from calculate_layout
    """
    x = layout["panel_x"]
    width = layout["panel_width"] - 1
    height = layout["panel_height"]
    if width <= 0:
        return

    now_playing = format_now_playing(snapshot)
    box_height = min(NOW_PLAYING_HEIGHT, height)
    for y in range(box_height):
        text, style = now_playing[y] if y < len(now_playing) else ("", "white")
        write_at(term, x, y, getattr(term, style)("│ " + truncate(text, width - 2)))
    y = box_height
    if y >= height:
        return

    # Sources sit at the bottom so their numbering stays visible for :remove
    sources = list(enumerate(snapshot.source_dirs))
    source_lines = min(len(sources), MAX_SOURCE_LINES - 1) + 1
    sources_y = max(y + 2, height - source_lines)

    write_at(term, x, y, term.bold_cyan(f"│ Queue ({len(snapshot.queue)})"))
    y += 1
    for number, position in enumerate(snapshot.queue, start=1):
        if y >= sources_y - 1:
            break
        entry = truncate(f"{number}. {get_display_name(snapshot.tracks[position])}", width - 2)
        write_at(term, x, y, term.white("│ " + entry))
        y += 1

    while y < sources_y:
        write_at(term, x, y, term.white("│"))
        y += 1

    if sources_y >= height:
        return
    write_at(term, x, sources_y, term.bold_cyan("│ Sources"))
    for offset, (number, directory) in enumerate(sources[: source_lines - 1], start=1):
        if sources_y + offset >= height:
            break
        entry = truncate(f"[{number}] {directory}", width - 2)
        write_at(term, x, sources_y + offset, term.white("│ " + entry))
