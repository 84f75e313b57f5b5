"""Terminal output utilities that prevent rendering artifacts."""

import sys

from blessed import Terminal


def write_at(
    term: Terminal, x: int, y: int, content: str, *, clear: bool = True
) -> None:
    """Write content at position, clearing the rest of the line by default.

    The left column is drawn first with ``clear=True`` so stale text from a
    longer previous frame disappears; the side panel is then drawn over the
    same rows starting at its own column.

    Args:
        term: Blessed terminal instance
        x: Column position (0-indexed)
        y: Row position (0-indexed)
        content: Text to write (can include terminal formatting)
        clear: Whether to clear to end of line (default True)
    """
    if clear:
        sys.stdout.write(term.move_xy(x, y) + term.clear_eol + content)
    else:
        sys.stdout.write(term.move_xy(x, y) + content)


def truncate(text: str, width: int) -> str:
    """Cut plain text to ``width`` columns, marking the cut with an ellipsis.

    Examples:
        >>> truncate("Blue in Green", 8)
        'Blue in…'
        >>> truncate("So What", 20)
        'So What'
    """
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"
