"""Layout calculation functions."""

from blessed import Terminal

HEADER_HEIGHT = 3  # Title, view tabs, separator
FOOTER_HEIGHT = 2  # Separator, input/help line
MIN_PANEL_TERM_WIDTH = 60  # Narrower terminals hide the side panel


def calculate_layout(term: Terminal) -> dict[str, int]:
    """
    Pure function: calculate positions for all regions.

    The library browser takes the left 70% of the screen and the
    now playing / queue panel the rest, like two columns of one table.

    Args:
        term: blessed Terminal instance

    Returns:
        Dictionary with region positions and sizes
    """
    # Safe terminal size access
    try:
        term_height = term.height
        term_width = term.width
    except Exception:
        term_height, term_width = 24, 80  # Safe fallback

    if term_width >= MIN_PANEL_TERM_WIDTH:
        left_width = term_width * 7 // 10
        panel_x = left_width + 1
        panel_width = term_width - panel_x
    else:
        left_width = term_width
        panel_x = term_width
        panel_width = 0

    footer_y = max(HEADER_HEIGHT + 1, term_height - FOOTER_HEIGHT)

    return {
        "width": term_width,
        "height": term_height,
        "left_width": left_width,
        "list_y": HEADER_HEIGHT,
        "list_height": max(1, footer_y - HEADER_HEIGHT),
        "panel_x": panel_x,
        "panel_width": panel_width,
        "panel_height": footer_y,
        "footer_y": footer_y,
    }
