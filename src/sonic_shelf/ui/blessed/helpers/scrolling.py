"""Pure helper functions for scrolling and selection in list-based UI components."""


def calculate_scroll_offset(
    selected: int,
    current_scroll: int,
    visible_items: int,
    total_items: int,
) -> int:
    """Calculate scroll offset to keep selected item visible in viewport.

    Args:
        selected: Index of the currently selected item (0-based)
        current_scroll: Current scroll offset (0-based)
        visible_items: Number of items visible in the viewport
        total_items: Total number of items in the list

    Returns:
        New scroll offset to keep selected item visible

    Examples:
        >>> calculate_scroll_offset(
        ...     selected=15, current_scroll=0, visible_items=10, total_items=20
        ... )
        6
        >>> calculate_scroll_offset(
        ...     selected=2, current_scroll=10, visible_items=10, total_items=20
        ... )
        2
        >>> calculate_scroll_offset(
        ...     selected=5, current_scroll=0, visible_items=10, total_items=20
        ... )
        0
    """
    if total_items <= 0 or visible_items <= 0:
        return 0

    # Scroll down if selection goes below visible area
    if selected >= current_scroll + visible_items:
        offset = selected - visible_items + 1
    # Scroll up if selection goes above visible area
    elif selected < current_scroll:
        offset = selected
    else:
        offset = current_scroll

    # Don't leave empty rows at the bottom after the list shrank
    return max(0, min(offset, total_items - visible_items))


def move_selection(
    current: int,
    delta: int,
    total_items: int,
    wrap: bool = False,
) -> int:
    """Move selection by delta, clamping (or wrapping) at the ends.

    Examples:
        >>> move_selection(current=9, delta=1, total_items=10)
        9
        >>> move_selection(current=9, delta=1, total_items=10, wrap=True)
        0
        >>> move_selection(current=5, delta=-1, total_items=10)
        4
    """
    if total_items == 0:
        return 0

    if wrap:
        return (current + delta) % total_items
    return max(0, min(current + delta, total_items - 1))


def clamp_selection(selection: int, total_items: int) -> int:
    """Clamp selection to valid range [0, total_items - 1].

    Used every frame, since the list under the cursor is rebuilt from a
    fresh player snapshot and may have shrunk.

    Examples:
        >>> clamp_selection(selection=15, total_items=10)
        9
        >>> clamp_selection(selection=5, total_items=0)
        0
    """
    if total_items == 0:
        return 0
    return max(0, min(selection, total_items - 1))
