"""Blessed UI helper functions."""

from .terminal import truncate, write_at
from .scrolling import calculate_scroll_offset, clamp_selection, move_selection

__all__ = [
    "write_at",
    "truncate",
    "calculate_scroll_offset",
    "clamp_selection",
    "move_selection",
]
