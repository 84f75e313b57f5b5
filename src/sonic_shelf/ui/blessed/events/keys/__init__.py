"""Keyboard event handlers organized by mode."""

from .utils import parse_key
from .command_line import handle_command_line_key
from .search import handle_search_key
from .normal import handle_normal_mode_key

__all__ = [
    "parse_key",
    "handle_command_line_key",
    "handle_search_key",
    "handle_normal_mode_key",
]
