"""Rendering functions for blessed UI."""

from .dashboard import render_dashboard
from .footer import render_footer
from .layout import calculate_layout
from .library_view import render_header, render_library_view

__all__ = [
    "calculate_layout",
    "render_dashboard",
    "render_footer",
    "render_header",
    "render_library_view",
]
