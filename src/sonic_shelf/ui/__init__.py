"""UI layer for Sonic Shelf.

Contains:
- blessed: terminal UI (library browser, now playing panel, queue)
"""

__all__ = []
