"""Shared keyboard utility functions."""

from blessed.keyboard import Keystroke


def parse_key(key: Keystroke) -> dict:
    """
    Parse keystroke into event dictionary.

    Args:
        key: blessed Keystroke

    Returns:
        Event dictionary describing the key press
    """
    event = {
        "type": "unknown",
        "key": key,
        "name": key.name if hasattr(key, "name") else None,
        "char": str(key) if key and key.isprintable() else None,
    }

    # Identify key type
    if key.name == "KEY_ENTER" or key in ("\n", "\r"):
        event["type"] = "enter"
    elif key.name == "KEY_ESCAPE" or key == "\x1b":
        event["type"] = "escape"
    elif key.name == "KEY_BACKSPACE" or key == "\x7f":
        event["type"] = "backspace"
    elif key.name == "KEY_TAB" or key == "\t":
        event["type"] = "tab"
    elif key.name == "KEY_UP":
        event["type"] = "arrow_up"
    elif key.name == "KEY_DOWN":
        event["type"] = "arrow_down"
    elif key.name == "KEY_LEFT":
        event["type"] = "arrow_left"
    elif key.name == "KEY_RIGHT":
        event["type"] = "arrow_right"
    elif key == "\x03":  # Ctrl+C
        event["type"] = "ctrl_c"
    elif key and key.isprintable():
        event["type"] = "char"

    return event
