"""Styled terminal output for messages printed outside the blessed UI."""

from typing import Iterable

from rich.console import Console

_console = Console(highlight=False)


def warn(message: str) -> None:
    _console.print(f"⚠️  {message}", style="yellow", markup=False)


def error(message: str) -> None:
    _console.print(f"❌ {message}", style="red", markup=False)


def print_section(title: str, lines: Iterable[str], empty: str = "(none)") -> None:
    """Print a heading followed by indented lines.

    Args:
        title: Heading, printed bold
        lines: Body lines, indented by two spaces
        empty: Dimmed placeholder printed when there are no lines
    """
    _console.print(title, style="bold cyan")
    printed = False
    for line in lines:
        _console.print(f"  {line}", markup=False)
        printed = True
    if not printed:
        _console.print(f"  {empty}", style="dim")


def blank_line() -> None:
    _console.print()
