"""Tests for styled output outside the blessed UI."""

import io

import pytest
from rich.console import Console

from sonic_shelf.core import console


@pytest.fixture
def recorder(monkeypatch) -> Console:
    recorded = Console(record=True, width=120, file=io.StringIO())
    monkeypatch.setattr(console, "_console", recorded)
    return recorded


class TestMessages:
    """Tests for one-line warnings and errors."""

    def test_warn(self, recorder) -> None:
        console.warn("Could not scan /music")
        assert "Could not scan /music" in recorder.export_text()

    def test_brackets_are_not_markup(self, recorder) -> None:
        """Paths such as "Live [2004]" print as written."""
        console.error("bad file /music/Live [2004]/bold.mp3")
        assert "Live [2004]/bold.mp3" in recorder.export_text()


class TestPrintSection:
    """Tests for headed, indented blocks."""

    def test_lines_are_indented(self, recorder) -> None:
        console.print_section("Sources:", ["[0] /music", "[1] /other"])
        assert recorder.export_text().splitlines() == [
            "Sources:",
            "  [0] /music",
            "  [1] /other",
        ]

    def test_empty_placeholder(self, recorder) -> None:
        console.print_section("Sources:", iter([]))
        assert recorder.export_text().splitlines() == ["Sources:", "  (none)"]
