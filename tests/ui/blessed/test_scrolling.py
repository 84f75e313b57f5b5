"""Tests for scrolling and text helpers."""

from sonic_shelf.ui.blessed.helpers import (
    calculate_scroll_offset,
    clamp_selection,
    move_selection,
    truncate,
)


class TestScrollOffset:
    """Test scroll offset computation."""

    def test_no_scroll_when_visible(self):
        """Selection inside the viewport keeps the offset."""
        assert calculate_scroll_offset(5, 0, 10, 20) == 0

    def test_scroll_down(self):
        """Selection below the viewport scrolls so it is the last row."""
        assert calculate_scroll_offset(15, 0, 10, 20) == 6

    def test_scroll_up(self):
        """Selection above the viewport becomes the first row."""
        assert calculate_scroll_offset(2, 10, 10, 20) == 2

    def test_shrunk_list_pulls_offset_back(self):
        """No blank rows are left at the bottom after the list shrank."""
        assert calculate_scroll_offset(11, 8, 10, 12) == 2
        assert calculate_scroll_offset(0, 3, 10, 5) == 0

    def test_empty_list_or_viewport(self):
        assert calculate_scroll_offset(3, 2, 10, 0) == 0
        assert calculate_scroll_offset(3, 2, 0, 10) == 0


class TestMoveSelection:
    """Test cursor movement."""

    def test_clamps_at_ends(self):
        assert move_selection(9, 1, 10) == 9
        assert move_selection(0, -1, 10) == 0

    def test_wraps(self):
        assert move_selection(9, 1, 10, wrap=True) == 0
        assert move_selection(0, -1, 10, wrap=True) == 9

    def test_empty(self):
        assert move_selection(0, 1, 0) == 0


class TestClampSelection:
    """Test clamping after the list changes."""

    def test_past_end(self):
        assert clamp_selection(15, 10) == 9

    def test_empty(self):
        assert clamp_selection(5, 0) == 0

    def test_in_range(self):
        assert clamp_selection(3, 10) == 3


class TestTruncate:
    """Test text truncation."""

    def test_short_text_unchanged(self):
        assert truncate("So What", 20) == "So What"

    def test_exact_width(self):
        assert truncate("abcd", 4) == "abcd"

    def test_long_text_gets_ellipsis(self):
        assert truncate("Blue in Green", 8) == "Blue in…"
        assert len(truncate("Blue in Green", 8)) == 8

    def test_zero_width(self):
        assert truncate("anything", 0) == ""
