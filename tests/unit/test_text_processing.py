"""Unit tests for bullet marker handling."""

import pytest

from resumeai.utils.text_processing import (
    clean_lines,
    insert_paragraph_break,
    set_max_consecutive_blank_lines,
    strip_bullet_markers,
    truncate_display,
)


@pytest.mark.unit
def test_strip_bullet_markers_removes_every_leading_marker():
    """Test stripping leading bullet markers from every line."""
    assert strip_bullet_markers("• A\n• B") == "A\nB"


@pytest.mark.unit
def test_strip_bullet_markers_is_idempotent():
    """Test that stripping twice changes nothing."""
    text = "• Led a team\n• Shipped v2\nplain line"
    once = strip_bullet_markers(text)
    assert strip_bullet_markers(once) == once


@pytest.mark.unit
def test_strip_bullet_markers_keeps_inline_bullets():
    """Only markers at the start of a line are removed."""
    assert strip_bullet_markers("Python • Go") == "Python • Go"


@pytest.mark.unit
def test_strip_bullet_markers_handles_none():
    """Test stripping None."""
    assert strip_bullet_markers(None) == ""


@pytest.mark.unit
def test_clean_lines_drops_trailing_empty_bullet():
    """Test that a trailing empty bullet is dropped."""
    assert clean_lines("• A\n• B\n• ") == ["A", "B"]


@pytest.mark.unit
def test_clean_lines_keeps_interior_blank_lines():
    """Test that blank lines between bullets are kept."""
    assert clean_lines("A\n\nB") == ["A", "", "B"]


@pytest.mark.unit
def test_clean_lines_whitespace_only_is_empty():
    """Test that whitespace-only text has no lines."""
    assert clean_lines("   \n \t \n") == []


@pytest.mark.unit
def test_insert_paragraph_break_bulleted():
    """Test a bulleted paragraph break at the end of text."""
    text, cursor = insert_paragraph_break("• A", 3)
    assert text == "• A\n• "
    assert cursor == 6


@pytest.mark.unit
def test_insert_paragraph_break_in_middle():
    """Test a bulleted paragraph break in the middle of text."""
    text, cursor = insert_paragraph_break("• AB", 3)
    assert text == "• A\n• B"
    assert cursor == 6


@pytest.mark.unit
def test_insert_paragraph_break_plain():
    """Test a plain line break."""
    text, cursor = insert_paragraph_break("Hello world", 5, bulleted=False)
    assert text == "Hello\n world"
    assert cursor == 6


@pytest.mark.unit
def test_insert_paragraph_break_clamps_cursor():
    """Test that out-of-range cursors are clamped."""
    text, cursor = insert_paragraph_break("abc", 99)
    assert text == "abc\n• "
    assert cursor == len(text)

    text, cursor = insert_paragraph_break("abc", -4, bulleted=False)
    assert text == "\nabc"
    assert cursor == 1


@pytest.mark.unit
def test_truncate_display():
    """Test truncating text for display."""
    assert truncate_display("short", 10) == "short"
    assert truncate_display("this is a very long string", 10) == "this is..."


@pytest.mark.unit
def test_set_max_consecutive_blank_lines():
    """Test collapsing runs of blank lines."""
    assert set_max_consecutive_blank_lines("a\n\n\n\nb", max_consecutive=1) == "a\n\nb"
