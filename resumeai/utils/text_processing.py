"""
Text processing utilities for resume free text.

Descriptions are stored as plain text with embedded bullet markers ("• ") so
the editor can show an auto-continuing list. Markers are stripped at render time.
"""

import re
from typing import List, Tuple

BULLET_MARKER = "• "

# Marker at the start of any line. Only spaces/tabs after it are consumed so
# that line breaks survive.
_LEADING_BULLET = re.compile(r"^•[ \t]*", re.MULTILINE)


def strip_bullet_markers(text: str) -> str:
    """
    Remove leading bullet markers from every line, keeping line breaks.

    Idempotent: cleaning already-clean text returns it unchanged.

    Example:
        >>> strip_bullet_markers("• Led a team\\n• Shipped v2")
        'Led a team\\nShipped v2'
    """
    return _LEADING_BULLET.sub("", text or "")


def clean_lines(text: str) -> List[str]:
    """
    Strip bullet markers and split into display lines.

    Trailing whitespace-only lines are dropped; interior blank lines are kept
    so intentional spacing survives.

    Example:
        >>> clean_lines("• A\\n• B\\n• ")
        ['A', 'B']
    """
    lines = [line.rstrip() for line in strip_bullet_markers(text).split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return lines


def insert_paragraph_break(text: str, cursor: int, bulleted: bool = True) -> Tuple[str, int]:
    """
    Insert a line break at the cursor, optionally followed by a bullet marker.

    Mirrors pressing Enter in a description textarea: the new line starts with
    "• " and the cursor lands after the marker.

    Args:
        text: Current field value
        cursor: Cursor position (clamped to the text bounds)
        bulleted: Append the bullet marker after the break

    Returns:
        Tuple of (new_text, new_cursor)

    Example:
        >>> insert_paragraph_break("• A", 3)
        ('• A\\n• ', 6)
    """
    text = text or ""
    cursor = max(0, min(cursor, len(text)))
    insert = "\n" + BULLET_MARKER if bulleted else "\n"
    return text[:cursor] + insert + text[cursor:], cursor + len(insert)


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Collapse runs of blank lines to at most max_consecutive.

    Lines containing only whitespace count as blank.

    Args:
        content: Text to normalize
        max_consecutive: Maximum number of consecutive blank lines to keep

    Returns:
        Normalized text
    """
    lines = content.split("\n")
    result = []
    blank_run = 0

    for line in lines:
        if line.strip():
            blank_run = 0
            result.append(line)
        else:
            blank_run += 1
            if blank_run <= max_consecutive:
                result.append("")

    return "\n".join(result)
