"""
Width-aware text helpers for lazy-tui.

Key functions:
- visible_width: Terminal columns occupied by text, ignoring ANSI codes
- truncate_to_width: Cut text to a column budget, keeping ANSI codes
- align_to_width: Pad text to a column budget with left/center/right alignment
"""

from __future__ import annotations

import re
from typing import Literal

from wcwidth import wcwidth  # type: ignore[import-untyped]


Alignment = Literal["left", "center", "right"]

ELLIPSIS = "…"

# ANSI escape sequence patterns
ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]")
OSC_ESCAPE = re.compile(r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")


def strip_ansi(text: str) -> str:
    """Remove CSI and OSC escape sequences from text."""
    text = ANSI_ESCAPE.sub("", text)
    text = OSC_ESCAPE.sub("", text)
    return text


def char_width(char: str) -> int:
    """Columns used by a single character; control characters count as 0."""
    return max(0, wcwidth(char))


def visible_width(text: str) -> int:
    """
    Calculate the visible width of text, ignoring ANSI codes.

    Args:
        text: Input text possibly containing ANSI codes

    Returns:
        Visible width in terminal columns

    Example:
        >>> visible_width("\x1b[31mHello\x1b[0m")
        5
    """
    return sum(char_width(c) for c in strip_ansi(text))


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """
    Extract the ANSI code starting at pos.

    Returns:
        Tuple of (code, end_position) or None if no complete code starts there
    """
    if pos >= len(text) or text[pos] != "\x1b":
        return None

    i = pos + 1
    if i >= len(text):
        return None

    if text[i] == "[":
        i += 1
        while i < len(text) and not text[i].isalpha():
            i += 1
        if i < len(text):
            return (text[pos:i + 1], i + 1)
    elif text[i] == "]":
        i += 1
        while i < len(text) and text[i] != "\x07":
            i += 1
        if i < len(text):
            return (text[pos:i + 1], i + 1)

    return None


def truncate_to_width(
    text: str,
    max_width: int,
    ellipsis: str = ELLIPSIS,
    pad: bool = False,
) -> str:
    """
    Truncate text to max_width columns, preserving ANSI codes.

    When truncation happens the ellipsis takes the last columns of the budget,
    so a 5-column budget keeps 4 columns of text plus a one-column ellipsis.

    Args:
        text: Input text
        max_width: Maximum visible width
        ellipsis: String appended when truncated
        pad: Whether to pad with spaces if shorter

    Returns:
        Text that fits in max_width columns
    """
    if max_width <= 0:
        return ""

    total_width = visible_width(text)
    if total_width <= max_width:
        if pad and total_width < max_width:
            return text + (" " * (max_width - total_width))
        return text

    current_width = 0
    result = []
    ellipsis_width = visible_width(ellipsis)

    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            ansi_match = extract_ansi_code(text, i)
            if ansi_match:
                code, next_pos = ansi_match
                result.append(code)
                i = next_pos
                continue

        width = char_width(text[i])
        if current_width + width > max_width - ellipsis_width:
            result.append(ellipsis)
            current_width += ellipsis_width
            break

        result.append(text[i])
        current_width += width
        i += 1

    if pad and current_width < max_width:
        result.append(" " * (max_width - current_width))
    return "".join(result)


def alignment_padding(content_width: int, width: int, alignment: Alignment) -> tuple[int, int]:
    """
    Split the free columns of a cell into (left, right) padding.

    Center alignment puts the odd column, if any, on the right.
    """
    extra = max(0, width - content_width)
    if alignment == "right":
        return extra, 0
    if alignment == "center":
        left = extra // 2
        return left, extra - left
    return 0, extra


def align_to_width(text: str, width: int, alignment: Alignment = "left") -> str:
    """Pad text (which must already fit) to width columns."""
    left, right = alignment_padding(visible_width(text), width, alignment)
    return (" " * left) + text + (" " * right)
