"""
Renderer - writes whole frames, replacing the previous frame in place.

Each call to render() moves the cursor back to the first line of the last
frame, clears to the end of the screen and writes the new frame inside a
CSI 2026 synchronized-output block, so terminals that support it never show
a half-drawn frame.
"""

from __future__ import annotations

import math
from typing import Protocol

from lazy_tui.terminal import Terminal
from lazy_tui.utils import visible_width

SYNC_BEGIN = "\x1b[?2026h"
SYNC_END = "\x1b[?2026l"


class Rendering(Protocol):
    def render(self, frame: str) -> None: ...


class Renderer:
    """Full-frame output sink for a Terminal."""

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self._previous_line_count = 0
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        """Number of frames written."""
        return self._frame_count

    def physical_rows(self, lines: list[str]) -> int:
        """Terminal rows used by lines once the terminal wraps the long ones."""
        columns = max(1, self.terminal.columns)
        return sum(max(1, math.ceil(visible_width(line) / columns)) for line in lines)

    def render(self, frame: str) -> None:
        lines = frame.split("\n")

        buffer = SYNC_BEGIN
        if self._previous_line_count > 1:
            buffer += f"\x1b[{self._previous_line_count - 1}A"
        if self._previous_line_count:
            buffer += "\r\x1b[J"
        # Raw mode does not translate \n, so return the carriage explicitly
        buffer += "\r\n".join(lines)
        buffer += SYNC_END
        self.terminal.write(buffer)

        self._previous_line_count = self.physical_rows(lines)
        self._frame_count += 1

    def finish(self) -> None:
        """Leave the cursor on a fresh line below the last frame."""
        if self._previous_line_count:
            self.terminal.write("\r\n")
        self._previous_line_count = 0
