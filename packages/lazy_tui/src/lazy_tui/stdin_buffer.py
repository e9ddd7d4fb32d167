"""
StdinBuffer splits raw stdin chunks into complete input sequences.

Reads from a terminal can return partial escape sequences. The Page Down
sequence `\\x1b[6~` might arrive as:
- Read 1: `\\x1b[`
- Read 2: `6~`

The buffer accumulates data until a complete sequence is detected. A lone
ESC stays pending until the reader calls flush() after a short quiet period,
which is how a real Escape key press is told apart from the start of a
sequence.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import Literal


ESC = "\x1b"

# Seconds to wait for the rest of a sequence before flushing a lone ESC
ESCAPE_TIMEOUT = 0.05

SequenceStatus = Literal["complete", "incomplete", "not-escape"]


def _is_complete_csi_sequence(data: str) -> Literal["complete", "incomplete"]:
    """CSI sequences: ESC [ ... followed by a final byte (0x40-0x7E)."""
    # ESC [ [ <char> is the linux console function key form
    if data.startswith(f"{ESC}[["):
        return "complete" if len(data) >= 4 and data[-1] in "~ABCDE" else "incomplete"

    if len(data) < 3:
        return "incomplete"

    final = ord(data[-1])
    if 0x40 <= final <= 0x7E:
        return "complete"
    return "incomplete"


def _is_complete_osc_sequence(data: str) -> Literal["complete", "incomplete"]:
    """OSC sequences: ESC ] ... ST (where ST is ESC \\ or BEL)."""
    if data.endswith(f"{ESC}\\") or data.endswith("\x07"):
        return "complete"
    return "incomplete"


def is_complete_sequence(data: str) -> SequenceStatus:
    """Check if a string is a complete escape sequence or needs more data."""
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    if after_esc.startswith("["):
        return _is_complete_csi_sequence(data)

    if after_esc.startswith("]"):
        return _is_complete_osc_sequence(data)

    # SS3 sequences: ESC O followed by a single character
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key sequences (ESC + character) and anything unknown
    return "complete"


@dataclass
class ExtractResult:
    """Result of extracting complete sequences from buffer."""
    sequences: list[str] = field(default_factory=list)
    remainder: str = ""


def extract_complete_sequences(buffer: str) -> ExtractResult:
    """Split accumulated buffer into complete sequences."""
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        # ESC ESC: the first one is a complete Escape key press
        if remaining.startswith(ESC + ESC):
            sequences.append(ESC)
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            status = is_complete_sequence(remaining[:seq_end])
            if status == "incomplete":
                seq_end += 1
                continue
            sequences.append(remaining[:seq_end])
            pos += seq_end
            break

        if seq_end > len(remaining):
            return ExtractResult(sequences=sequences, remainder=remaining)

    return ExtractResult(sequences=sequences, remainder="")


def _is_utf8_lead_byte(byte: int) -> bool:
    return 0xC2 <= byte <= 0xF4


class StdinBuffer:
    """
    Accumulates stdin data and hands back complete sequences.

    Usage:
        buffer = StdinBuffer()
        for sequence in buffer.process(chunk):
            handle(sequence)
        if buffer.has_pending():
            # nothing arrived within ESCAPE_TIMEOUT
            for sequence in buffer.flush():
                handle(sequence)
    """

    def __init__(self) -> None:
        self._buffer: str = ""
        # Holds the leading bytes of a UTF-8 character split across reads
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _decoding_character(self) -> bool:
        pending, _ = self._decoder.getstate()
        return bool(pending)

    def process(self, data: str | bytes) -> list[str]:
        """
        Feed input data and return every sequence it completes.

        Args:
            data: Input data as string or bytes
        """
        if isinstance(data, bytes):
            # A lone high byte that cannot start a UTF-8 character is the
            # 8-bit meta encoding of ESC + char
            if (
                len(data) == 1
                and data[0] > 127
                and not _is_utf8_lead_byte(data[0])
                and not self._decoding_character()
            ):
                data = f"{ESC}{chr(data[0] - 128)}"
            else:
                data = self._decoder.decode(data)

        self._buffer += data
        result = extract_complete_sequences(self._buffer)
        self._buffer = result.remainder
        return result.sequences

    def has_pending(self) -> bool:
        return bool(self._buffer)

    def flush(self) -> list[str]:
        """Flush the buffer and return any remaining data as one sequence."""
        if not self._buffer:
            return []
        sequences = [self._buffer]
        self._buffer = ""
        return sequences

    def clear(self) -> None:
        self._buffer = ""
        self._decoder.reset()

    def get_buffer(self) -> str:
        """Get the current buffer contents."""
        return self._buffer
