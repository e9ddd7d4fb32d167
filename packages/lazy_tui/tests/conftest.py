"""
Shared pytest fixtures for lazy_tui tests.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Iterator, Sequence

import pytest

from lazy_tui.key_listener import KeyHandler, ListenResult
from lazy_tui.table.data import TableColumn, TableData


# =============================================================================
# Terminal Mock Fixtures
# =============================================================================


class MockTerminal:
    """Mock terminal for testing without real I/O."""

    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        interactive: bool = True,
        colored: bool = False,
        input_chunks: Sequence[bytes | None] = (),
        idle: bool = False,
    ) -> None:
        self._columns = width
        self._rows = height
        self._interactive = interactive
        self._colored = colored
        self._writes: list[str] = []
        self._input = list(input_chunks)
        self._idle = idle
        self.raw_mode_entered = 0
        self.raw_mode_exited = 0
        self.read_timeouts: list[float | None] = []

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    @property
    def is_colored(self) -> bool:
        return self._colored

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def in_raw_mode(self) -> bool:
        return self.raw_mode_entered > self.raw_mode_exited

    def write(self, data: str) -> None:
        self._writes.append(data)

    def get_writes(self) -> list[str]:
        return self._writes.copy()

    def clear_writes(self) -> None:
        self._writes.clear()

    @contextmanager
    def raw_mode_without_cursor(self) -> Iterator[None]:
        self.raw_mode_entered += 1
        try:
            yield
        finally:
            self.raw_mode_exited += 1

    def read(self, timeout: float | None = None) -> bytes | None:
        """Replay scripted chunks; then None, or timeouts forever when idle."""
        self.read_timeouts.append(timeout)
        if not self._input:
            if self._idle:
                time.sleep(timeout or 0)
                return b""
            return None
        return self._input.pop(0)


@pytest.fixture
def mock_terminal() -> MockTerminal:
    """Provide a mock terminal for component tests."""
    return MockTerminal()


@pytest.fixture
def mock_terminal_colored() -> MockTerminal:
    """Provide a colour-capable mock terminal."""
    return MockTerminal(colored=True)


@pytest.fixture
def mock_terminal_narrow() -> MockTerminal:
    """Provide a narrow mock terminal (30 columns)."""
    return MockTerminal(width=30, height=20)


# =============================================================================
# Key Listener and Renderer Fakes
# =============================================================================


class ScriptedKeyListener:
    """
    Key listener that replays key identifiers.

    When wait_before is given, the listener blocks on that event before
    sending the key at the matching position, which lets a test interleave
    table updates with key presses.
    """

    def __init__(
        self,
        keys: Sequence[str],
        wait_before: dict[int, threading.Event] | None = None,
        timeout: float = 5.0,
    ) -> None:
        self.keys = list(keys)
        self.wait_before = wait_before or {}
        self.timeout = timeout
        self.sent: list[str] = []
        self.results: list[ListenResult] = []
        self.listen_thread: threading.Thread | None = None

    def listen(self, terminal, on_key: KeyHandler, should_stop=None) -> None:
        self.listen_thread = threading.current_thread()
        for position, key in enumerate(self.keys):
            event = self.wait_before.get(position)
            if event is not None:
                event.wait(self.timeout)
            self.sent.append(key)
            result = on_key(key)
            self.results.append(result)
            if result is ListenResult.ABORT:
                return


class RecordingRenderer:
    """Rendering sink that keeps every frame."""

    def __init__(self) -> None:
        self.frames: list[str] = []
        self.finished = 0

    def render(self, frame: str) -> None:
        self.frames.append(frame)

    def finish(self) -> None:
        self.finished += 1

    @property
    def last_frame(self) -> str:
        return self.frames[-1]


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


# =============================================================================
# Table Data Fixtures
# =============================================================================


def make_table(row_count: int, columns: Sequence[str] = ("ID", "Name")) -> TableData:
    """Table whose row i reads ("i", "Item i")."""
    rows = [[str(i), f"Item {i}"][: len(columns)] for i in range(row_count)]
    return TableData([TableColumn(title) for title in columns], rows)


@pytest.fixture
def twelve_rows() -> TableData:
    return make_table(12)


@pytest.fixture
def three_rows() -> TableData:
    return make_table(3)


# =============================================================================
# Key Sequence Test Data Fixtures
# =============================================================================


@pytest.fixture(params=[
    ("\x1b[A", "up"),
    ("\x1b[B", "down"),
    ("\x1b[C", "right"),
    ("\x1b[D", "left"),
    ("\x1b[H", "home"),
    ("\x1b[F", "end"),
    ("\x1b[5~", "pageUp"),
    ("\x1b[6~", "pageDown"),
    ("\x1b[2~", "insert"),
    ("\x1b[3~", "delete"),
])
def legacy_arrow_sequences(request) -> tuple[str, str]:
    """Provide (sequence, key_id) for legacy navigation keys."""
    return request.param
