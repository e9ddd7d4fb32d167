"""
Terminal interface for lazy-tui.

The Terminal protocol is everything interactive components need from the
terminal: capability checks, output, a scoped raw-mode/no-cursor session and
a blocking read for the key listener. ProcessTerminal implements it on top of
the process stdin/stdout.
"""

from __future__ import annotations

import os
import select
import shutil
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Protocol, TextIO


class Terminal(Protocol):
    """Terminal interface - protocol for terminal implementations."""

    @property
    def is_interactive(self) -> bool: ...

    @property
    def is_colored(self) -> bool: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def write(self, data: str) -> None: ...

    def raw_mode_without_cursor(self) -> Any:
        """Context manager: raw input and hidden cursor for the with-block."""
        ...

    def read(self, timeout: float | None = None) -> bytes | None:
        """
        Read available input bytes.

        Returns b"" when nothing arrived within timeout and None at end of input.
        """
        ...


def colors_enabled(environ: Mapping[str, str], stream: TextIO) -> bool:
    """Colour is on for TTY output unless NO_COLOR is set or TERM is dumb."""
    if "NO_COLOR" in environ:
        return False
    if environ.get("TERM") == "dumb":
        return False
    return stream.isatty()


class ProcessTerminal:
    """Terminal implementation using process stdin/stdout."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._environ = os.environ if environ is None else environ
        self._old_term_settings: Any = None

    @property
    def is_interactive(self) -> bool:
        try:
            return self._stdin.isatty() and self._stdout.isatty()
        except ValueError:
            # Closed stream
            return False

    @property
    def is_colored(self) -> bool:
        return colors_enabled(self._environ, self._stdout)

    @property
    def columns(self) -> int:
        return shutil.get_terminal_size((80, 24)).columns

    @property
    def rows(self) -> int:
        return shutil.get_terminal_size((80, 24)).lines

    def write(self, data: str) -> None:
        self._stdout.write(data)
        self._stdout.flush()

    def _enable_raw_mode(self) -> None:
        if sys.platform == "win32":
            return

        import termios
        import tty

        try:
            self._old_term_settings = termios.tcgetattr(self._stdin.fileno())
            tty.setraw(self._stdin.fileno())
        except (termios.error, OSError):
            self._old_term_settings = None

    def _disable_raw_mode(self) -> None:
        if sys.platform == "win32":
            return

        import termios

        if self._old_term_settings is not None:
            try:
                termios.tcsetattr(
                    self._stdin.fileno(),
                    termios.TCSADRAIN,
                    self._old_term_settings,
                )
            except (termios.error, OSError):
                pass
            self._old_term_settings = None

    def hide_cursor(self) -> None:
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self.write("\x1b[?25h")

    @contextmanager
    def raw_mode_without_cursor(self) -> Iterator[None]:
        self._enable_raw_mode()
        self.hide_cursor()
        try:
            yield
        finally:
            self.show_cursor()
            self._disable_raw_mode()

    def read(self, timeout: float | None = None) -> bytes | None:
        fd = self._stdin.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return b""
        data = os.read(fd, 1024)
        return data if data else None
