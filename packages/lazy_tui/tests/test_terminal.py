"""
Tests for lazy_tui.terminal.
"""

import io

from lazy_tui.terminal import ProcessTerminal, colors_enabled


class FakeTTY(io.StringIO):
    def __init__(self, tty: bool = True) -> None:
        super().__init__()
        self._tty = tty

    def isatty(self) -> bool:
        if self.closed:
            raise ValueError("I/O operation on closed file")
        return self._tty


class TestColorsEnabled:
    def test_tty(self):
        assert colors_enabled({}, FakeTTY())

    def test_not_a_tty(self):
        assert not colors_enabled({}, FakeTTY(tty=False))

    def test_no_color(self):
        assert not colors_enabled({"NO_COLOR": ""}, FakeTTY())

    def test_dumb_terminal(self):
        assert not colors_enabled({"TERM": "dumb"}, FakeTTY())


class TestProcessTerminal:
    def test_interactive_needs_both_streams(self):
        assert ProcessTerminal(FakeTTY(), FakeTTY(), {}).is_interactive
        assert not ProcessTerminal(FakeTTY(tty=False), FakeTTY(), {}).is_interactive
        assert not ProcessTerminal(FakeTTY(), FakeTTY(tty=False), {}).is_interactive

    def test_closed_stream_is_not_interactive(self):
        stdin = FakeTTY()
        stdin.close()
        assert not ProcessTerminal(stdin, FakeTTY(), {}).is_interactive

    def test_write(self):
        stdout = FakeTTY()
        ProcessTerminal(FakeTTY(), stdout, {}).write("hello")
        assert stdout.getvalue() == "hello"

    def test_cursor_hidden_inside_raw_mode(self):
        stdout = FakeTTY()
        terminal = ProcessTerminal(FakeTTY(), stdout, {})
        # StringIO has no file descriptor, so only the cursor changes
        with terminal.raw_mode_without_cursor():
            assert stdout.getvalue() == "\x1b[?25l"
        assert stdout.getvalue() == "\x1b[?25l\x1b[?25h"
