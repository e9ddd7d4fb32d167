"""
Tests for lazy_tui/keys.py - keyboard input parsing.
"""

import pytest
from lazy_tui.keys import Key, matches_key, parse_key


class TestKeyHelper:
    """Tests for the Key helper object."""

    def test_navigation_constants(self):
        assert Key.up == "up"
        assert Key.down == "down"
        assert Key.home == "home"
        assert Key.end == "end"
        assert Key.pageUp == "pageUp"
        assert Key.pageDown == "pageDown"

    def test_action_constants(self):
        assert Key.enter == "enter"
        assert Key.escape == "escape"

    def test_modifier_helpers(self):
        assert Key.ctrl("c") == "ctrl+c"
        assert Key.shift("up") == "shift+up"
        assert Key.alt("x") == "alt+x"


class TestParseLegacySequences:
    def test_arrow_keys(self, legacy_arrow_sequences):
        sequence, key_id = legacy_arrow_sequences
        assert parse_key(sequence) == key_id

    @pytest.mark.parametrize("sequence, key_id", [
        ("\x1bOA", "up"),
        ("\x1bOB", "down"),
        ("\x1bOH", "home"),
        ("\x1bOF", "end"),
        ("\x1b[1~", "home"),
        ("\x1b[7~", "home"),
        ("\x1b[4~", "end"),
        ("\x1b[8~", "end"),
        ("\x1b[[5~", "pageUp"),
        ("\x1b[[6~", "pageDown"),
        ("\x1bOM", "enter"),
    ])
    def test_alternate_terminal_forms(self, sequence, key_id):
        assert parse_key(sequence) == key_id


class TestParseModifiedSequences:
    @pytest.mark.parametrize("sequence, key_id", [
        ("\x1b[1;2A", "shift+up"),
        ("\x1b[1;3B", "alt+down"),
        ("\x1b[1;5C", "ctrl+right"),
        ("\x1b[1;6D", "shift+ctrl+left"),
        ("\x1b[5;5~", "ctrl+pageUp"),
        ("\x1b[3;2~", "shift+delete"),
    ])
    def test_modifier_parameter(self, sequence, key_id):
        assert parse_key(sequence) == key_id


class TestParseSingleCharacters:
    @pytest.mark.parametrize("data, key_id", [
        ("\r", "enter"),
        ("\n", "enter"),
        ("\t", "tab"),
        ("\x1b", "escape"),
        ("\x7f", "backspace"),
        ("\x08", "backspace"),
        ("\x03", "ctrl+c"),
        ("\x01", "ctrl+a"),
        (" ", "space"),
    ])
    def test_control_characters(self, data, key_id):
        assert parse_key(data) == key_id

    def test_printable_characters_keep_case(self):
        assert parse_key("j") == "j"
        assert parse_key("k") == "k"
        assert parse_key("J") == "J"

    def test_alt_character(self):
        assert parse_key("\x1bx") == "alt+x"

    def test_unrecognized_sequence(self):
        assert parse_key("\x1b[99z") is None
        assert parse_key("\x1b]0;title\x07") is None


class TestMatchesKey:
    def test_matches(self):
        assert matches_key("\x1b[B", Key.down)
        assert matches_key("j", "j")
        assert matches_key("\r", Key.enter)

    def test_does_not_match(self):
        assert not matches_key("\x1b[A", Key.down)
        assert not matches_key("J", "j")
