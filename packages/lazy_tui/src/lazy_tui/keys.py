"""
Keyboard input decoding for terminal applications.

Turns one complete input sequence (as produced by StdinBuffer) into a key
identifier string such as "up", "pageDown", "enter", "ctrl+c" or "k".

API:
- parse_key(data) - Parse input and return the key identifier
- matches_key(data, key_id) - Check if input matches a key identifier
- Key - Helper object with the key identifier constants
"""

from __future__ import annotations

import re
from typing import Literal


# =============================================================================
# Key Helper Class
# =============================================================================

class _KeyHelper:
    """
    Key identifier constants.

    Usage:
    - Key.escape, Key.enter, Key.up, etc. for special keys
    - Key.ctrl("c"), Key.shift("up") for modified keys
    """

    escape: Literal["escape"] = "escape"
    enter: Literal["enter"] = "enter"
    tab: Literal["tab"] = "tab"
    space: Literal["space"] = "space"
    backspace: Literal["backspace"] = "backspace"
    delete: Literal["delete"] = "delete"
    insert: Literal["insert"] = "insert"
    home: Literal["home"] = "home"
    end: Literal["end"] = "end"
    pageUp: Literal["pageUp"] = "pageUp"
    pageDown: Literal["pageDown"] = "pageDown"
    up: Literal["up"] = "up"
    down: Literal["down"] = "down"
    left: Literal["left"] = "left"
    right: Literal["right"] = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


Key = _KeyHelper()


# =============================================================================
# Constants
# =============================================================================

MODIFIERS = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# Sequences emitted by xterm, rxvt, linux console and tmux for unmodified keys
LEGACY_SEQUENCE_KEY_IDS: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[7~": "home",
    "\x1b[4~": "end",
    "\x1b[8~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[[5~": "pageUp",
    "\x1b[[6~": "pageDown",
    "\x1bOM": "enter",
}

# Final byte of "CSI 1 ; <modifier> <final>" sequences
_CSI_FINAL_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

# Number of "CSI <number> ; <modifier> ~" sequences
_CSI_TILDE_KEYS = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageUp",
    "6": "pageDown",
    "7": "home",
    "8": "end",
}

_MODIFIED_CSI = re.compile(r"^\x1b\[1;(\d+)([A-HF])$")
_MODIFIED_TILDE = re.compile(r"^\x1b\[(\d+);(\d+)~$")


def _with_modifiers(key: str, modifier_param: int) -> str:
    # xterm encodes modifiers as 1 + bitmask
    mask = max(0, modifier_param - 1)
    modifiers = [name for name, bit in MODIFIERS.items() if mask & bit]
    return "+".join(modifiers + [key])


# =============================================================================
# Parsing
# =============================================================================

def parse_key(data: str) -> str | None:
    """
    Parse one input sequence and return the key identifier.

    Args:
        data: A complete input sequence from the terminal

    Returns:
        Key identifier string or None if not recognized
    """
    if data in LEGACY_SEQUENCE_KEY_IDS:
        return LEGACY_SEQUENCE_KEY_IDS[data]

    match = _MODIFIED_CSI.match(data)
    if match:
        return _with_modifiers(_CSI_FINAL_KEYS[match.group(2)], int(match.group(1)))

    match = _MODIFIED_TILDE.match(data)
    if match and match.group(1) in _CSI_TILDE_KEYS:
        return _with_modifiers(_CSI_TILDE_KEYS[match.group(1)], int(match.group(2)))

    if len(data) == 1:
        code = ord(data)
        if code < 32 or code == 127:
            if code == 9:
                return "tab"
            if code in (10, 13):
                return "enter"
            if code == 27:
                return "escape"
            if code in (8, 127):
                return "backspace"
            if 1 <= code <= 26:
                return f"ctrl+{chr(code + 96)}"
            return None
        if data == " ":
            return "space"
        return data

    # Meta key: ESC followed by one printable character
    if len(data) == 2 and data[0] == "\x1b" and data[1].isprintable():
        return f"alt+{data[1]}"

    return None


def matches_key(data: str, key_id: str) -> bool:
    """Check whether an input sequence decodes to key_id."""
    return parse_key(data) == key_id
