"""
Colour theme and ANSI colouring helpers.

Colours are hex strings. They are only turned into 24-bit ANSI sequences when
the terminal reports colour support; otherwise text passes through unchanged.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from lazy_tui.terminal import Terminal


_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

FG_RESET = "\x1b[39m"
BG_RESET = "\x1b[49m"


def validate_hex_color(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"expected a #RRGGBB colour, got {value!r}")
    return value.upper()


class Theme(BaseModel):
    """Semantic colours used to style text and table chrome."""
    model_config = ConfigDict(frozen=True)

    primary: str = "#A378F2"
    secondary: str = "#FF4081"
    muted: str = "#505050"
    accent: str = "#AC6115"
    danger: str = "#FF1744"
    success: str = "#56822B"
    warning: str = "#E2A500"

    @field_validator("*")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        return validate_hex_color(value)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    value = hex_color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def fg(text: str, hex_color: str, terminal: Terminal) -> str:
    """Colour the foreground of text if the terminal is coloured."""
    if not terminal.is_colored:
        return text
    r, g, b = hex_to_rgb(hex_color)
    return f"\x1b[38;2;{r};{g};{b}m{text}{FG_RESET}"


def bg(text: str, hex_color: str, terminal: Terminal) -> str:
    """Colour the background of text if the terminal is coloured."""
    if not terminal.is_colored:
        return text
    r, g, b = hex_to_rgb(hex_color)
    return f"\x1b[48;2;{r};{g};{b}m{text}{BG_RESET}"
