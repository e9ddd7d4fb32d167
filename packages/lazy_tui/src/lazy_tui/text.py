"""
Styled terminal text.

TerminalText keeps semantic styles (primary, muted, danger, ...) instead of
raw escape codes, so the same value renders coloured on a capable terminal
and as plain text everywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Union

from lazy_tui.theme import Theme, fg
from lazy_tui.utils import ELLIPSIS, char_width, visible_width

if TYPE_CHECKING:
    from lazy_tui.terminal import Terminal


class TextStyle(str, Enum):
    PLAIN = "plain"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    MUTED = "muted"
    ACCENT = "accent"


@dataclass(frozen=True)
class TextSpan:
    text: str
    style: TextStyle = TextStyle.PLAIN


@dataclass(frozen=True)
class TerminalText:
    """Immutable run of styled spans."""
    spans: tuple[TextSpan, ...] = ()

    @classmethod
    def of(cls, text: str, style: TextStyle = TextStyle.PLAIN) -> TerminalText:
        return cls((TextSpan(text, style),))

    def __str__(self) -> str:
        return self.plain()

    def __add__(self, other: TerminalText | str) -> TerminalText:
        return TerminalText(self.spans + as_terminal_text(other).spans)

    def plain(self) -> str:
        """Text without any styling."""
        return "".join(span.text for span in self.spans)

    def visible_width(self) -> int:
        return visible_width(self.plain())

    def format(self, theme: Theme, terminal: Terminal) -> str:
        """Render spans with the theme's colours when the terminal supports them."""
        parts = []
        for span in self.spans:
            if span.style is TextStyle.PLAIN:
                parts.append(span.text)
            else:
                parts.append(fg(span.text, getattr(theme, span.style.value), terminal))
        return "".join(parts)

    def truncate(self, max_width: int, ellipsis: str = ELLIPSIS) -> TerminalText:
        """
        Cut the text to max_width columns, appending ellipsis when cut.

        The ellipsis inherits the style of the span it interrupts.
        """
        if max_width <= 0:
            return TerminalText()
        if self.visible_width() <= max_width:
            return self

        budget = max_width - visible_width(ellipsis)
        spans: list[TextSpan] = []
        used = 0
        for span in self.spans:
            kept: list[str] = []
            for char in span.text:
                width = char_width(char)
                if used + width > budget:
                    kept.append(ellipsis)
                    spans.append(TextSpan("".join(kept), span.style))
                    return TerminalText(tuple(spans))
                kept.append(char)
                used += width
            spans.append(TextSpan("".join(kept), span.style))
        return TerminalText(tuple(spans))


TextLike = Union[TerminalText, str]


def as_terminal_text(value: TextLike) -> TerminalText:
    if isinstance(value, TerminalText):
        return value
    return TerminalText.of(str(value))


def join_text(parts: Iterable[TextLike], separator: str = "") -> TerminalText:
    spans: list[TextSpan] = []
    for index, part in enumerate(parts):
        if index and separator:
            spans.append(TextSpan(separator))
        spans.extend(as_terminal_text(part).spans)
    return TerminalText(tuple(spans))


class TableCellStyle:
    """Helpers that build single-style table cells."""

    @staticmethod
    def plain(text: str) -> TerminalText:
        return TerminalText.of(text)

    @staticmethod
    def primary(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.PRIMARY)

    @staticmethod
    def secondary(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.SECONDARY)

    @staticmethod
    def success(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.SUCCESS)

    @staticmethod
    def warning(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.WARNING)

    @staticmethod
    def danger(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.DANGER)

    @staticmethod
    def muted(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.MUTED)

    @staticmethod
    def accent(text: str) -> TerminalText:
        return TerminalText.of(text, TextStyle.ACCENT)

    @staticmethod
    def money(
        value: float,
        formatted: str | None = None,
        currency_symbol: str = "$",
        invert_sign: bool = False,
    ) -> TerminalText:
        """
        Monetary cell: success colour for positive amounts, danger for negative.

        Args:
            value: The numeric amount
            formatted: Display text; defaults to e.g. "-$1,234.56"
            currency_symbol: Symbol used when formatting
            invert_sign: Treat negative values as positive (debts shown as positives)
        """
        if formatted is None:
            prefix = "-" if value < 0 else ""
            formatted = f"{prefix}{currency_symbol}{abs(value):,.2f}"
        is_positive = value < 0 if invert_sign else value >= 0
        return TerminalText.of(formatted, TextStyle.SUCCESS if is_positive else TextStyle.DANGER)
