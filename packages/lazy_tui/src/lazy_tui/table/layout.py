"""
Table layout engine.

Computes column widths for a terminal and draws borders and rows. The
interactive table uses it for everything except the highlighted row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from lazy_tui.table.data import TableColumn, TableData, TableRow
from lazy_tui.table.style import TableStyle
from lazy_tui.terminal import Terminal
from lazy_tui.text import TerminalText, TextStyle
from lazy_tui.theme import Theme, fg
from lazy_tui.utils import alignment_padding

MIN_COLUMN_WIDTH = 1


class BorderPosition(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class TableLayout:
    column_widths: tuple[int, ...]
    cell_padding: int

    @property
    def total_width(self) -> int:
        """Width of a full table line including borders."""
        cells = sum(width + 2 * self.cell_padding for width in self.column_widths)
        return cells + len(self.column_widths) + 1


def _border_overhead(column_count: int, cell_padding: int) -> int:
    return column_count + 1 + 2 * cell_padding * column_count


def _fit_widths(widths: list[int], columns: Sequence[TableColumn], available: int) -> list[int]:
    # Shrink the widest shrinkable column one cell at a time until it fits
    shrinkable = [i for i, column in enumerate(columns) if column.width.kind != "fixed"]
    while sum(widths) > available:
        candidates = [i for i in shrinkable if widths[i] > MIN_COLUMN_WIDTH]
        if not candidates:
            break
        widest = max(candidates, key=lambda i: widths[i])
        widths[widest] -= 1
    return widths


class TableRenderer:
    """Layout calculation and line drawing for tables."""

    def calculate_layout(self, data: TableData, style: TableStyle, terminal: Terminal) -> TableLayout:
        widths: list[int] = []
        for index, column in enumerate(data.columns):
            natural = column.title.visible_width()
            for row in data.rows:
                if index < len(row):
                    natural = max(natural, row[index].visible_width())
            if data.footer is not None and index < len(data.footer):
                natural = max(natural, data.footer[index].visible_width())
            widths.append(column.width.resolve(natural))

        available = terminal.columns - _border_overhead(len(widths), style.cell_padding)
        widths = _fit_widths(widths, data.columns, max(available, 0))
        return TableLayout(column_widths=tuple(widths), cell_padding=style.cell_padding)

    def render_border(
        self,
        position: BorderPosition,
        layout: TableLayout,
        style: TableStyle,
        theme: Theme,
        terminal: Terminal,
    ) -> str:
        chars = style.border_characters
        if position is BorderPosition.TOP:
            left, junction, right = chars.top_left, chars.top_junction, chars.top_right
        elif position is BorderPosition.MIDDLE:
            left, junction, right = chars.left_junction, chars.cross, chars.right_junction
        else:
            left, junction, right = chars.bottom_left, chars.bottom_junction, chars.bottom_right

        segments = [chars.horizontal * (width + 2 * layout.cell_padding) for width in layout.column_widths]
        return fg(left + junction.join(segments) + right, theme.muted, terminal)

    def render_cell(
        self,
        cell: TerminalText,
        width: int,
        column: TableColumn,
        theme: Theme,
        terminal: Terminal,
        is_header: bool = False,
    ) -> str:
        text = cell.truncate(width)
        left, right = alignment_padding(text.visible_width(), width, column.alignment)
        content = text.format(theme, terminal)
        if is_header and terminal.is_colored:
            content = f"\x1b[1m{content}\x1b[22m"
        return (" " * left) + content + (" " * right)

    def render_row(
        self,
        cells: Sequence[TerminalText],
        layout: TableLayout,
        style: TableStyle,
        theme: Theme,
        terminal: Terminal,
        columns: Sequence[TableColumn],
        is_header: bool = False,
    ) -> str:
        vertical = fg(style.border_characters.vertical, theme.muted, terminal)
        padding = " " * layout.cell_padding
        parts = [vertical]
        for index, cell in enumerate(cells):
            rendered = self.render_cell(
                cell, layout.column_widths[index], columns[index], theme, terminal, is_header
            )
            parts.append(padding + rendered + padding)
            parts.append(vertical)
        return "".join(parts)

    def render_section_header(
        self,
        header: TerminalText,
        layout: TableLayout,
        style: TableStyle,
        theme: Theme,
        terminal: Terminal,
    ) -> str:
        """A full-width line spanning every column."""
        vertical = fg(style.border_characters.vertical, theme.muted, terminal)
        padding = " " * layout.cell_padding
        inner = max(0, layout.total_width - 2 - 2 * layout.cell_padding)
        text = header.truncate(inner)
        fill = " " * (inner - text.visible_width())
        return vertical + padding + text.format(theme, terminal) + fill + padding + vertical

    def header_cells(self, columns: Sequence[TableColumn]) -> TableRow:
        return [TerminalText.of(column.title.plain(), TextStyle.PRIMARY) for column in columns]

    def render(self, data: TableData, style: TableStyle, theme: Theme, terminal: Terminal) -> str:
        """Draw a complete static table, including sections and footer."""
        layout = self.calculate_layout(data, style, terminal)
        lines = [
            self.render_border(BorderPosition.TOP, layout, style, theme, terminal),
            self.render_row(
                self.header_cells(data.columns), layout, style, theme, terminal, data.columns, is_header=True
            ),
        ]
        if style.header_separator:
            lines.append(self.render_border(BorderPosition.MIDDLE, layout, style, theme, terminal))

        if data.sections is not None:
            for index, section in enumerate(data.sections):
                if index > 0:
                    lines.append(self.render_border(BorderPosition.MIDDLE, layout, style, theme, terminal))
                if section.header is not None:
                    lines.append(self.render_section_header(section.header, layout, style, theme, terminal))
                for row in section.rows:
                    lines.append(self.render_row(row, layout, style, theme, terminal, data.columns))
        else:
            for row in data.rows:
                lines.append(self.render_row(row, layout, style, theme, terminal, data.columns))

        if data.footer is not None:
            lines.append(self.render_border(BorderPosition.MIDDLE, layout, style, theme, terminal))
            lines.append(self.render_row(data.footer, layout, style, theme, terminal, data.columns))

        lines.append(self.render_border(BorderPosition.BOTTOM, layout, style, theme, terminal))
        return "\n".join(lines)
