"""
Table data model: columns, rows, sections and the scrolling viewport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from lazy_tui.text import TerminalText, TextLike, as_terminal_text
from lazy_tui.utils import Alignment


TableRow = list[TerminalText]


@dataclass(frozen=True)
class TableColumnWidth:
    """
    Width hint for a column.

    auto sizes to content, fixed forces a width, flexible clamps the content
    width into [min_width, max_width].
    """
    kind: str = "auto"
    value: int | None = None
    min_width: int | None = None
    max_width: int | None = None

    @classmethod
    def auto(cls) -> TableColumnWidth:
        return cls()

    @classmethod
    def fixed(cls, width: int) -> TableColumnWidth:
        if width < 1:
            raise ValueError(f"fixed column width must be positive, got {width}")
        return cls(kind="fixed", value=width)

    @classmethod
    def flexible(cls, min_width: int | None = None, max_width: int | None = None) -> TableColumnWidth:
        if min_width is not None and max_width is not None and min_width > max_width:
            raise ValueError(f"min_width {min_width} is larger than max_width {max_width}")
        return cls(kind="flexible", min_width=min_width, max_width=max_width)

    def resolve(self, content_width: int) -> int:
        if self.kind == "fixed" and self.value is not None:
            return self.value
        width = content_width
        if self.kind == "flexible":
            if self.min_width is not None:
                width = max(width, self.min_width)
            if self.max_width is not None:
                width = min(width, self.max_width)
        return max(1, width)


@dataclass(frozen=True, init=False)
class TableColumn:
    title: TerminalText
    alignment: Alignment = "left"
    width: TableColumnWidth = field(default_factory=TableColumnWidth.auto)

    def __init__(
        self,
        title: TextLike,
        alignment: Alignment = "left",
        width: TableColumnWidth | None = None,
    ) -> None:
        object.__setattr__(self, "title", as_terminal_text(title))
        object.__setattr__(self, "alignment", alignment)
        object.__setattr__(self, "width", width or TableColumnWidth.auto())


def make_row(cells: Sequence[TextLike]) -> TableRow:
    return [as_terminal_text(cell) for cell in cells]


@dataclass(frozen=True, init=False)
class TableSection:
    """A group of rows with an optional header line."""
    header: TerminalText | None
    rows: tuple[TableRow, ...]

    def __init__(self, rows: Sequence[Sequence[TextLike]], header: TextLike | None = None) -> None:
        object.__setattr__(self, "header", None if header is None else as_terminal_text(header))
        object.__setattr__(self, "rows", tuple(make_row(row) for row in rows))


@dataclass(frozen=True, init=False)
class TableData:
    """
    Immutable table contents.

    When sections are given, rows is their flattened concatenation.
    """
    columns: tuple[TableColumn, ...]
    rows: tuple[TableRow, ...]
    sections: tuple[TableSection, ...] | None = None
    footer: TableRow | None = None

    def __init__(
        self,
        columns: Sequence[TableColumn],
        rows: Sequence[Sequence[TextLike]] = (),
        sections: Sequence[TableSection] | None = None,
        footer: Sequence[TextLike] | None = None,
    ) -> None:
        object.__setattr__(self, "columns", tuple(columns))
        if sections is not None:
            object.__setattr__(self, "sections", tuple(sections))
            object.__setattr__(
                self, "rows", tuple(row for section in sections for row in section.rows)
            )
        else:
            object.__setattr__(self, "sections", None)
            object.__setattr__(self, "rows", tuple(make_row(row) for row in rows))
        object.__setattr__(self, "footer", None if footer is None else make_row(footer))

    @property
    def is_valid(self) -> bool:
        """True when every row has one cell per column."""
        column_count = len(self.columns)
        return all(len(row) == column_count for row in self.rows)

    def first_invalid_row(self) -> int | None:
        column_count = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != column_count:
                return index
        return None

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def with_rows(self, rows: Sequence[TableRow]) -> TableData:
        """Same columns, different rows; sections and footer are dropped."""
        return TableData(self.columns, rows)

    def page(self, page: int, size: int) -> list[TableRow]:
        """Rows of a 0-based page; empty past the last page."""
        start = page * size
        if start < 0 or start >= len(self.rows):
            return []
        return list(self.rows[start:min(start + size, len(self.rows))])

    def page_count(self, size: int) -> int:
        if size <= 0:
            return 1
        return (len(self.rows) + size - 1) // size


@dataclass
class TableViewport:
    """Window of visible row indices [start_index, end_index)."""
    start_index: int
    size: int
    total_rows: int

    @property
    def end_index(self) -> int:
        return min(self.start_index + self.size, self.total_rows)

    def scroll_to_show(self, index: int) -> None:
        """Move the window the minimal distance so that index is visible."""
        if index < self.start_index:
            self.start_index = index
        elif index >= self.end_index:
            self.start_index = max(0, index - self.size + 1)

    @property
    def can_scroll_up(self) -> bool:
        return self.start_index > 0

    @property
    def can_scroll_down(self) -> bool:
        return self.end_index < self.total_rows
