"""
Tests for lazy_tui.table.data - columns, rows and the viewport.
"""

import pytest

from conftest import make_table
from lazy_tui.table.data import (
    TableColumn,
    TableColumnWidth,
    TableData,
    TableSection,
    TableViewport,
)
from lazy_tui.text import TerminalText, TextStyle


class TestTableViewport:
    def test_end_index_clamped_to_total(self):
        assert TableViewport(start_index=0, size=5, total_rows=12).end_index == 5
        assert TableViewport(start_index=10, size=5, total_rows=12).end_index == 12

    def test_scroll_down_moves_minimally(self):
        viewport = TableViewport(start_index=0, size=5, total_rows=12)
        viewport.scroll_to_show(5)
        assert viewport.start_index == 1
        assert viewport.end_index == 6

    def test_scroll_up_moves_to_index(self):
        viewport = TableViewport(start_index=4, size=5, total_rows=12)
        viewport.scroll_to_show(2)
        assert viewport.start_index == 2

    def test_visible_index_does_not_scroll(self):
        viewport = TableViewport(start_index=3, size=5, total_rows=12)
        viewport.scroll_to_show(7)
        assert viewport.start_index == 3

    def test_scroll_to_last_row(self):
        viewport = TableViewport(start_index=0, size=5, total_rows=12)
        viewport.scroll_to_show(11)
        assert viewport.start_index == 7
        assert viewport.end_index == 12

    def test_scroll_flags(self):
        viewport = TableViewport(start_index=0, size=5, total_rows=12)
        assert not viewport.can_scroll_up
        assert viewport.can_scroll_down
        viewport.scroll_to_show(11)
        assert viewport.can_scroll_up
        assert not viewport.can_scroll_down


class TestTableColumnWidth:
    def test_auto_uses_content_width(self):
        assert TableColumnWidth.auto().resolve(7) == 7

    def test_auto_never_below_one(self):
        assert TableColumnWidth.auto().resolve(0) == 1

    def test_fixed_ignores_content(self):
        assert TableColumnWidth.fixed(4).resolve(20) == 4

    def test_flexible_clamps(self):
        width = TableColumnWidth.flexible(min_width=5, max_width=10)
        assert width.resolve(2) == 5
        assert width.resolve(7) == 7
        assert width.resolve(30) == 10

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            TableColumnWidth.fixed(0)
        with pytest.raises(ValueError):
            TableColumnWidth.flexible(min_width=10, max_width=5)


class TestTableData:
    def test_strings_become_terminal_text(self):
        data = TableData([TableColumn("Name")], [["alice"]])
        assert data.columns[0].title == TerminalText.of("Name")
        assert data.rows[0][0] == TerminalText.of("alice")

    def test_styled_cells_are_kept(self):
        cell = TerminalText.of("ok", TextStyle.SUCCESS)
        data = TableData([TableColumn("Status")], [[cell]])
        assert data.rows[0][0] is cell

    def test_is_valid(self):
        assert make_table(3).is_valid
        assert TableData([TableColumn("A")], []).is_valid

    def test_invalid_row_detected(self):
        data = TableData([TableColumn("A"), TableColumn("B")], [["1", "2"], ["3"]])
        assert not data.is_valid
        assert data.first_invalid_row() == 1

    def test_sections_flatten_into_rows(self):
        data = TableData(
            [TableColumn("A")],
            sections=[
                TableSection([["1"], ["2"]], header="First"),
                TableSection([["3"]]),
            ],
        )
        assert [row[0].plain() for row in data.rows] == ["1", "2", "3"]
        assert data.sections[0].header.plain() == "First"
        assert data.sections[1].header is None

    def test_with_rows_keeps_columns(self):
        data = make_table(5)
        smaller = data.with_rows(data.rows[:2])
        assert smaller.columns == data.columns
        assert smaller.row_count == 2

    def test_pages(self):
        data = make_table(12)
        assert data.page_count(5) == 3
        assert [row[0].plain() for row in data.page(2, 5)] == ["10", "11"]
        assert data.page(3, 5) == []
        assert make_table(0).page_count(5) == 0
