"""
Frame rendering for the interactive table.

A frame is the visible slice of rows drawn through the layout engine, with
the selected row drawn by render_selected_row(), followed by a blank line and
the navigation help.
"""

from __future__ import annotations

import logging
import threading
from typing import Sequence

from lazy_tui.renderer import Rendering
from lazy_tui.table.data import TableColumn, TableData, TableRow
from lazy_tui.table.layout import BorderPosition, TableLayout, TableRenderer
from lazy_tui.table.state import Snapshot
from lazy_tui.table.style import TableStyle
from lazy_tui.terminal import Terminal
from lazy_tui.theme import Theme, bg, fg
from lazy_tui.utils import alignment_padding, truncate_to_width, visible_width

logger = logging.getLogger(__name__)

NAVIGATION_CONTROLS = "↑↓/jk: Navigate, Enter: Select, Esc: Cancel"
PAGE_CONTROLS = "PgUp/PgDn: Page, Home/End: First/Last"


def page_position(selected_index: int, total_rows: int, page_size: int) -> tuple[int, int]:
    """(current_page, total_pages), both 1-based counts."""
    current_page = (selected_index // page_size) + 1
    total_pages = (total_rows + page_size - 1) // page_size
    return current_page, total_pages


class TableFrameRenderer:
    def __init__(
        self,
        output: Rendering,
        terminal: Terminal,
        style: TableStyle,
        theme: Theme,
        page_size: int,
        table_renderer: TableRenderer | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._output = output
        self._terminal = terminal
        self._style = style
        self._theme = theme
        self._page_size = page_size
        self._table_renderer = table_renderer or TableRenderer()
        self._logger = log or logger
        self._lock = threading.Lock()
        self._last_version = -1

    def render(self, snapshot: Snapshot) -> bool:
        """
        Paint a snapshot unless a newer one is already on screen.

        Frames are built concurrently but written one at a time, so a slow
        frame for an old snapshot never replaces a newer frame.

        Returns:
            True if the frame was written
        """
        frame = self.frame(snapshot)
        with self._lock:
            if snapshot.version < self._last_version:
                self._logger.debug(f"Dropping stale frame for snapshot {snapshot.version}")
                return False
            self._last_version = snapshot.version
            self._output.render(frame)
            return True

    def frame(self, snapshot: Snapshot) -> str:
        viewport = snapshot.viewport
        visible_rows = snapshot.data.rows[viewport.start_index:viewport.end_index]
        visible = TableData(snapshot.data.columns, visible_rows)
        selected_in_viewport = snapshot.selected_index - viewport.start_index

        lines = [
            self.render_table(visible, selected_in_viewport),
            "",
            self.render_navigation_help(snapshot.selected_index, snapshot.total_rows),
        ]
        return "\n".join(lines)

    def render_table(self, data: TableData, selected_index: int) -> str:
        if not data.is_valid:
            self._logger.warning("Table data is invalid: row cell counts don't match column count")
            return ""

        renderer = self._table_renderer
        style, theme, terminal = self._style, self._theme, self._terminal
        layout = renderer.calculate_layout(data, style, terminal)

        lines = [
            renderer.render_border(BorderPosition.TOP, layout, style, theme, terminal),
            renderer.render_row(
                renderer.header_cells(data.columns), layout, style, theme, terminal, data.columns, is_header=True
            ),
        ]
        if style.header_separator:
            lines.append(renderer.render_border(BorderPosition.MIDDLE, layout, style, theme, terminal))

        for index, row in enumerate(data.rows):
            if index == selected_index:
                lines.append(self.render_selected_row(row, layout, data.columns))
            else:
                lines.append(renderer.render_row(row, layout, style, theme, terminal, data.columns))

        lines.append(renderer.render_border(BorderPosition.BOTTOM, layout, style, theme, terminal))
        return "\n".join(lines)

    def render_selected_row(
        self,
        cells: TableRow,
        layout: TableLayout,
        columns: Sequence[TableColumn],
    ) -> str:
        """
        Draw a row on the selection background.

        Cell styles are dropped: text takes the selection text colour, and
        borders keep the muted colour on the selection background.
        """
        style, terminal = self._style, self._terminal
        selection = style.selection_color

        def on_selection(text: str) -> str:
            return bg(text, selection, terminal)

        vertical = on_selection(fg(style.border_characters.vertical, self._theme.muted, terminal))
        padding = on_selection(" " * style.cell_padding)

        parts = [vertical]
        for index, cell in enumerate(cells):
            width = layout.column_widths[index]
            text = truncate_to_width(cell.plain(), width)
            left, right = alignment_padding(visible_width(text), width, columns[index].alignment)
            content = (" " * left) + text + (" " * right)

            parts.append(padding)
            parts.append(on_selection(fg(content, style.selection_text_color, terminal)))
            parts.append(padding)
            if index < len(cells) - 1:
                parts.append(vertical)
        parts.append(vertical)
        return "".join(parts)

    def render_navigation_help(self, selected_index: int, total_rows: int) -> str:
        current_page, total_pages = page_position(selected_index, total_rows, self._page_size)

        status = f"Row {selected_index + 1} of {total_rows}"
        if total_pages > 1:
            lines = [f"{status} (Page {current_page}/{total_pages})", f"{NAVIGATION_CONTROLS}, {PAGE_CONTROLS}"]
        else:
            lines = [status, NAVIGATION_CONTROLS]
        # Each help line fits on one terminal row
        width = self._terminal.columns
        return "\n".join(
            fg(truncate_to_width(line, width), self._theme.muted, self._terminal) for line in lines
        )
