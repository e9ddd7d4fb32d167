"""
Entry points wired to the process terminal.

    rows = TableUpdates()
    index = await lazy_selectable_table(first_page, rows, on_selection_change=fetch_more)
"""

from __future__ import annotations

import logging
from typing import AsyncIterable

from lazy_tui.config import LazyTableOptions, options_from_env
from lazy_tui.key_listener import ProcessKeyStrokeListener
from lazy_tui.renderer import Renderer
from lazy_tui.table.data import TableData
from lazy_tui.table.layout import TableRenderer
from lazy_tui.table.lazy_selectable_table import LazySelectableTable
from lazy_tui.table.selection import InteractionEndedCallback, SelectionCallback
from lazy_tui.terminal import ProcessTerminal, Terminal


async def lazy_selectable_table(
    data: TableData,
    updates: AsyncIterable[TableData],
    *,
    options: LazyTableOptions | None = None,
    on_selection_change: SelectionCallback | None = None,
    on_interaction_end: InteractionEndedCallback | None = None,
    terminal: Terminal | None = None,
    logger: logging.Logger | None = None,
) -> int:
    """
    Let the user pick a row while more rows stream in.

    Options default to options_from_env(). Returns the confirmed row index;
    raises UserCancelledError when the user presses Escape.
    """
    terminal = terminal or ProcessTerminal()
    table = LazySelectableTable(
        initial_data=data,
        updates=updates,
        terminal=terminal,
        key_listener=ProcessKeyStrokeListener(),
        renderer=Renderer(terminal),
        options=options or options_from_env(),
        on_selection_change=on_selection_change,
        on_interaction_end=on_interaction_end,
        log=logger,
    )
    return await table.run()


def table(
    data: TableData,
    *,
    options: LazyTableOptions | None = None,
    terminal: Terminal | None = None,
) -> str:
    """Write a static table to the terminal and return the text written."""
    terminal = terminal or ProcessTerminal()
    options = options or options_from_env()
    text = TableRenderer().render(data, options.style, options.theme, terminal)
    terminal.write(text + "\n")
    return text
