"""
lazy-tui table module.

LazySelectableTable lives in lazy_tui.table.lazy_selectable_table and is
re-exported from the top-level package.
"""

from lazy_tui.table.data import (
    TableColumn,
    TableColumnWidth,
    TableData,
    TableRow,
    TableSection,
    TableViewport,
)
from lazy_tui.table.style import BorderCharacters, TableStyle
from lazy_tui.table.layout import BorderPosition, TableLayout, TableRenderer
from lazy_tui.table.state import LazySelectableState, Snapshot
from lazy_tui.table.selection import InteractionEnded, SelectionInfo, SelectionNotifier
from lazy_tui.table.updates import TableUpdates, UpdateConsumer

__all__ = [
    "TableColumn",
    "TableColumnWidth",
    "TableData",
    "TableRow",
    "TableSection",
    "TableViewport",
    "BorderCharacters",
    "TableStyle",
    "BorderPosition",
    "TableLayout",
    "TableRenderer",
    "LazySelectableState",
    "Snapshot",
    "InteractionEnded",
    "SelectionInfo",
    "SelectionNotifier",
    "TableUpdates",
    "UpdateConsumer",
]
