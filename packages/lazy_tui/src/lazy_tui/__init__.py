"""
lazy-tui: interactive terminal tables that keep loading while you browse.

The centrepiece is LazySelectableTable, a selectable table that accepts
replacement rows from an async feed without losing the user's place, plus the
small terminal toolkit it runs on: key decoding, stdin buffering, a raw-mode
terminal and a full-frame renderer.
"""

from lazy_tui.table import (
    BorderCharacters,
    InteractionEnded,
    SelectionInfo,
    TableColumn,
    TableColumnWidth,
    TableData,
    TableRenderer,
    TableSection,
    TableStyle,
    TableUpdates,
    TableViewport,
)
from lazy_tui.config import LazyTableOptions, options_from_env
from lazy_tui.table.lazy_selectable_table import LazySelectableTable
from lazy_tui.api import lazy_selectable_table, table
from lazy_tui.errors import (
    EmptyTableError,
    InvalidTableDataError,
    LazyTuiError,
    NonInteractiveTerminalError,
    SelectionPendingError,
    UserCancelledError,
)
from lazy_tui.keys import Key, parse_key, matches_key
from lazy_tui.key_listener import KeyStrokeListener, ListenResult, ProcessKeyStrokeListener
from lazy_tui.renderer import Renderer
from lazy_tui.stdin_buffer import StdinBuffer
from lazy_tui.terminal import ProcessTerminal, Terminal
from lazy_tui.text import TableCellStyle, TerminalText, TextStyle
from lazy_tui.theme import Theme
from lazy_tui.utils import visible_width, truncate_to_width

__all__ = [
    "BorderCharacters",
    "InteractionEnded",
    "SelectionInfo",
    "TableColumn",
    "TableColumnWidth",
    "TableData",
    "TableRenderer",
    "TableSection",
    "TableStyle",
    "TableUpdates",
    "TableViewport",
    "LazyTableOptions",
    "options_from_env",
    "LazySelectableTable",
    "lazy_selectable_table",
    "table",
    "EmptyTableError",
    "InvalidTableDataError",
    "LazyTuiError",
    "NonInteractiveTerminalError",
    "SelectionPendingError",
    "UserCancelledError",
    "Key",
    "parse_key",
    "matches_key",
    "KeyStrokeListener",
    "ListenResult",
    "ProcessKeyStrokeListener",
    "Renderer",
    "StdinBuffer",
    "ProcessTerminal",
    "Terminal",
    "TableCellStyle",
    "TerminalText",
    "TextStyle",
    "Theme",
    "visible_width",
    "truncate_to_width",
]
