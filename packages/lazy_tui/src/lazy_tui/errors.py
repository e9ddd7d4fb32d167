"""
Errors raised by lazy-tui components.

Precondition failures are raised before the terminal enters raw mode.
A cancelled selection is a normal outcome, surfaced as its own error type
so callers can tell it apart from a confirmed row.
"""


class LazyTuiError(Exception):
    """Base class for every error raised by lazy-tui."""


class NonInteractiveTerminalError(LazyTuiError):
    """Raised when an interactive component runs on a non-interactive terminal."""
    def __init__(self) -> None:
        super().__init__("Terminal is not interactive")


class InvalidTableDataError(LazyTuiError):
    """Raised when a row's cell count does not match the column count."""
    def __init__(self, column_count: int, row_index: int | None = None, cell_count: int | None = None):
        self.column_count = column_count
        self.row_index = row_index
        self.cell_count = cell_count
        if row_index is None:
            message = f"Table data is invalid: row cell counts don't match {column_count} columns"
        else:
            message = (
                f"Table data is invalid: row {row_index} has {cell_count} cells, "
                f"expected {column_count}"
            )
        super().__init__(message)


class EmptyTableError(LazyTuiError):
    """Raised when an interactive table is started without rows."""
    def __init__(self) -> None:
        super().__init__("Table has no rows to select from")


class UserCancelledError(LazyTuiError):
    """Raised when the user cancels an interactive selection."""
    def __init__(self) -> None:
        super().__init__("Selection cancelled by user")


class SelectionPendingError(LazyTuiError):
    """Raised when a result is requested before the session has stopped."""
    pass
