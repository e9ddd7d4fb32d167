"""
Session state of an interactive table.

The state is shared by the key-listener thread and the update consumer on the
event loop. Every read and write happens under one lock, and callers only
ever see immutable snapshots.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

from lazy_tui.errors import SelectionPendingError, UserCancelledError
from lazy_tui.table.data import TableData, TableViewport


@dataclass(frozen=True)
class Snapshot:
    data: TableData
    selected_index: int
    viewport: TableViewport
    # Order in which snapshots were taken from the state
    version: int = 0

    @property
    def total_rows(self) -> int:
        return len(self.data.rows)


class LazySelectableState:
    def __init__(self, data: TableData, selected_index: int, viewport: TableViewport) -> None:
        self._lock = threading.Lock()
        self._data = data
        self._selected_index = selected_index
        self._viewport = viewport
        self._stopped = False
        self._selection: int | None = None
        self._version = 0

    @classmethod
    def initial(cls, data: TableData, page_size: int) -> LazySelectableState:
        row_count = len(data.rows)
        return cls(
            data=data,
            selected_index=0,
            viewport=TableViewport(start_index=0, size=min(page_size, row_count), total_rows=row_count),
        )

    def _snapshot(self) -> Snapshot:
        # Viewport is mutable; hand out a copy
        self._version += 1
        return Snapshot(self._data, self._selected_index, replace(self._viewport), self._version)

    def _select(self, index: int) -> Snapshot:
        self._selected_index = index
        self._viewport.scroll_to_show(index)
        return self._snapshot()

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._snapshot()

    def replace_data(self, new_data: TableData, page_size: int) -> Snapshot | None:
        """
        Swap in new rows, keeping the selection and viewport as close as possible.

        Returns None, leaving the state untouched, when new_data is invalid or empty.
        """
        with self._lock:
            if not new_data.is_valid or not new_data.rows:
                return None
            row_count = len(new_data.rows)
            self._data = new_data
            self._selected_index = min(self._selected_index, row_count - 1)
            self._viewport = TableViewport(
                start_index=min(self._viewport.start_index, max(0, row_count - 1)),
                size=min(page_size, row_count),
                total_rows=row_count,
            )
            return self._select(self._selected_index)

    def move_selection(self, delta: int) -> Snapshot | None:
        with self._lock:
            if not self._data.rows:
                return None
            max_index = len(self._data.rows) - 1
            return self._select(min(max(0, self._selected_index + delta), max_index))

    def move_to(self, index: int) -> Snapshot | None:
        with self._lock:
            if not self._data.rows:
                return None
            return self._select(min(max(index, 0), len(self._data.rows) - 1))

    def move_to_end(self) -> Snapshot | None:
        with self._lock:
            if not self._data.rows:
                return None
            return self._select(len(self._data.rows) - 1)

    def confirm(self) -> Snapshot:
        """Stop the session with the current row as the result; returns the final snapshot."""
        with self._lock:
            self._stopped = True
            self._selection = self._selected_index
            return self._snapshot()

    def cancel(self) -> Snapshot:
        with self._lock:
            self._stopped = True
            self._selection = None
            return self._snapshot()

    def is_stopped(self) -> bool:
        with self._lock:
            return self._stopped

    def final_result(self) -> int:
        with self._lock:
            if not self._stopped:
                raise SelectionPendingError("Selection is still in progress")
            if self._selection is None:
                raise UserCancelledError()
            return self._selection
