"""
LazySelectableTable - interactive row picker that accepts new rows while open.

run() validates the initial data, enters raw mode, paints the first frame and
then runs two tasks side by side:

- the key listener, blocking in a worker thread, driving InputHandler
- UpdateConsumer on the event loop, applying replacement TableData

The session ends when the input handler stops (Enter, Escape or end of key
input) or when run() itself is cancelled. The session is then marked stopped,
the listener thread returns at its next poll, the consumer is cancelled and
its source closed, raw mode is released, and the confirmed row index is
returned.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import AsyncIterable

from lazy_tui.config import LazyTableOptions
from lazy_tui.errors import EmptyTableError, InvalidTableDataError, NonInteractiveTerminalError
from lazy_tui.key_listener import KeyStrokeListener
from lazy_tui.renderer import Rendering
from lazy_tui.table.data import TableData
from lazy_tui.table.input import InputHandler
from lazy_tui.table.layout import TableRenderer
from lazy_tui.table.rendering import TableFrameRenderer
from lazy_tui.table.selection import (
    InteractionEndedCallback,
    SelectionCallback,
    SelectionNotifier,
)
from lazy_tui.table.state import LazySelectableState
from lazy_tui.table.updates import UpdateConsumer, close_source
from lazy_tui.terminal import Terminal

logger = logging.getLogger(__name__)


class LazySelectableTable:
    def __init__(
        self,
        initial_data: TableData,
        updates: AsyncIterable[TableData],
        terminal: Terminal,
        key_listener: KeyStrokeListener,
        renderer: Rendering,
        options: LazyTableOptions | None = None,
        on_selection_change: SelectionCallback | None = None,
        on_interaction_end: InteractionEndedCallback | None = None,
        table_renderer: TableRenderer | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.initial_data = initial_data
        self.updates = updates
        self.terminal = terminal
        self.key_listener = key_listener
        self.renderer = renderer
        self.options = options or LazyTableOptions()
        self._logger = log or logger
        self._notifier = SelectionNotifier(
            on_selection_change=on_selection_change,
            on_interaction_end=on_interaction_end,
            threshold=self.options.near_end_threshold,
        )
        self._frames = TableFrameRenderer(
            output=renderer,
            terminal=terminal,
            style=self.options.style,
            theme=self.options.theme,
            page_size=self.options.page_size,
            table_renderer=table_renderer,
            log=self._logger,
        )
        self.state: LazySelectableState | None = None

    def _validate(self) -> None:
        if not self.terminal.is_interactive:
            raise NonInteractiveTerminalError()
        invalid_row = self.initial_data.first_invalid_row()
        if invalid_row is not None:
            raise InvalidTableDataError(
                len(self.initial_data.columns),
                row_index=invalid_row,
                cell_count=len(self.initial_data.rows[invalid_row]),
            )
        if not self.initial_data.rows:
            raise EmptyTableError()

    async def run(self) -> int:
        """
        Run the interactive session.

        Returns:
            Index of the confirmed row in the most recent table data

        Raises:
            NonInteractiveTerminalError: stdin/stdout is not a terminal
            InvalidTableDataError: a row's cell count differs from the column count
            EmptyTableError: the initial data has no rows
            UserCancelledError: the user pressed Escape or key input ended
        """
        try:
            self._validate()
        except Exception:
            await close_source(self.updates)
            raise

        page_size = self.options.page_size
        state = LazySelectableState.initial(self.initial_data, page_size)
        self.state = state

        self._notifier.selection_changed(0, len(self.initial_data.rows))

        handler = InputHandler(state, page_size, self._frames.render, self._notifier)
        consumer = UpdateConsumer(state, self.updates, page_size, self._frames.render, self._logger)

        with self.terminal.raw_mode_without_cursor():
            self._frames.render(state.snapshot())

            consumer_task = asyncio.create_task(consumer.run())
            listener = asyncio.ensure_future(
                asyncio.to_thread(self.key_listener.listen, self.terminal, handler.on_key, state.is_stopped)
            )
            try:
                # Cancelling run() does not cancel the listener task
                await asyncio.shield(listener)
            finally:
                if not state.is_stopped():
                    self._logger.debug("Session ended without confirm or cancel")
                    final = state.cancel()
                    self._notifier.interaction_ended(None, final.total_rows)
                # The listener sees the stopped state within one poll interval
                await listener

                if not consumer_task.done():
                    consumer_task.cancel()
                with suppress(asyncio.CancelledError):
                    await consumer_task
                # The consumer closes the source itself unless it never got to run
                await close_source(self.updates)

        finish = getattr(self.renderer, "finish", None)
        if finish is not None:
            finish()
        return state.final_result()

