"""
Incremental table updates.

TableUpdates is an asyncio queue-backed channel that producers (for example
a paginated fetcher reacting to SelectionInfo.is_near_end) push replacement
TableData into. UpdateConsumer drains any async iterable of TableData into the
session state until the session stops or the source ends.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterable, Callable

from lazy_tui.table.data import TableData
from lazy_tui.table.state import LazySelectableState, Snapshot

logger = logging.getLogger(__name__)

_END = object()


class _Failure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


class TableUpdates:
    """
    Async iterator of TableData replacements.

    Producers call push() for each new version of the table, then end() or
    fail(error). Consumers stop pulling by calling aclose(); later pushes are
    dropped and closed tells producers to stop fetching. All methods must be
    called from the event loop thread.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._done = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, data: TableData) -> None:
        if self._done or self._closed:
            return
        self._queue.put_nowait(data)

    def end(self) -> None:
        if self._done:
            return
        self._done = True
        self._queue.put_nowait(_END)

    def fail(self, error: BaseException) -> None:
        if self._done:
            return
        self._done = True
        self._queue.put_nowait(_Failure(error))

    def __aiter__(self) -> TableUpdates:
        return self

    async def __anext__(self) -> TableData:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _END:
            raise StopAsyncIteration
        if isinstance(item, _Failure):
            raise item.error
        return item

    async def aclose(self) -> None:
        self._closed = True
        self._done = True


async def close_source(source: AsyncIterable[TableData]) -> None:
    """Close an async generator or channel if it supports aclose()."""
    aclose = getattr(source, "aclose", None)
    if aclose is not None:
        await aclose()


class UpdateConsumer:
    def __init__(
        self,
        state: LazySelectableState,
        updates: AsyncIterable[TableData],
        page_size: int,
        render: Callable[[Snapshot], None],
        log: logging.Logger | None = None,
    ) -> None:
        self._state = state
        self._updates = updates
        self._page_size = page_size
        self._render = render
        self._logger = log or logger
        self.applied = 0
        self.rejected = 0

    async def run(self) -> None:
        """
        Apply updates until the session stops or the source ends.

        Invalid or empty updates are skipped. A failing source ends the loop
        without failing the session, which keeps the rows it already has.
        """
        try:
            async for new_data in self._updates:
                if self._state.is_stopped():
                    break
                snapshot = self._state.replace_data(new_data, self._page_size)
                if snapshot is None:
                    self.rejected += 1
                    if not new_data.is_valid:
                        self._logger.warning(
                            "Table data is invalid: row cell counts don't match column count"
                        )
                    else:
                        self._logger.warning("Ignoring table update without rows")
                    continue
                self.applied += 1
                self._render(snapshot)
        except Exception as exc:
            self._logger.warning(f"Table updates stream failed: {exc}")
        finally:
            await close_source(self._updates)
