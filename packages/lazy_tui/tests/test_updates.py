"""
Tests for lazy_tui.table.updates - the update channel and consumer.
"""

import asyncio
import logging

import pytest

from conftest import make_table
from lazy_tui.table.data import TableColumn, TableData
from lazy_tui.table.state import LazySelectableState
from lazy_tui.table.updates import TableUpdates, UpdateConsumer, close_source


class TestTableUpdates:
    @pytest.mark.asyncio
    async def test_push_then_end(self):
        updates = TableUpdates()
        first, second = make_table(1), make_table(2)
        updates.push(first)
        updates.push(second)
        updates.end()
        received = [data async for data in updates]
        assert received == [first, second]

    @pytest.mark.asyncio
    async def test_fail_raises_in_consumer(self):
        updates = TableUpdates()
        updates.push(make_table(1))
        updates.fail(RuntimeError("backend down"))
        await updates.__anext__()
        with pytest.raises(RuntimeError, match="backend down"):
            await updates.__anext__()

    @pytest.mark.asyncio
    async def test_push_after_end_is_dropped(self):
        updates = TableUpdates()
        updates.end()
        updates.push(make_table(1))
        assert [data async for data in updates] == []

    @pytest.mark.asyncio
    async def test_aclose_stops_iteration(self):
        updates = TableUpdates()
        await updates.aclose()
        assert updates.closed
        updates.push(make_table(1))
        with pytest.raises(StopAsyncIteration):
            await updates.__anext__()


@pytest.mark.asyncio
async def test_close_source_closes_async_generator():
    closed = []

    async def source():
        try:
            yield make_table(1)
            yield make_table(2)
        finally:
            closed.append(True)

    gen = source()
    await gen.__anext__()
    await close_source(gen)
    assert closed == [True]


@pytest.mark.asyncio
async def test_close_source_ignores_plain_iterables():
    class Plain:
        def __aiter__(self):
            return self

        async def __anext__(self):
            raise StopAsyncIteration

    await close_source(Plain())


class TestUpdateConsumer:
    @pytest.mark.asyncio
    async def test_applies_updates_and_renders(self, twelve_rows):
        state = LazySelectableState.initial(twelve_rows, page_size=5)
        state.move_to(6)
        rendered = []
        updates = TableUpdates()
        updates.push(make_table(20))
        updates.push(make_table(30))
        updates.end()

        consumer = UpdateConsumer(state, updates, 5, rendered.append)
        await consumer.run()

        assert consumer.applied == 2
        assert [snapshot.total_rows for snapshot in rendered] == [20, 30]
        assert state.snapshot().selected_index == 6
        assert updates.closed

    @pytest.mark.asyncio
    async def test_rejected_updates_are_logged(self, twelve_rows, caplog):
        state = LazySelectableState.initial(twelve_rows, page_size=5)
        rendered = []
        updates = TableUpdates()
        updates.push(TableData([TableColumn("A")], [["1", "2"]]))
        updates.push(make_table(0))
        updates.end()

        with caplog.at_level(logging.WARNING):
            consumer = UpdateConsumer(state, updates, 5, rendered.append)
            await consumer.run()

        assert consumer.rejected == 2
        assert rendered == []
        assert state.snapshot().data is twelve_rows
        assert "row cell counts don't match column count" in caplog.text
        assert "without rows" in caplog.text

    @pytest.mark.asyncio
    async def test_failing_source_keeps_rows(self, twelve_rows, caplog):
        state = LazySelectableState.initial(twelve_rows, page_size=5)
        updates = TableUpdates()
        updates.push(make_table(15))
        updates.fail(ConnectionError("timeout"))

        with caplog.at_level(logging.WARNING):
            await UpdateConsumer(state, updates, 5, lambda snapshot: None).run()

        assert state.snapshot().total_rows == 15
        assert "Table updates stream failed: timeout" in caplog.text

    @pytest.mark.asyncio
    async def test_stops_when_session_stopped(self, twelve_rows):
        state = LazySelectableState.initial(twelve_rows, page_size=5)
        state.confirm()
        updates = TableUpdates()
        updates.push(make_table(20))

        await UpdateConsumer(state, updates, 5, lambda snapshot: None).run()

        assert state.snapshot().total_rows == 12
        assert updates.closed

    @pytest.mark.asyncio
    async def test_cancellation_closes_source(self, twelve_rows):
        state = LazySelectableState.initial(twelve_rows, page_size=5)
        updates = TableUpdates()
        task = asyncio.create_task(UpdateConsumer(state, updates, 5, lambda snapshot: None).run())
        await asyncio.sleep(0)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert updates.closed
