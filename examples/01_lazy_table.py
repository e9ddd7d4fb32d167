"""
Lazy Table Example - Paginated Backend

Shows the first page of a fake backend and fetches the next page whenever the
selection gets near the last loaded row.

Environment variables:
    LAZY_TUI_PAGE_SIZE: visible rows (default 10)
    LAZY_TUI_NEAR_END_THRESHOLD: rows from the end that trigger a fetch (default 5)
"""
import asyncio
import logging

from lazy_tui import (
    TableColumn,
    TableData,
    TableUpdates,
    UserCancelledError,
    lazy_selectable_table,
)
from lazy_tui.text import TableCellStyle

TOTAL_ITEMS = 95
BATCH_SIZE = 20

COLUMNS = [
    TableColumn("#", alignment="right"),
    TableColumn("Name"),
    TableColumn("Price", alignment="right"),
]


async def fetch_rows(offset: int, limit: int) -> list[list]:
    """Pretend to query a slow paginated API."""
    await asyncio.sleep(0.3)
    end = min(offset + limit, TOTAL_ITEMS)
    return [
        [str(i + 1), f"Product {i + 1}", TableCellStyle.money((i * 37) % 500 - 100)]
        for i in range(offset, end)
    ]


async def main():
    logging.basicConfig(level=logging.WARNING)

    rows = await fetch_rows(0, BATCH_SIZE)
    updates = TableUpdates()
    loading = False

    async def load_more():
        nonlocal rows, loading
        try:
            batch = await fetch_rows(len(rows), BATCH_SIZE)
            rows = rows + batch
            updates.push(TableData(COLUMNS, rows))
            if len(rows) >= TOTAL_ITEMS:
                updates.end()
        except Exception as exc:
            updates.fail(exc)
        finally:
            loading = False

    loop = asyncio.get_running_loop()

    def on_selection_change(info):
        # Called from the key listener thread
        nonlocal loading
        if info.is_near_end and not loading and len(rows) < TOTAL_ITEMS and not updates.closed:
            loading = True
            loop.call_soon_threadsafe(lambda: loop.create_task(load_more()))

    try:
        index = await lazy_selectable_table(
            TableData(COLUMNS, rows),
            updates,
            on_selection_change=on_selection_change,
        )
    except UserCancelledError:
        print("Cancelled")
        return

    print(f"Selected: {rows[index][1]}")


if __name__ == "__main__":
    asyncio.run(main())
