"""
Selection events reported to the caller.

SelectionInfo is sent on the initial load and after every navigation; its
is_near_end flag is the cue to fetch more rows. InteractionEnded is sent once
when the user confirms or cancels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from lazy_tui.table.state import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_NEAR_END_THRESHOLD = 5


@dataclass(frozen=True)
class SelectionInfo:
    selected_index: int
    total_rows: int
    is_near_end: bool

    @classmethod
    def create(
        cls,
        selected_index: int,
        total_rows: int,
        threshold: int = DEFAULT_NEAR_END_THRESHOLD,
    ) -> SelectionInfo:
        return cls(
            selected_index=selected_index,
            total_rows=total_rows,
            is_near_end=total_rows - selected_index <= threshold,
        )


@dataclass(frozen=True)
class InteractionEnded:
    confirmed: bool
    selected_index: int | None
    total_rows: int


SelectionCallback = Callable[[SelectionInfo], None]
InteractionEndedCallback = Callable[[InteractionEnded], None]


class SelectionNotifier:
    """Derives events from snapshots and forwards them to the callbacks."""

    def __init__(
        self,
        on_selection_change: SelectionCallback | None = None,
        on_interaction_end: InteractionEndedCallback | None = None,
        threshold: int = DEFAULT_NEAR_END_THRESHOLD,
    ) -> None:
        self._on_selection_change = on_selection_change
        self._on_interaction_end = on_interaction_end
        self.threshold = threshold

    def selection_changed(self, selected_index: int, total_rows: int) -> SelectionInfo:
        info = SelectionInfo.create(selected_index, total_rows, self.threshold)
        if info.is_near_end:
            logger.debug(f"Selection {selected_index} is near the end of {total_rows} rows")
        if self._on_selection_change is not None:
            self._on_selection_change(info)
        return info

    def notify(self, snapshot: Snapshot) -> SelectionInfo:
        return self.selection_changed(snapshot.selected_index, snapshot.total_rows)

    def interaction_ended(self, selected_index: int | None, total_rows: int) -> InteractionEnded:
        event = InteractionEnded(
            confirmed=selected_index is not None,
            selected_index=selected_index,
            total_rows=total_rows,
        )
        if self._on_interaction_end is not None:
            self._on_interaction_end(event)
        return event
