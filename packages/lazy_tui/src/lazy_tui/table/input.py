"""
Key handling for the interactive table.

The handler is a small state machine: RUNNING until Enter or Escape moves it
to CONFIRMED or CANCELLED. Navigation keys mutate the session state, then the
new snapshot is rendered and reported. The key listener keeps calling while
the handler is running.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from lazy_tui.key_listener import ListenResult
from lazy_tui.keys import Key
from lazy_tui.table.selection import SelectionNotifier
from lazy_tui.table.state import LazySelectableState, Snapshot

logger = logging.getLogger(__name__)


class InputStatus(Enum):
    RUNNING = "running"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    # Another writer stopped the session before this handler did
    STOPPED = "stopped"


Navigation = Callable[[LazySelectableState], Optional[Snapshot]]


class InputHandler:
    def __init__(
        self,
        state: LazySelectableState,
        page_size: int,
        render: Callable[[Snapshot], None],
        notifier: SelectionNotifier,
    ) -> None:
        self._state = state
        self._render = render
        self._notifier = notifier
        self.status = InputStatus.RUNNING
        self._navigation: dict[str, Navigation] = {
            Key.up: lambda s: s.move_selection(-1),
            "k": lambda s: s.move_selection(-1),
            Key.down: lambda s: s.move_selection(1),
            "j": lambda s: s.move_selection(1),
            Key.pageUp: lambda s: s.move_selection(-page_size),
            Key.pageDown: lambda s: s.move_selection(page_size),
            Key.home: lambda s: s.move_to(0),
            Key.end: lambda s: s.move_to_end(),
        }

    @property
    def is_running(self) -> bool:
        return self.status is InputStatus.RUNNING

    def handle_key(self, key: str) -> None:
        if not self.is_running:
            return
        if self._state.is_stopped():
            self.status = InputStatus.STOPPED
            return

        navigate = self._navigation.get(key)
        if navigate is not None:
            snapshot = navigate(self._state)
            if snapshot is not None:
                self._render(snapshot)
                self._notifier.notify(snapshot)
            return

        if key == Key.enter:
            final = self._state.confirm()
            self.status = InputStatus.CONFIRMED
            logger.debug(f"Row {final.selected_index} confirmed")
            self._notifier.interaction_ended(final.selected_index, final.total_rows)
        elif key == Key.escape:
            final = self._state.cancel()
            self.status = InputStatus.CANCELLED
            logger.debug("Selection cancelled")
            self._notifier.interaction_ended(None, final.total_rows)

    def on_key(self, key: str) -> ListenResult:
        """KeyHandler adapter for KeyStrokeListener.listen()."""
        self.handle_key(key)
        return ListenResult.CONTINUE if self.is_running else ListenResult.ABORT
