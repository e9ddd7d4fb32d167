"""
Blocking key listener.

listen() reads from a terminal, decodes key identifiers and calls the handler
once per key until the handler answers ABORT or input ends. It blocks the
calling thread, so async callers run it in a worker thread.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Protocol

from lazy_tui.keys import parse_key
from lazy_tui.stdin_buffer import ESCAPE_TIMEOUT, StdinBuffer
from lazy_tui.terminal import Terminal

logger = logging.getLogger(__name__)

# Seconds between reads while idle
POLL_INTERVAL = 0.1


class ListenResult(Enum):
    CONTINUE = "continue"
    ABORT = "abort"


KeyHandler = Callable[[str], ListenResult]
StopCheck = Callable[[], bool]


class KeyStrokeListener(Protocol):
    def listen(
        self,
        terminal: Terminal,
        on_key: KeyHandler,
        should_stop: Optional[StopCheck] = None,
    ) -> None: ...


class ProcessKeyStrokeListener:
    """Key listener backed by Terminal.read()."""

    def listen(
        self,
        terminal: Terminal,
        on_key: KeyHandler,
        should_stop: Optional[StopCheck] = None,
    ) -> None:
        """
        Dispatch keys until on_key answers ABORT, input ends, or should_stop()
        turns true. should_stop is checked before every read, so it is seen
        within POLL_INTERVAL while the terminal is idle.
        """
        buffer = StdinBuffer()
        while True:
            if should_stop is not None and should_stop():
                logger.debug("Key listener stopped by its owner")
                return
            timeout = ESCAPE_TIMEOUT if buffer.has_pending() else POLL_INTERVAL
            data = terminal.read(timeout)
            if data is None:
                logger.debug("Key input reached end of stream")
                return
            if data:
                sequences = buffer.process(data)
            elif buffer.has_pending():
                sequences = buffer.flush()
            else:
                continue

            for sequence in sequences:
                key = parse_key(sequence)
                if key is None:
                    logger.debug(f"Ignoring unrecognized input {sequence!r}")
                    continue
                if on_key(key) is ListenResult.ABORT:
                    return
