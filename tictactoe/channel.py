"""
Single-slot hand-off of a human move from a UI thread to the game thread.

The UI thread ``submit``s the chosen cell; the game thread ``wait``s for it and
performs the placement itself, so only the game thread ever writes the board.
"""

import logging
import queue
import threading
import time
from typing import Optional

from .board import Cell

logger = logging.getLogger("tictactoe.channel")

POLL_INTERVAL = 0.05


class GameCancelled(Exception):
    """The session was abandoned (window closed, user quit) while waiting on input."""


class MoveChannel:
    def __init__(self) -> None:
        self._slot: "queue.Queue[Cell]" = queue.Queue(maxsize=1)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def submit(self, row: int, col: int) -> bool:
        """Offer a move; returns False if one is already pending or the channel is closed."""
        if self.closed:
            return False
        try:
            self._slot.put_nowait((row, col))
        except queue.Full:
            logger.debug("Ignoring move (%d, %d): a move is already pending.", row, col)
            return False
        return True

    def reset(self) -> None:
        """Drop any move submitted before the current turn began."""
        while True:
            try:
                stale = self._slot.get_nowait()
            except queue.Empty:
                return
            logger.debug("Discarded stale move %s.", stale)

    def wait(self, timeout: Optional[float] = None) -> Optional[Cell]:
        """Block until a move arrives; ``None`` on timeout, ``GameCancelled`` once closed."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if self.closed:
                raise GameCancelled("Move channel closed while waiting for a move.")
            interval = POLL_INTERVAL
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                interval = min(interval, remaining)
            try:
                return self._slot.get(timeout=interval)
            except queue.Empty:
                continue

    def close(self) -> None:
        self._closed.set()
