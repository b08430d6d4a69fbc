# Area: Turn
"""
salad_bowl._turn.countdown — One-second turn countdown
======================================================

The countdown is the only autonomous process in a turn. It does not own
a thread: a game loop calls ``pump()`` whenever it gets control and the
countdown emits one tick per whole interval elapsed on the monotonic
clock since the last tick. Cancelling stops further ticks immediately,
including ticks still owed inside the same ``pump()`` call.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger("salad_bowl.turn.countdown")


class Countdown:
    """
    Periodic tick source driven by polling.

    Attributes:
        interval_seconds: Seconds between ticks
    """

    def __init__(self, on_tick: Callable[[], object], interval_seconds: float = 1.0) -> None:
        self._on_tick = on_tick
        self.interval_seconds = interval_seconds
        self._next_tick_at: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._next_tick_at is not None

    def start(self) -> None:
        """(Re)start counting from now."""
        self._next_tick_at = time.monotonic() + self.interval_seconds
        logger.debug("Countdown started (%.1fs interval)", self.interval_seconds)

    def cancel(self) -> None:
        """Stop ticking. No-op if not running."""
        if self._next_tick_at is not None:
            logger.debug("Countdown cancelled")
        self._next_tick_at = None

    def pump(self) -> int:
        """
        Emit every tick that has come due.

        Returns:
            Number of ticks delivered
        """
        delivered = 0
        now = time.monotonic()
        while self._next_tick_at is not None and now >= self._next_tick_at:
            self._next_tick_at += self.interval_seconds
            self._on_tick()
            delivered += 1
        return delivered
