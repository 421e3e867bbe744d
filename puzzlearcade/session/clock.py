"""Tick source that turns a monotonic clock into whole-second ticks."""

import time
from typing import Callable, Optional


class SecondTicker:
    """
    Counts whole seconds elapsed on a monotonic clock.

    The front end polls `pending()` and feeds each tick to a session, so
    sessions never read the wall clock themselves.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._last: Optional[float] = None

    def start(self) -> None:
        self._last = self._clock()

    def pending(self) -> int:
        """Whole seconds since the last call; the remainder carries over."""
        now = self._clock()
        if self._last is None:
            self._last = now
            return 0
        ticks = int(now - self._last)
        self._last += ticks
        return ticks

    def drive(self, session) -> int:
        """Apply pending ticks to a session; returns how many it accepted."""
        return sum(1 for _ in range(self.pending()) if session.tick())
