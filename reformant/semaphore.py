"""Counting semaphore for handing work between a producer and a consumer."""

from __future__ import annotations

import threading


class LightweightSemaphore:
    """A counting semaphore with non-blocking, blocking and timed waits.

    Timeouts are given in microseconds. A negative timeout waits without
    limit and a zero timeout only tries once.
    """

    def __init__(self, initial_count: int = 0) -> None:
        if initial_count < 0:
            raise ValueError("initial_count must not be negative")
        self._count = initial_count
        self._cond = threading.Condition(threading.Lock())

    def try_wait(self) -> bool:
        """Take one unit if one is available right now."""
        with self._cond:
            if self._count > 0:
                self._count -= 1
                return True
            return False

    def wait(self, timeout_usecs: int = -1) -> bool:
        """Take one unit, waiting up to ``timeout_usecs`` microseconds.

        Returns True if a unit was taken and False if the timeout expired.
        """
        with self._cond:
            if self._count > 0:
                self._count -= 1
                return True
            if timeout_usecs == 0:
                return False
            timeout = None if timeout_usecs < 0 else timeout_usecs / 1_000_000
            if not self._cond.wait_for(lambda: self._count > 0, timeout):
                return False
            self._count -= 1
            return True

    def signal(self, count: int = 1) -> None:
        """Release ``count`` units, waking waiters as needed."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return
        with self._cond:
            self._count += count
            self._cond.notify(count)

    def available_approx(self) -> int:
        """Number of units currently available, never negative."""
        return max(self._count, 0)