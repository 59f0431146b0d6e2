from __future__ import annotations
from typing import Callable, Optional

class ManualScheduler:
    """
    Scheduler driven by hand instead of a wall clock.

    advance(ms) moves a fake clock forward and fires the callback once per
    elapsed interval. An interval reset or a stop issued from inside the
    callback takes effect for the rest of the same advance() call.
    """
    def __init__(self):
        self.interval_ms: Optional[int] = None
        self.now_ms = 0
        self.ticks_fired = 0
        self.restarts = 0
        self._callback: Optional[Callable[[], None]] = None
        self._elapsed = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = int(interval_ms)
        self._callback = callback
        self._elapsed = 0

    def stop(self) -> None:
        self._callback = None
        self._elapsed = 0

    def reset_interval(self, interval_ms: int) -> None:
        if self._callback is None:
            return
        self.interval_ms = int(interval_ms)
        self._elapsed = 0
        self.restarts += 1

    def fire(self) -> None:
        """Deliver one tick right now, as if the interval had just elapsed."""
        if self._callback is None:
            return
        self._elapsed = 0
        self.ticks_fired += 1
        self._callback()

    def advance(self, ms: int) -> int:
        fired = 0
        remaining = int(ms)
        while self._callback is not None and remaining >= self.interval_ms - self._elapsed:
            due = self.interval_ms - self._elapsed
            remaining -= due
            self.now_ms += due
            self.fire()
            fired += 1
        if self._callback is not None:
            self._elapsed += remaining
        self.now_ms += remaining
        return fired
