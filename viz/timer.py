from __future__ import annotations
from typing import Callable, Optional
import pygame as pg

TICK_EVENT = pg.event.custom_type()

class PygameTimer:
    """
    Scheduler backed by pg.time.set_timer.

    Each arm posts events tagged with a new generation; events from an older
    generation still sitting in the queue are dropped in handle(), so an
    interval swap or a stop never yields a duplicate or late tick.
    """
    def __init__(self):
        self.interval_ms: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None
        self._gen = 0

    @property
    def generation(self) -> int:
        return self._gen

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._arm(interval_ms)

    def stop(self) -> None:
        self._gen += 1
        self._callback = None
        pg.time.set_timer(TICK_EVENT, 0)

    def reset_interval(self, interval_ms: int) -> None:
        if self._callback is None:
            return
        self._arm(interval_ms)

    def _arm(self, interval_ms: int) -> None:
        self._gen += 1
        self.interval_ms = int(interval_ms)
        # replaces any timer already running for TICK_EVENT
        pg.time.set_timer(pg.event.Event(TICK_EVENT, gen=self._gen), self.interval_ms)

    def handle(self, event) -> bool:
        """Run the callback for a live tick event. True if the event was a tick at all."""
        if event.type != TICK_EVENT:
            return False
        if self._callback is not None and getattr(event, "gen", None) == self._gen:
            self._callback()
        return True
