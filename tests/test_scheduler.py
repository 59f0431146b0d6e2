# tests/test_scheduler.py
import pygame as pg
from core.scheduler import ManualScheduler
from viz.timer import PygameTimer, TICK_EVENT

def test_manual_fires_per_interval():
    calls = []
    s = ManualScheduler()
    s.start(100, lambda: calls.append(s.now_ms))
    assert s.advance(350) == 3
    assert calls == [100, 200, 300]
    assert s.now_ms == 350

def test_manual_reset_interval_inside_callback():
    calls = []
    s = ManualScheduler()
    def cb():
        calls.append(s.now_ms)
        s.reset_interval(50)
    s.start(100, cb)
    s.advance(200)
    assert calls == [100, 150, 200]
    assert s.restarts == 3

def test_manual_stop_inside_callback():
    calls = []
    s = ManualScheduler()
    def cb():
        calls.append(s.now_ms)
        s.stop()
    s.start(10, cb)
    assert s.advance(100) == 1
    assert not s.running
    s.fire()
    assert calls == [10]

def test_manual_reset_when_stopped_is_ignored():
    s = ManualScheduler()
    s.reset_interval(20)
    assert s.interval_ms is None and s.restarts == 0

def _tick(gen):
    return pg.event.Event(TICK_EVENT, gen=gen)

def test_pygame_timer_runs_live_ticks():
    calls = []
    t = PygameTimer()
    t.start(130, lambda: calls.append(1))
    assert t.handle(_tick(t.generation))
    assert calls == [1]
    t.stop()

def test_pygame_timer_drops_stale_ticks():
    calls = []
    t = PygameTimer()
    t.start(130, lambda: calls.append(1))
    old = t.generation
    t.reset_interval(127)
    assert t.interval_ms == 127
    assert t.handle(_tick(old))       # still a tick, but from the swapped-out timer
    assert calls == []
    t.handle(_tick(t.generation))
    assert calls == [1]
    t.stop()

def test_pygame_timer_stop_drops_queued_ticks():
    calls = []
    t = PygameTimer()
    t.start(130, lambda: calls.append(1))
    gen = t.generation
    t.stop()
    t.handle(_tick(gen))
    assert calls == [] and not t.running

def test_pygame_timer_ignores_other_events():
    t = PygameTimer()
    assert not t.handle(pg.event.Event(pg.KEYDOWN, key=pg.K_UP))
