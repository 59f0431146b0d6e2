# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((640, 480))

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(seed=1234, log_console=False)

@pytest.fixture
def grid(cfg):
    from core.geometry import Grid
    return Grid.from_config(cfg)

@pytest.fixture
def rng():
    return np.random.default_rng(7)

@pytest.fixture
def game_factory(cfg):
    from core.scheduler import ManualScheduler
    from core.session import GameController
    from viz.renderer_headless import HeadlessRenderer
    def make(config=None, start=True, **kwargs):
        c = config or cfg
        rend = HeadlessRenderer(c)
        sched = ManualScheduler()
        game = GameController(c, rend, sched, **kwargs)
        if start:
            game.start()
        return game, rend, sched
    return make
