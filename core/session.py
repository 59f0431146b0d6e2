# core/session.py  (round lifecycle, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import numpy as np
from config import AppConfig
from .directions import Direction, is_opposite
from .food import place_food
from .geometry import Cell, Grid
from .interfaces import Phase, Presenter, RoundSummary, Scheduler, Snapshot, SnapshotSink
from .snake_rules import Collided, Snake

@dataclass
class GameSession:
    snake: Snake
    direction: Direction
    pending_direction: Direction
    food: Cell
    score: int
    tick_ms: int
    phase: Phase
    round_index: int = 0
    ticks: int = 0

class GameController:
    """
    Owns the single live GameSession and drives it from ticks and input.

    INITIALIZING -> RUNNING -> GAME_OVER -> (restart) -> RUNNING. Calls made in
    the wrong phase are ignored.
    """
    def __init__(
        self,
        cfg: AppConfig,
        presenter: Presenter,
        scheduler: Scheduler,
        rng: Optional[np.random.Generator] = None,
        on_round_end: Optional[Callable[[RoundSummary], None]] = None,
        sink: Optional[SnapshotSink] = None,
    ):
        self.cfg = cfg
        self.grid = Grid.from_config(cfg)
        self.presenter = presenter
        self.scheduler = scheduler
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self._on_round_end = on_round_end
        self._sink = sink
        self.session: Optional[GameSession] = None
        self._rounds = 0

    @property
    def phase(self) -> Phase:
        return Phase.INITIALIZING if self.session is None else self.session.phase

    # ---- lifecycle ----
    def start(self) -> None:
        if self.session is not None:
            return
        self._new_round()

    def on_restart_input(self) -> None:
        if self.phase is not Phase.GAME_OVER:
            return
        self._new_round()

    def _new_round(self) -> None:
        self.scheduler.stop()
        cfg = self.cfg
        snake = Snake.spawn(self.grid, cfg.start_len)
        self.session = GameSession(
            snake=snake,
            direction=Direction.RIGHT,
            pending_direction=Direction.RIGHT,
            food=place_food(snake.occupied(), self.grid, self.rng),
            score=0,
            tick_ms=cfg.initial_tick_ms,
            phase=Phase.RUNNING,
            round_index=self._rounds,
        )
        self._rounds += 1

        s = self.session
        self.presenter.on_round_started()
        self.presenter.on_snake_changed(s.snake.cells())
        self.presenter.on_food_placed(s.food)
        self.presenter.on_score_changed(s.score)
        self.scheduler.start(s.tick_ms, self.on_tick)

    # ---- input ----
    def on_direction_input(self, requested: Direction) -> None:
        s = self.session
        if s is None or s.phase is not Phase.RUNNING:
            return
        # compared with the committed heading, not the pending one
        if is_opposite(requested, s.direction):
            return
        s.pending_direction = requested

    # ---- tick ----
    def on_tick(self) -> None:
        s = self.session
        if s is None or s.phase is not Phase.RUNNING:
            return

        s.direction = s.pending_direction
        result = s.snake.step(s.direction, s.food, self.grid)
        s.ticks += 1

        if isinstance(result, Collided):
            self._end_round(result)
        else:
            self.presenter.on_snake_changed(result.cells)
            if result.grew:
                s.score += self.cfg.score_increment
                self.presenter.on_score_changed(s.score)
                s.food = place_food(s.snake.occupied(), self.grid, self.rng)
                self.presenter.on_food_placed(s.food)
                self._speed_up()

        if self._sink is not None:
            self._sink.push(self.snapshot())

    def _speed_up(self) -> None:
        s = self.session
        new_ms = max(self.cfg.min_tick_ms, s.tick_ms - self.cfg.tick_decrement_ms)
        if new_ms != s.tick_ms:
            s.tick_ms = new_ms
            self.scheduler.reset_interval(new_ms)

    def _end_round(self, hit: Collided) -> None:
        s = self.session
        s.phase = Phase.GAME_OVER
        self.scheduler.stop()
        self.presenter.on_game_over(s.score)
        if self._on_round_end is not None:
            self._on_round_end(RoundSummary(
                round_index=s.round_index,
                score=s.score,
                length=len(s.snake),
                ticks=s.ticks,
                reason=hit.reason,
                tick_ms=s.tick_ms,
            ))

    def snapshot(self) -> Snapshot:
        s = self.session
        assert s is not None, "Controller not started"
        return Snapshot(
            snake=s.snake.cells(),
            food=s.food,
            dir=s.direction,
            pending_dir=s.pending_direction,
            score=s.score,
            tick_ms=s.tick_ms,
            ticks=s.ticks,
            phase=s.phase,
            grid_w=self.grid.columns,
            grid_h=self.grid.rows,
        )
