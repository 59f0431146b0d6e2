# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, Sequence, Tuple
from .directions import Direction
from .geometry import Cell

class Phase(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Cell
    dir: Direction
    pending_dir: Direction
    score: int
    tick_ms: int
    ticks: int
    phase: Phase
    grid_w: int
    grid_h: int

@dataclass(frozen=True)
class RoundSummary:
    round_index: int
    score: int
    length: int
    ticks: int
    reason: str               # "wall" | "self"
    tick_ms: int

class Presenter(Protocol):
    """Outbound events from the game core; the presenter owns all visuals."""
    def on_round_started(self) -> None: ...
    def on_snake_changed(self, cells: Sequence[Cell]) -> None: ...
    def on_food_placed(self, cell: Cell) -> None: ...
    def on_score_changed(self, score: int) -> None: ...
    def on_game_over(self, final_score: int) -> None: ...

class Scheduler(Protocol):
    """Fixed-interval tick source driving GameController.on_tick."""
    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...
    def stop(self) -> None: ...
    def reset_interval(self, interval_ms: int) -> None: ...

class SnapshotSink(Protocol):
    def push(self, snap: Snapshot) -> None: ...
