# viz/renderer_headless.py
from __future__ import annotations
from typing import Any, List, Optional, Sequence, Tuple
import numpy as np
from config import AppConfig
from core.geometry import Cell

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

class HeadlessRenderer:
    """Presenter that only records what it was told. Used by tests and tools."""
    def __init__(self, cfg: AppConfig):
        self.w = cfg.columns
        self.h = cfg.rows
        self.events: List[Tuple[str, Any]] = []
        self.cells: Tuple[Cell, ...] = ()
        self.food: Optional[Cell] = None
        self.score = 0
        self.final_score: Optional[int] = None

    def on_round_started(self) -> None:
        self.events.append(("round_started", None))
        self.final_score = None

    def on_snake_changed(self, cells: Sequence[Cell]) -> None:
        self.cells = tuple(cells)
        self.events.append(("snake", self.cells))

    def on_food_placed(self, cell: Cell) -> None:
        self.food = cell
        self.events.append(("food", cell))

    def on_score_changed(self, score: int) -> None:
        self.score = score
        self.events.append(("score", score))

    def on_game_over(self, final_score: int) -> None:
        self.final_score = final_score
        self.events.append(("game_over", final_score))

    def kinds(self) -> List[str]:
        return [k for k, _ in self.events]

    def clear(self) -> None:
        self.events.clear()

    def board(self) -> np.ndarray:
        """(rows, columns) int8 grid: 0 empty, 1 body, 2 head, 3 food."""
        grid = np.zeros((self.h, self.w), dtype=np.int8)
        if self.food is not None:
            fx, fy = self.food
            grid[fy, fx] = FOOD
        for (x, y) in self.cells[1:]:
            grid[y, x] = BODY
        if self.cells:
            hx, hy = self.cells[0]
            grid[hy, hx] = HEAD
        return grid

    def text(self) -> List[str]:
        glyphs = np.array([".", "o", "H", "F"])
        return ["".join(row) for row in glyphs[self.board()]]
