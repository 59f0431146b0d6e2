# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Set, Tuple, Union
from .directions import Direction
from .geometry import Cell, Grid

@dataclass(frozen=True)
class Moved:
    cells: Tuple[Cell, ...]    # head first
    grew: bool
    vacated: Optional[Cell]    # tail cell freed by a non-growing move

@dataclass(frozen=True)
class Collided:
    reason: str                # "wall" | "self"
    head: Cell                 # the cell the head tried to enter

StepResult = Union[Moved, Collided]

class Snake:
    """
    Ordered body of the snake, head at index 0.

    Alive until a step collides; after that the snake is Dead and every
    further step returns the same Collided without touching the body.
    """
    def __init__(self, cells: Iterable[Cell]):
        self._body = deque(tuple(c) for c in cells)
        if not self._body:
            raise ValueError("Snake needs at least one cell.")
        self.death: Optional[Collided] = None

    @classmethod
    def spawn(cls, grid: Grid, length: int) -> "Snake":
        """Horizontal snake with its head at the grid centre, body extending left."""
        hx, hy = grid.columns // 2, grid.rows // 2
        if length < 1 or length > hx + 1 or not grid.in_bounds((hx, hy)):
            raise ValueError("start_len does not fit within the current grid width.")
        return cls((hx - i, hy) for i in range(length))

    @property
    def alive(self) -> bool:
        return self.death is None

    @property
    def head(self) -> Cell:
        return self._body[0]

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._body)

    def __contains__(self, cell: object) -> bool:
        return cell in self._body

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._body)

    def occupied(self) -> Set[Cell]:
        return set(self._body)

    def step(self, direction: Direction, food: Optional[Cell], grid: Grid) -> StepResult:
        if self.death is not None:
            return self.death

        new_head = direction.apply(self._body[0])

        # collisions: walls first, then the full pre-move body (tail included)
        if not grid.in_bounds(new_head):
            self.death = Collided("wall", new_head)
            return self.death
        if new_head in self._body:
            self.death = Collided("self", new_head)
            return self.death

        self._body.appendleft(new_head)
        if new_head == food:
            return Moved(self.cells(), grew=True, vacated=None)
        vacated = self._body.pop()
        return Moved(self.cells(), grew=False, vacated=vacated)
