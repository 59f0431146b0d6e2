from __future__ import annotations
from enum import Enum
from typing import Tuple

class Direction(Enum):
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def apply(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        x, y = cell
        return (x + self.dx, y + self.dy)

# R,D,L,U
DIRS = [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]

def is_opposite(a: Direction, b: Direction) -> bool:
    """True when turning from b to a would be an instant 180° reversal."""
    return a.dx == -b.dx and a.dy == -b.dy
