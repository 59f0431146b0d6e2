# core/geometry.py  (grid math, no state)
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
from config import AppConfig

Cell = Tuple[int, int]

@dataclass(frozen=True)
class Grid:
    columns: int
    rows: int
    tile_size: int = 16

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "Grid":
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        return cls(cfg.columns, cfg.rows, cfg.tile_size)

    @property
    def area(self) -> int:
        return self.columns * self.rows

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.columns * self.tile_size, self.rows * self.tile_size

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.columns and 0 <= y < self.rows

    def to_pixel_center(self, cell: Cell) -> Tuple[float, float]:
        x, y = cell
        t = self.tile_size
        return x * t + t / 2, y * t + t / 2

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.columns):
                yield (x, y)
