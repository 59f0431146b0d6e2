from __future__ import annotations
from typing import AbstractSet
import numpy as np
from .geometry import Cell, Grid

def place_food(occupied: AbstractSet[Cell], grid: Grid, rng: np.random.Generator) -> Cell:
    """
    Pick a uniformly random grid cell that is not in `occupied`.

    Rejection sampling over the whole grid. The caller must leave at least one
    cell free (grid.area > len(occupied)), otherwise this never returns.
    """
    while True:
        cell = (int(rng.integers(grid.columns)), int(rng.integers(grid.rows)))
        if cell not in occupied:
            return cell
