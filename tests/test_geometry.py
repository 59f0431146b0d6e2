# tests/test_geometry.py
import pytest
from config import AppConfig
from core.geometry import Grid

def test_from_config_defaults(grid):
    assert (grid.columns, grid.rows, grid.tile_size) == (40, 30, 16)
    assert grid.area == 1200
    assert grid.pixel_size == (640, 480)

def test_from_config_rejects_class():
    with pytest.raises(TypeError):
        Grid.from_config(AppConfig)

def test_pixel_center(grid):
    assert grid.to_pixel_center((0, 0)) == (8, 8)
    assert grid.to_pixel_center((39, 29)) == (39 * 16 + 8, 29 * 16 + 8)

@pytest.mark.parametrize("cell,ok", [
    ((0, 0), True), ((39, 29), True), ((20, 15), True),
    ((-1, 0), False), ((0, -1), False), ((40, 0), False), ((0, 30), False),
])
def test_in_bounds(grid, cell, ok):
    assert grid.in_bounds(cell) is ok

def test_cells_cover_grid():
    g = Grid(3, 2)
    cells = list(g.cells())
    assert len(cells) == 6 == len(set(cells))
    assert all(g.in_bounds(c) for c in cells)
