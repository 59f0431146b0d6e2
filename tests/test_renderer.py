# tests/test_renderer.py
import pygame as pg
import pytest
from config import AppConfig
import viz.renderer_colors as theme
from viz.renderer_headless import HeadlessRenderer, HEAD, BODY, FOOD
from viz.renderer_pygame import PygameRenderer

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

@pytest.fixture
def renderer(screen, cfg):
    r = PygameRenderer()
    r.attach_surface(screen, cfg.with_(render_show_hud=False))
    return r

def test_draws_snake_and_food(renderer, screen):
    renderer.on_snake_changed([(20, 15), (19, 15), (18, 15)])
    renderer.on_food_placed((5, 5))
    renderer.draw()
    assert _rgb(screen.get_at((20 * 16 + 8, 15 * 16 + 8))) == theme.HEAD
    assert _rgb(screen.get_at((19 * 16 + 8, 15 * 16 + 8))) == theme.BODY
    assert _rgb(screen.get_at((5 * 16 + 8, 5 * 16 + 8))) == theme.FOOD
    assert _rgb(screen.get_at((30 * 16 + 8, 25 * 16 + 8))) == theme.BG

def test_tiles_leave_a_gap(renderer, screen):
    renderer.on_snake_changed([(20, 15)])
    renderer.draw()
    # tiles are drawn 2px smaller than the grid cell
    assert _rgb(screen.get_at((20 * 16, 15 * 16))) == theme.BG

def test_game_over_overlay_state(renderer):
    renderer.on_score_changed(40)
    renderer.on_game_over(40)
    renderer.draw()
    assert renderer.final_score == 40
    renderer.on_round_started()
    assert renderer.final_score is None

def test_hud_draws_text(screen, cfg):
    r = PygameRenderer()
    r.attach_surface(screen, cfg)
    r.on_score_changed(10)
    r.draw()
    hud = pg.Rect(8, 6, 120, 40)
    colors = {_rgb(screen.get_at((x, y))) for x in range(hud.left, hud.right) for y in range(hud.top, hud.bottom)}
    assert colors != {theme.BG}

def test_open_requires_instance():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)

def test_draw_before_open_fails():
    with pytest.raises(AssertionError):
        PygameRenderer().draw()

def test_headless_board(cfg):
    r = HeadlessRenderer(cfg)
    r.on_snake_changed([(2, 1), (1, 1)])
    r.on_food_placed((0, 0))
    b = r.board()
    assert b.shape == (30, 40)
    assert b[1, 2] == HEAD and b[1, 1] == BODY and b[0, 0] == FOOD
    assert (b != 0).sum() == 3
    lines = r.text()
    assert lines[0].startswith("F..") and lines[1].startswith(".oH")
