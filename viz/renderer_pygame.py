from __future__ import annotations
from typing import List, Optional, Sequence
import pygame as pg
from config import AppConfig
from core.geometry import Cell, Grid
import viz.renderer_colors as theme

class PygameRenderer:
    """
    Presenter that turns game events into pygame drawing.

    The core never reads anything back from here; this class keeps its own
    view copy of the snake, food and score and repaints it on draw().
    """
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.grid: Optional[Grid] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._font: Optional[pg.font.Font] = None
        self._hint_font: Optional[pg.font.Font] = None
        self._over_font: Optional[pg.font.Font] = None

        # view state
        self.cells: List[Cell] = []
        self.food: Optional[Cell] = None
        self.score = 0
        self.final_score: Optional[int] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.grid = Grid.from_config(cfg)

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.grid.pixel_size)
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._load_fonts()

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.grid = Grid.from_config(cfg)
        self.surf = surface
        self.clock = None  # embedding surface typically controls timing
        self._auto_flip = False
        self._load_fonts()

    def _load_fonts(self) -> None:
        if not pg.font.get_init():
            pg.font.init()
        self._font = pg.font.SysFont("monospace", 18)
        self._hint_font = pg.font.SysFont("monospace", 14)
        self._over_font = pg.font.SysFont("monospace", 28)

    # ---- Presenter ----
    def on_round_started(self) -> None:
        self.final_score = None

    def on_snake_changed(self, cells: Sequence[Cell]) -> None:
        self.cells = list(cells)

    def on_food_placed(self, cell: Cell) -> None:
        self.food = cell

    def on_score_changed(self, score: int) -> None:
        self.score = score

    def on_game_over(self, final_score: int) -> None:
        self.final_score = final_score

    # ---- drawing ----
    def draw(self) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None and self.grid is not None, "Renderer config not set (call open first)"
        surf = self.surf
        surf.fill(theme.BG)

        if self.food is not None:
            self._draw_tile(self.food, theme.FOOD)
        # tail first so the head is painted last
        for i in range(len(self.cells) - 1, -1, -1):
            self._draw_tile(self.cells[i], theme.HEAD if i == 0 else theme.BODY)

        if self.cfg.render_show_hud:
            surf.blit(self._font.render(f"Score: {self.score}", True, theme.TEXT), (8, 6))
            if self.cfg.render_help_text:
                surf.blit(self._hint_font.render(self.cfg.render_help_text, True, theme.HINT), (8, 28))

        if self.final_score is not None:
            self._draw_game_over(self.final_score)

        if self._auto_flip:
            pg.display.flip()

    def _draw_tile(self, cell: Cell, color) -> None:
        t = self.grid.tile_size
        px, py = self.grid.to_pixel_center(cell)
        rect = pg.Rect(0, 0, t - 2, t - 2)
        rect.center = (int(px), int(py))
        pg.draw.rect(self.surf, color, rect)

    def _draw_game_over(self, final_score: int) -> None:
        lines = ["Game Over", f"Score: {final_score}", "Press Space to Restart"]
        rendered = [self._over_font.render(line, True, theme.TEXT) for line in lines]
        total_h = sum(r.get_height() for r in rendered)
        cx, cy = self.surf.get_width() // 2, self.surf.get_height() // 2
        y = cy - total_h // 2
        for r in rendered:
            self.surf.blit(r, r.get_rect(midtop=(cx, y)))
            y += r.get_height()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
