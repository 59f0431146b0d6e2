# runners/run_snake.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.session import GameController
from viz.renderer_pygame import PygameRenderer
from viz.keyboard import Keyboard
from viz.timer import PygameTimer
from stats.logging import CSVLogger, ConsoleLogger, MultiLogger, make_round_logger, ALL_KEYS

def build_round_logger(cfg: AppConfig):
    loggers = []
    if cfg.log_console:
        loggers.append(ConsoleLogger(keys=["round/score", "round/length", "round/ticks",
                                           "round/best", "round/score_mean"]))
    if cfg.log_csv:
        loggers.append(CSVLogger(cfg.log_csv, fieldnames=ALL_KEYS))
    if not loggers:
        return None, None
    logger = MultiLogger(*loggers)
    return logger, make_round_logger(logger=logger, window=cfg.stats_window)

def main(cfg: Optional[AppConfig] = None):
    cfg = cfg or AppConfig()

    rend = PygameRenderer()
    rend.open(cfg)
    timer = PygameTimer()
    kbd = Keyboard()
    logger, on_round_end = build_round_logger(cfg)

    print("=== Snake ===")
    print(f"grid: {cfg.columns}x{cfg.rows}  tile: {cfg.tile_size}px  seed: {cfg.seed}")

    game = GameController(cfg, rend, timer, on_round_end=on_round_end)
    game.start()

    try:
        running = True
        while running:
            for e in pg.event.get():
                if timer.handle(e):
                    continue
                if kbd.dispatch(e, game) == "quit":
                    running = False
                    break
            rend.draw()
            rend.tick(cfg.fps)
    finally:
        timer.stop()
        if logger is not None:
            logger.close()
        rend.close()
