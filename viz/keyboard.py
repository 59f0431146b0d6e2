# viz/keyboard.py
import pygame as pg
from core.directions import Direction

KEY_DIRS = {
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
}

class Keyboard:
    """Maps pygame events to game commands: a Direction, "restart", "quit" or None."""
    def translate(self, e):
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE: return "quit"
            if e.key == pg.K_SPACE:  return "restart"
            return KEY_DIRS.get(e.key)
        return None

    def dispatch(self, e, controller):
        """Forward one event to the controller. Returns the command it mapped to."""
        cmd = self.translate(e)
        if isinstance(cmd, Direction):
            controller.on_direction_input(cmd)
        elif cmd == "restart":
            controller.on_restart_input()
        return cmd
