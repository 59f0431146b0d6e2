from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # grid
    columns: int = 40
    rows: int = 30
    tile_size: int = 16
    seed: Optional[int] = None

    # gameplay
    start_len: int = 3
    score_increment: int = 10
    initial_tick_ms: int = 130
    min_tick_ms: int = 70
    tick_decrement_ms: int = 3

    # render
    fps: int = 60                        # event loop cap, not the snake speed
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_help_text: str = "Use arrows to move. Use space to restart."

    # round logging
    log_console: bool = True
    log_csv: Optional[str] = None
    stats_window: int = 10


    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
