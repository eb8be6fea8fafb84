# termsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

from termsnake.core.constants import (
    Difficulty, INITIAL_SNAKE_LENGTH, MAX_OBSTACLES, TICK_MS,
)

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / rules
    grid_w: int = 30
    grid_h: int = 20
    start_len: int = INITIAL_SNAKE_LENGTH
    wrap: bool = False
    difficulty: Difficulty = Difficulty.EASY
    max_obstacles: int = MAX_OBSTACLES
    seed: Optional[int] = None

    # loop
    tick_ms: int = TICK_MS

    # render
    renderer: Literal["curses", "pygame"] = "curses"
    render_cell: int = 24
    render_title: str = "Snake"

    # logging
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
