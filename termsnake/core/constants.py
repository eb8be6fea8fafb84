# termsnake/core/constants.py
from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple

Cell = Tuple[int, int]

INITIAL_SNAKE_LENGTH = 3
MAX_OBSTACLES = 32
TICK_MS = 150


class Direction(Enum):
    # (dx, dy); y grows downwards like terminal rows
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value

    @property
    def obstacle_count(self) -> int:
        return OBSTACLE_COUNTS[self]


OBSTACLE_COUNTS: Dict[Difficulty, int] = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 6,
    Difficulty.HARD: 12,
}


class Action(Enum):
    """Semantic input actions produced by a keyboard."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    RESTART = "restart"

    @property
    def direction(self) -> Optional[Direction]:
        return _TURNS.get(self)


_TURNS = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}
