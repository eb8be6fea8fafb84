# termsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .constants import Action, Cell, Difficulty, Direction


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]             # head first
    food: Optional[Cell]                # None only once the board is full
    obstacles: Tuple[Cell, ...]
    dir: Direction
    score: int
    game_over: bool
    reason: str | None
    step_count: int
    wrap: bool
    difficulty: Difficulty
    grid_w: int
    grid_h: int

    @property
    def head(self) -> Cell:
        return self.snake[0]


class InputSource(Protocol):
    def poll(self) -> Optional[Action]: ...     # non-blocking, None when no key
    def wait(self) -> Optional[Action]: ...     # blocks until a key arrives
    def flush(self) -> None: ...
