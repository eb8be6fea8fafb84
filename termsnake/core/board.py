# termsnake/core/board.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import random

from .constants import Cell, Direction


@dataclass(frozen=True)
class Board:
    """Fixed-size grid with one of two boundary policies.

    wrap=False: stepping off the board is fatal (resolve() returns None).
    wrap=True:  each axis is taken modulo its extent (toroidal board).
    """
    width: int
    height: int
    wrap: bool = False

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def step(self, cell: Cell, direction: Direction) -> Cell:
        """Raw neighbour of `cell`, not yet resolved against the boundary."""
        return (cell[0] + direction.dx, cell[1] + direction.dy)

    def resolve(self, cell: Cell) -> Optional[Cell]:
        if self.wrap:
            x, y = cell
            return ((x + self.width) % self.width, (y + self.height) % self.height)
        if not self.contains(cell):
            return None
        return cell

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.width), rng.randrange(self.height))
