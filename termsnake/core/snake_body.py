# termsnake/core/snake_body.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from .constants import Cell, Direction


class Snake:
    """Snake body kept in one pre-sized buffer.

    `_body` holds `capacity` (x, y) rows; only the first `length` rows are live.
    Index 0 is the head, index length-1 the tail. The buffer is allocated once
    and reused by `reset()` across restarts.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._cap = int(capacity)
        self._body = np.zeros((self._cap, 2), dtype=np.int64)
        self.length = 0
        self.direction = Direction.RIGHT

    def __len__(self) -> int:
        return self.length

    @property
    def capacity(self) -> int:
        return self._cap

    @property
    def head(self) -> Cell:
        x, y = self._body[0]
        return (int(x), int(y))

    def cells(self) -> List[Cell]:
        return [(int(x), int(y)) for x, y in self._body[:self.length]]

    def reset(self, cells: List[Cell], direction: Direction) -> None:
        if not 0 < len(cells) <= self._cap:
            raise ValueError(f"snake of length {len(cells)} does not fit capacity {self._cap}")
        self._body[:len(cells)] = cells
        self.length = len(cells)
        self.direction = direction

    def turn(self, direction: Direction) -> bool:
        """Change heading unless it is a 180° reversal. Returns True if applied."""
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        return True

    def hits(self, cell: Cell, k: int) -> bool:
        """True if `cell` equals any of the first `k` body cells."""
        if k <= 0:
            return False
        seg = self._body[:k]
        return bool(np.any((seg[:, 0] == cell[0]) & (seg[:, 1] == cell[1])))

    def advance(self, next_head: Cell, grow: bool = False) -> None:
        if grow:
            if self.length >= self._cap:
                raise ValueError("snake already fills the board")
            self.length += 1
        n = self.length
        # numpy copes with the overlapping slices
        self._body[1:n] = self._body[0:n - 1]
        self._body[0] = next_head

    def as_tuple(self) -> Tuple[Cell, ...]:
        return tuple(self.cells())
