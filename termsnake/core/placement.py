# termsnake/core/placement.py
from __future__ import annotations
from typing import AbstractSet, Iterable, List
import random

from .board import Board
from .constants import Cell


class NoSpaceError(RuntimeError):
    """Raised when every board cell is already occupied."""


class PlacementOracle:
    """Uniform rejection sampling of free cells on a board."""

    def __init__(self, board: Board, rng: random.Random):
        self.board = board
        self.rng = rng

    def free_count(self, excluded: AbstractSet[Cell]) -> int:
        taken = sum(1 for c in excluded if self.board.contains(c))
        return self.board.capacity - taken

    def place(self, excluded: AbstractSet[Cell]) -> Cell:
        # Exhaustion is checked before sampling so the loop below always ends.
        if self.free_count(excluded) <= 0:
            raise NoSpaceError(
                f"no free cell left on {self.board.width}x{self.board.height} board"
            )
        while True:
            cell = self.board.random_cell(self.rng)
            if cell not in excluded:
                return cell

    def place_many(self, count: int, excluded: Iterable[Cell]) -> List[Cell]:
        """Place `count` distinct cells, growing the exclusion set as each is fixed."""
        taken = set(excluded)
        placed: List[Cell] = []
        for _ in range(count):
            cell = self.place(taken)
            placed.append(cell)
            taken.add(cell)
        return placed
