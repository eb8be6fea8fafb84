# termsnake/viz/renderer_curses.py
from __future__ import annotations
import curses
from typing import List, Optional
import numpy as np

from termsnake.config import AppConfig
from termsnake.core.interfaces import Snapshot

BORDER = "#"
HEAD = "O"
BODY = "o"
FOOD = "*"
OBSTACLE = "X"
EMPTY = " "

CONTROLS = "controls: WASD to move, q to quit"
GAME_OVER_PROMPT = "game over, press r to restart, q to quit"
STATUS_LINES = 5


class TerminalTooSmallError(RuntimeError):
    pass


def board_lines(snap: Snapshot) -> List[str]:
    """The bordered (grid_w+2) x (grid_h+2) board as text rows."""
    w, h = snap.grid_w, snap.grid_h
    grid = np.full((h + 2, w + 2), EMPTY, dtype="<U1")
    grid[0, :] = BORDER; grid[h + 1, :] = BORDER
    grid[:, 0] = BORDER; grid[:, w + 1] = BORDER

    # later layers win: body, head, food, obstacles
    for x, y in snap.snake[1:]:
        grid[y + 1, x + 1] = BODY
    hx, hy = snap.head
    grid[hy + 1, hx + 1] = HEAD
    if snap.food is not None:
        fx, fy = snap.food
        grid[fy + 1, fx + 1] = FOOD
    for ox, oy in snap.obstacles:
        grid[oy + 1, ox + 1] = OBSTACLE
    return ["".join(row) for row in grid]


def status_lines(snap: Snapshot) -> List[str]:
    lines = [
        f"score: {snap.score}",
        CONTROLS,
        f"wrap: {'on' if snap.wrap else 'off'}",
        f"mode: {snap.difficulty.label}",
    ]
    if snap.game_over:
        lines.append(GAME_OVER_PROMPT)
    return lines


def render_lines(snap: Snapshot) -> List[str]:
    """Full frame: board, one blank row, status lines."""
    return board_lines(snap) + [""] + status_lines(snap)


def required_size(cfg: AppConfig) -> tuple[int, int]:
    """(rows, cols) the terminal needs to show a frame."""
    rows = cfg.grid_h + 3 + STATUS_LINES
    cols = max(cfg.grid_w + 2, len(CONTROLS), len(GAME_OVER_PROMPT)) + 1
    return rows, cols


class CursesRenderer:
    """Draws frames onto a curses window. Terminal mode is owned by curses.wrapper."""

    def __init__(self, stdscr: "curses.window"):
        self.stdscr = stdscr
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        rows, cols = required_size(cfg)
        max_y, max_x = self.stdscr.getmaxyx()
        if max_y < rows or max_x < cols:
            raise TerminalTooSmallError(
                f"terminal too small: need {cols}x{rows}, have {max_x}x{max_y}"
            )
        self.cfg = cfg
        # cbreak/noecho/keypad are already set by curses.wrapper
        self.stdscr.nodelay(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor

    def draw(self, snap: Snapshot) -> None:
        assert self.cfg is not None, "Renderer not opened"
        self.stdscr.erase()
        for row, line in enumerate(render_lines(snap)):
            self.stdscr.addstr(row, 0, line)
        self.stdscr.refresh()

    def close(self) -> None:
        self.cfg = None
