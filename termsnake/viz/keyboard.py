# termsnake/viz/keyboard.py
from __future__ import annotations
import curses
from collections import deque
from typing import Deque, Optional
import pygame as pg

from termsnake.core.constants import Action

_CHAR_ACTIONS = {
    "w": Action.UP, "s": Action.DOWN, "a": Action.LEFT, "d": Action.RIGHT,
    "q": Action.QUIT, "r": Action.RESTART,
}

_CURSES_KEYS = {
    curses.KEY_UP: Action.UP,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
}

_PYGAME_KEYS = {
    pg.K_UP: Action.UP,
    pg.K_DOWN: Action.DOWN,
    pg.K_LEFT: Action.LEFT,
    pg.K_RIGHT: Action.RIGHT,
    pg.K_ESCAPE: Action.QUIT,
}

ESC = 27


def decode_char(ch: str) -> Optional[Action]:
    return _CHAR_ACTIONS.get(ch.lower()) if len(ch) == 1 else None


def decode_curses_key(key: int) -> Optional[Action]:
    """Map a curses getch() code to an action; -1 (no key) and unknown keys give None."""
    if key in _CURSES_KEYS:
        return _CURSES_KEYS[key]
    if key == ESC:
        return Action.QUIT
    if 0 <= key < 256:
        return decode_char(chr(key))
    return None


def decode_pygame_key(key: int, unicode: str = "") -> Optional[Action]:
    if key in _PYGAME_KEYS:
        return _PYGAME_KEYS[key]
    if unicode:
        return decode_char(unicode)
    if 0 <= key < 256:
        return decode_char(chr(key))
    return None


class CursesKeyboard:
    def __init__(self, stdscr: "curses.window"):
        self.stdscr = stdscr

    def poll(self) -> Optional[Action]:
        return decode_curses_key(self.stdscr.getch())

    def wait(self) -> Optional[Action]:
        self.stdscr.nodelay(False)
        try:
            return decode_curses_key(self.stdscr.getch())
        finally:
            self.stdscr.nodelay(True)

    def flush(self) -> None:
        curses.flushinp()


class PygameKeyboard:
    """Hands out one action per poll; the rest of a drained event batch waits in a buffer."""

    def __init__(self):
        self._pending: Deque[Action] = deque()

    def poll(self) -> Optional[Action]:
        self._drain(pg.event.get())
        return self._pending.popleft() if self._pending else None

    def wait(self) -> Optional[Action]:
        if self._pending:
            return self._pending.popleft()
        while True:
            e = pg.event.wait()
            if e.type == pg.QUIT:
                return Action.QUIT
            if e.type == pg.KEYDOWN:
                return decode_pygame_key(e.key, e.unicode)

    def flush(self) -> None:
        self._pending.clear()
        pg.event.clear()

    def _drain(self, events) -> None:
        for e in events:
            if e.type == pg.QUIT:
                self._pending.append(Action.QUIT)
            elif e.type == pg.KEYDOWN:
                action = decode_pygame_key(e.key, e.unicode)
                if action is not None:
                    self._pending.append(action)
