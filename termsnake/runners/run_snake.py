# termsnake/runners/run_snake.py
from __future__ import annotations
import curses
from typing import List, Optional

from termsnake.config import AppConfig
from termsnake.core.context import GameContext
from termsnake.core.interfaces import InputSource
from termsnake.core.snake_rules import Rules
from termsnake.runners.session import GameSession
from termsnake.viz.keyboard import CursesKeyboard, PygameKeyboard
from termsnake.viz.render_iface import Renderer
from termsnake.viz.renderer_curses import CursesRenderer
from termsnake.viz.renderer_pygame import PygameRenderer


def play(cfg: AppConfig, rules: Rules, renderer: Renderer, kbd: InputSource) -> List[int]:
    renderer.open(cfg)
    try:
        return GameSession(rules, renderer, kbd).run()
    finally:
        renderer.close()


def prepare(cfg: AppConfig) -> Rules:
    """Build the rules and run the first setup. Raises ValueError or NoSpaceError."""
    rules = Rules(cfg, GameContext.create(cfg.seed))
    rules.setup()
    return rules


def main(cfg: AppConfig, rules: Optional[Rules] = None) -> List[int]:
    if rules is None:
        rules = prepare(cfg)

    if cfg.renderer == "pygame":
        return play(cfg, rules, PygameRenderer(), PygameKeyboard())

    def _in_terminal(stdscr) -> List[int]:
        return play(cfg, rules, CursesRenderer(stdscr), CursesKeyboard(stdscr))

    return curses.wrapper(_in_terminal)
