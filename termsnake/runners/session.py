# termsnake/runners/session.py
from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional

from termsnake.core.constants import Action
from termsnake.core.context import GameContext
from termsnake.core.interfaces import InputSource, Snapshot
from termsnake.core.snake_rules import Rules
from termsnake.viz.render_iface import Renderer

logger = logging.getLogger(__name__)


class Phase(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    GAME_OVER = "game_over"
    QUIT = "quit"


class GameSession:
    """Drives the Setup -> Playing -> GameOver -> (Playing | Quit) cycle.

    Each tick: read one key without blocking, apply it, advance the rules,
    draw, then sleep a fixed interval. After a fatal tick the final state is
    drawn once more and the session blocks until quit or restart.
    """

    def __init__(
        self,
        rules: Rules,
        renderer: Renderer,
        keyboard: InputSource,
        ctx: Optional[GameContext] = None,
        tick_seconds: Optional[float] = None,
    ):
        self.rules = rules
        self.renderer = renderer
        self.keyboard = keyboard
        self.ctx = ctx if ctx is not None else rules.ctx
        self.tick_seconds = rules.cfg.tick_seconds if tick_seconds is None else tick_seconds
        self.phase = Phase.SETUP
        self.scores: List[int] = []

    def run(self) -> List[int]:
        """Play until the player quits; returns the score of every finished game."""
        if self.phase is not Phase.SETUP:
            raise RuntimeError(f"session already started (phase={self.phase.value})")
        if not self.rules.ready:
            self.rules.setup()
        logger.info(
            "session start: %dx%d wrap=%s difficulty=%s",
            self.rules.cfg.grid_w, self.rules.cfg.grid_h,
            self.rules.wrap_enabled, self.rules.difficulty.label,
        )
        self.phase = Phase.PLAYING
        while self.phase is not Phase.QUIT:
            if self.phase is Phase.PLAYING:
                self._play()
            else:
                self._game_over()
        logger.info("quit after %d finished game(s)", len(self.scores))
        return self.scores

    def tick(self) -> Optional[Snapshot]:
        """One Playing tick. Returns None if the player quit instead."""
        action = self.keyboard.poll()
        if action is Action.QUIT:
            self.phase = Phase.QUIT
            return None
        if action is not None and action.direction is not None:
            self.rules.turn(action.direction)
        snap = self.rules.step()
        self.renderer.draw(snap)
        self.ctx.sleep(self.tick_seconds)
        return snap

    def _play(self) -> None:
        while not self.rules.game_over:
            if self.tick() is None:
                return
        snap = self.rules.snapshot()
        self.scores.append(snap.score)
        logger.info(
            "game over: score=%d length=%d reason=%s ticks=%d",
            snap.score, len(snap.snake), snap.reason, snap.step_count,
        )
        self.phase = Phase.GAME_OVER

    def _game_over(self) -> None:
        self.renderer.draw(self.rules.snapshot())
        self.keyboard.flush()
        while True:
            action = self.keyboard.wait()
            if action is Action.QUIT:
                self.phase = Phase.QUIT
                return
            if action is Action.RESTART:
                self.rules.restart()
                self.keyboard.flush()
                logger.info("restart")
                self.phase = Phase.PLAYING
                return
