# termsnake/core/snake_rules.py  (pure rules, no curses/pygame)
from __future__ import annotations
import logging
from typing import List, Optional

from termsnake.config import AppConfig
from .board import Board
from .constants import Cell, Direction
from .context import GameContext
from .interfaces import Snapshot
from .placement import NoSpaceError, PlacementOracle
from .snake_body import Snake

logger = logging.getLogger(__name__)

WALL = "wall"
OBSTACLE = "obstacle"
SELF = "self"
BOARD_FULL = "board_full"


class Rules:
    """Game state plus the per-tick transition.

    wrap and difficulty are read from the config once and never change; every
    positional field is rebuilt by setup()/restart().
    """

    def __init__(self, cfg: AppConfig, ctx: Optional[GameContext] = None):
        _validate(cfg)
        self.cfg = cfg
        self.ctx = ctx if ctx is not None else GameContext.create(cfg.seed)
        self.board = Board(cfg.grid_w, cfg.grid_h, wrap=cfg.wrap)
        self.oracle = PlacementOracle(self.board, self.ctx.rng)
        self.snake: Optional[Snake] = None
        self.food: Optional[Cell] = None
        self.obstacles: List[Cell] = []
        self.score = 0
        self.game_over = False
        self.reason: str | None = None
        self.step_count = 0

    @property
    def ready(self) -> bool:
        """True once setup() has run."""
        return self.snake is not None

    @property
    def wrap_enabled(self) -> bool:
        return self.cfg.wrap

    @property
    def difficulty(self):
        return self.cfg.difficulty

    @property
    def obstacle_count(self) -> int:
        return len(self.obstacles)

    # ---- lifecycle ----
    def setup(self) -> Snapshot:
        if self.snake is None:
            self.snake = Snake(self.board.capacity)
        cx, cy = self.cfg.grid_w // 2, self.cfg.grid_h // 2
        self.snake.reset([(cx - i, cy) for i in range(self.cfg.start_len)], Direction.RIGHT)
        self.score = 0
        self.game_over = False
        self.reason = None
        self.step_count = 0
        self.food = None
        self.obstacles = []
        self.obstacles = self.oracle.place_many(
            self.cfg.difficulty.obstacle_count, self._snake_cells()
        )
        self.food = self.oracle.place(self._snake_cells() | set(self.obstacles))
        return self.snapshot()

    def restart(self) -> Snapshot:
        logger.debug("restarting game (score was %d)", self.score)
        return self.setup()

    # ---- per tick ----
    def turn(self, direction: Direction) -> bool:
        assert self.snake is not None, "call setup() first"
        return self.snake.turn(direction)

    def step(self) -> Snapshot:
        assert self.snake is not None, "call setup() first"
        if self.game_over:
            return self.snapshot()
        snake = self.snake

        next_head = self.board.resolve(self.board.step(snake.head, snake.direction))
        if next_head is None:
            return self._end(WALL)

        ate_food = next_head == self.food

        if next_head in self.obstacles:
            return self._end(OBSTACLE)

        # the tail cell moves away this tick unless the snake grows
        k = snake.length if ate_food else snake.length - 1
        if snake.hits(next_head, k):
            return self._end(SELF)

        snake.advance(next_head, grow=ate_food)
        self.step_count += 1
        if ate_food:
            self.score += 1
            self._respawn_food()
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        assert self.snake is not None, "call setup() first"
        return Snapshot(
            snake=self.snake.as_tuple(),
            food=self.food,
            obstacles=tuple(self.obstacles),
            dir=self.snake.direction,
            score=self.score,
            game_over=self.game_over,
            reason=self.reason,
            step_count=self.step_count,
            wrap=self.cfg.wrap,
            difficulty=self.cfg.difficulty,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
        )

    # ---- helpers ----
    def _snake_cells(self) -> set:
        assert self.snake is not None
        return set(self.snake.cells())

    def _respawn_food(self) -> None:
        try:
            self.food = self.oracle.place(self._snake_cells() | set(self.obstacles))
        except NoSpaceError:
            logger.info("no space left for food, board filled at score %d", self.score)
            self.food = None
            self._end(BOARD_FULL)

    def _end(self, reason: str) -> Snapshot:
        self.game_over = True
        self.reason = reason
        return self.snapshot()


def _validate(cfg: AppConfig) -> None:
    if cfg.grid_w <= 0 or cfg.grid_h <= 0:
        raise ValueError(f"board must be positive, got {cfg.grid_w}x{cfg.grid_h}")
    if not 1 <= cfg.start_len <= cfg.grid_w // 2 + 1:
        raise ValueError(f"start_len={cfg.start_len} does not fit a board {cfg.grid_w} wide")
    if cfg.difficulty.obstacle_count > cfg.max_obstacles:
        raise ValueError(
            f"{cfg.difficulty.label} needs {cfg.difficulty.obstacle_count} obstacles, "
            f"capacity is {cfg.max_obstacles}"
        )
