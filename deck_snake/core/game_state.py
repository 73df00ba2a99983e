# deck_snake/core/game_state.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import List, Optional

from deck_snake.errors import ConfigurationError
from .food import Food, FoodSpawner, RandomSource
from .interfaces import (
    Cell, Direction, Outcome, ScoreStore, Snapshot, TickResult,
    is_opposite, step_cell,
)

logger = logging.getLogger(__name__)

MIN_GRID_SIZE = 3
START_LEN = 3

def initial_snake(grid_size: int) -> List[Cell]:
    """Three vertical cells, head on top, centred where the grid allows."""
    mid = grid_size // 2
    top = min(mid, grid_size - START_LEN)
    return [(mid, top + i) for i in range(START_LEN)]


class GameState:
    def __init__(
        self,
        grid_size: int,
        store: Optional[ScoreStore] = None,
        rng: Optional[RandomSource] = None,
        avoid_snake: bool = False,
    ):
        if isinstance(grid_size, bool) or not isinstance(grid_size, int):
            raise ConfigurationError(f"grid_size must be an int, got {grid_size!r}")
        if grid_size < MIN_GRID_SIZE:
            raise ConfigurationError(
                f"grid_size must be at least {MIN_GRID_SIZE}, got {grid_size}")
        self.grid_size = grid_size
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.spawner = FoodSpawner(grid_size, self.rng, avoid_snake=avoid_snake)
        self.high_score = self._load_high_score()
        self._reset_state()

    @classmethod
    def from_config(cls, cfg, store: Optional[ScoreStore] = None) -> "GameState":
        return cls(cfg.grid_size, store=store, rng=random.Random(cfg.seed),
                   avoid_snake=cfg.avoid_snake)

    def _reset_state(self):
        self.snake: List[Cell] = initial_snake(self.grid_size)
        self.direction = Direction.RIGHT
        self.pending: Optional[Direction] = None
        self.food: Food = self.spawner.spawn(self.snake)
        self.score = 0
        self.tick_count = 0
        self.terminated = False
        self.outcome: Optional[Outcome] = None

    def restart(self) -> Snapshot:
        self._reset_state()
        logger.debug("restart: high_score=%d", self.high_score)
        return self.snapshot()

    # ---- input ----
    def request_direction(self, d: Direction) -> bool:
        """Queue a heading for the next tick. Only the latest request survives."""
        if self.terminated or is_opposite(self.direction, d):
            return False
        self.pending = d
        return True

    # ---- simulation ----
    def tick(self) -> TickResult:
        if self.terminated:
            return TickResult(Outcome.HALTED)

        if self.pending is not None:
            self.direction, self.pending = self.pending, None

        new_head = step_cell(self.snake[0], self.direction)

        # collisions, checked against the pre-move body
        if new_head in self.snake[1:]:
            return self._finish(Outcome.SELF_COLLISION, new_head)
        x, y = new_head
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            return self._finish(Outcome.BOUNDARY_BREACH, new_head)

        self.tick_count += 1
        self.snake.insert(0, new_head)
        if new_head == self.food.cell:
            eaten = self.food
            self._award(eaten.points)
            self.food = self.spawner.spawn(self.snake)
            return TickResult(Outcome.ATE, new_head, eaten.points, eaten)

        self.snake.pop()
        return TickResult(Outcome.MOVED, new_head)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            high_score=self.high_score,
            terminated=self.terminated,
            outcome=self.outcome,
            grid_size=self.grid_size,
            tick_count=self.tick_count,
        )

    # ---- helpers ----
    def _finish(self, outcome: Outcome, head: Cell) -> TickResult:
        self.terminated, self.outcome = True, outcome
        logger.info("run over: %s at %s, score=%d", outcome.value, head, self.score)
        return TickResult(outcome, head)

    def _award(self, points: int) -> None:
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()

    def _load_high_score(self) -> int:
        if self.store is None:
            return 0
        try:
            return max(0, int(self.store.get()))
        except Exception:
            logger.warning("high score unavailable, starting from 0", exc_info=True)
            return 0

    def _save_high_score(self) -> None:
        if self.store is None:
            return
        try:
            self.store.set(self.high_score)
        except Exception:
            logger.warning("could not persist high score %d", self.high_score, exc_info=True)
