# deck_snake/core/game_loop.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from deck_snake.errors import ConfigurationError
from .game_state import GameState
from .interfaces import Outcome, Snapshot, TickResult

logger = logging.getLogger(__name__)

DEFAULT_GAME_SPEED = 100  # ms per tick

RenderFn = Callable[[Snapshot], None]
ResultFn = Callable[[TickResult], None]

class GameLoop:
    """
    Fixed-period driver for GameState.tick().

    The host owns the clock and calls pump(now_ms) from its event loop; the
    loop runs at most one tick per call and drops any backlog instead of
    bursting. Ticks never overlap: run_once() refuses to re-enter itself.
    """
    def __init__(
        self,
        state: GameState,
        render: RenderFn,
        game_over: ResultFn,
        period_ms: int = DEFAULT_GAME_SPEED,
        food_eaten: Optional[ResultFn] = None,
    ):
        if period_ms <= 0:
            raise ConfigurationError(f"period_ms must be positive, got {period_ms}")
        self.state = state
        self.period_ms = period_ms
        self._render = render
        self._game_over = game_over
        self._food_eaten = food_eaten
        self._running = False
        self._next_due: Optional[int] = None
        self._in_tick = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, now_ms: int = 0) -> None:
        self._running = True
        self._next_due = now_ms + self.period_ms

    def stop(self) -> None:
        self._running = False
        self._next_due = None

    def pump(self, now_ms: int) -> Optional[TickResult]:
        if not self._running or self._next_due is None or now_ms < self._next_due:
            return None
        self._next_due += self.period_ms
        if self._next_due <= now_ms:
            logger.debug("loop fell behind by %d ms, re-anchoring", now_ms - self._next_due)
            self._next_due = now_ms + self.period_ms
        return self.run_once()

    def run_once(self) -> TickResult:
        if self._in_tick:
            raise RuntimeError("GameLoop.run_once() is not reentrant")
        self._in_tick = True
        try:
            result = self.state.tick()
            if result.outcome is Outcome.HALTED:
                return result
            if result.terminal:
                self._game_over(result)
                return result
            if result.ate and self._food_eaten is not None:
                self._food_eaten(result)
            self._render(self.state.snapshot())
            return result
        finally:
            self._in_tick = False
