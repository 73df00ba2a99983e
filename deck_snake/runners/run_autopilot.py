# deck_snake/runners/run_autopilot.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from deck_snake.config import AppConfig
from deck_snake.core.game_loop import GameLoop
from deck_snake.core.game_state import GameState
from deck_snake.core.grid import encode_grid, render_ascii
from deck_snake.core.interfaces import (
    Cell, Direction, Outcome, Snapshot, TickResult, is_opposite, step_cell,
)
from deck_snake.core.run_log import RunLog
from deck_snake.core.score_store import MemoryScoreStore
from deck_snake.viz.renderer_headless import HeadlessRenderer


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class GreedyPilot:
    """
    One-step lookahead: among the legal headings whose next cell is on the
    grid and off the body (tail counts as body), take the one closest to the
    food. Falls back to the current heading when boxed in.
    """
    def choose(self, snap: Snapshot) -> Direction:
        head, n = snap.snake[0], snap.grid_size
        body = set(snap.snake[1:])
        best: Optional[Direction] = None
        best_d = None
        for d in Direction:
            if is_opposite(snap.direction, d):
                continue
            x, y = nxt = step_cell(head, d)
            if not (0 <= x < n and 0 <= y < n) or nxt in body:
                continue
            dist = manhattan(nxt, snap.food.cell)
            if best_d is None or dist < best_d:
                best, best_d = d, dist
        return best if best is not None else snap.direction


@dataclass(frozen=True)
class RunResult:
    run: int
    outcome: Optional[Outcome]
    score: int
    high_score: int
    length: int
    ticks: int
    board: Tuple[str, ...] = ()     # final position, one string per row


def run_autopilot(cfg: AppConfig, runs: int = 5, max_ticks: int = 2000,
                  run_log: Optional[RunLog] = None) -> List[RunResult]:
    """Play `runs` games headlessly on a simulated clock."""
    state = GameState.from_config(cfg, store=MemoryScoreStore())
    renderer = HeadlessRenderer()
    renderer.open(cfg)
    pilot = GreedyPilot()
    results: List[RunResult] = []

    def on_game_over(result: TickResult) -> None:
        loop.stop()

    loop = GameLoop(state, render=renderer.draw, game_over=on_game_over,
                    period_ms=cfg.game_speed_ms)

    for run in range(1, runs + 1):
        now = 0
        state.restart()
        loop.start(now)
        while loop.running and state.tick_count < max_ticks:
            state.request_direction(pilot.choose(state.snapshot()))
            now += cfg.game_speed_ms
            loop.pump(now)
        loop.stop()
        snap = state.snapshot()
        if run_log is not None:
            run_log.record(run, snap)
        results.append(RunResult(run, snap.outcome, snap.score, snap.high_score,
                                 len(snap.snake), snap.tick_count,
                                 tuple(render_ascii(encode_grid(snap)))))
    renderer.close()
    return results


def main(cfg: AppConfig, runs: int = 5, max_ticks: int = 2000,
         show_board: bool = False) -> None:
    run_log = RunLog(cfg.run_log_path) if cfg.run_log_path else None
    try:
        results = run_autopilot(cfg, runs=runs, max_ticks=max_ticks, run_log=run_log)
    finally:
        if run_log is not None:
            run_log.close()
    for r in results:
        reason = r.outcome.value if r.outcome else "timeout"
        print(f"[run {r.run}] score={r.score} len={r.length} ticks={r.ticks} reason={reason}")
        if show_board:
            print("\n".join(r.board))
    if not results:
        return
    scores = [r.score for r in results]
    print(f"mean={sum(scores) / len(scores):.1f} min={min(scores)} max={max(scores)} best={results[-1].high_score}")
