# deck_snake/runners/run_game.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Optional
import pygame as pg

from deck_snake.config import AppConfig
from deck_snake.core.game_loop import GameLoop
from deck_snake.core.game_state import GameState
from deck_snake.core.interfaces import (
    AudioSink, Outcome, Renderer, ScoreStore, Snapshot, TickResult,
)
from deck_snake.core.run_log import RunLog
from deck_snake.core.score_store import JsonScoreStore
from deck_snake.viz.audio import NullAudio, PygameAudio
from deck_snake.viz.keyboard import Command, Keyboard
from deck_snake.viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)

SELF_COLLISION_TEXT = ("Game Over! Your snake collided with its own tail.\n"
                       "Better luck next time! Press any key.")
BOUNDARY_TEXT = ("You fell into the ocean!\n"
                 "Unfortunately, you're -not- a water snake...\n"
                 "Do you want to start over? (Y/N)")

class Prompt(Enum):
    NONE = "none"
    PLAY_AGAIN = "play_again"   # after a boundary breach
    GAME_OVER = "game_over"     # any key restarts


class GameApp:
    """Composition root: owns the state, the loop and every collaborator."""
    def __init__(
        self,
        cfg: AppConfig,
        renderer: Renderer,
        audio: AudioSink,
        store: Optional[ScoreStore] = None,
        keyboard: Optional[Keyboard] = None,
        clock: Optional[Callable[[], int]] = None,
        run_log: Optional[RunLog] = None,
    ):
        self.cfg = cfg
        self.renderer = renderer
        self.audio = audio
        self.keyboard = keyboard
        self.clock = clock if clock is not None else _pygame_ticks
        self.run_log = run_log
        self.state = GameState.from_config(cfg, store=store)
        self.loop = GameLoop(
            self.state,
            render=self.on_render,
            game_over=self.on_game_over,
            period_ms=cfg.game_speed_ms,
            food_eaten=self.on_food_eaten,
        )
        self.prompt = Prompt.NONE
        self.alive = True
        self.runs = 0

    # ---- loop reactions ----
    def on_render(self, snap: Snapshot) -> None:
        self.renderer.draw(snap)

    def on_food_eaten(self, result: TickResult) -> None:
        self.audio.food_eaten()

    def on_game_over(self, result: TickResult) -> None:
        self.loop.stop()
        self.audio.game_over()
        self.runs += 1
        snap = self.state.snapshot()
        if self.run_log is not None:
            self.run_log.record(self.runs, snap)
            self.run_log.flush()
        if result.outcome is Outcome.BOUNDARY_BREACH:
            self._show_prompt(Prompt.PLAY_AGAIN, snap)
        else:
            self._show_prompt(Prompt.GAME_OVER, snap)

    # ---- input ----
    def handle(self, cmd: Command) -> None:
        kind, payload = cmd
        if kind == "quit":
            self.alive = False
            return
        if self.prompt is Prompt.PLAY_AGAIN:
            if kind == "yes":
                self.restart()
            elif kind == "no":
                # declining is an ordinary game over
                self._show_prompt(Prompt.GAME_OVER, self.state.snapshot())
            return
        if self.prompt is Prompt.GAME_OVER:
            self.restart()
            return
        if kind == "direction":
            self.state.request_direction(payload)

    def restart(self) -> None:
        snap = self.state.restart()
        self.prompt = Prompt.NONE
        self.renderer.set_overlay(None)
        self.renderer.draw(snap)
        self.loop.start(self.clock())

    # ---- main ----
    def run(self) -> None:
        self.renderer.open(self.cfg)
        self.audio.theme_start()
        self.renderer.draw(self.state.snapshot())
        self.loop.start(self.clock())
        try:
            while self.alive:
                if self.keyboard is not None:
                    for cmd in self.keyboard.poll():
                        self.handle(cmd)
                        if not self.alive:
                            break
                if not self.alive:
                    break
                self.loop.pump(self.clock())
                self.renderer.tick(self.cfg.fps)
        finally:
            self.loop.stop()
            self.audio.theme_stop()
            if self.run_log is not None:
                self.run_log.close()
            self.renderer.close()
        logger.info("quit after %d runs, high score %d", self.runs, self.state.high_score)

    def _show_prompt(self, prompt: Prompt, snap: Snapshot) -> None:
        self.prompt = prompt
        text = BOUNDARY_TEXT if prompt is Prompt.PLAY_AGAIN else SELF_COLLISION_TEXT
        self.renderer.set_overlay(text)
        self.renderer.draw(snap)


def _pygame_ticks() -> int:
    return pg.time.get_ticks()


def main(cfg: AppConfig) -> None:
    audio = PygameAudio(cfg.asset_dir) if cfg.audio_enabled else NullAudio()
    app = GameApp(
        cfg,
        renderer=PygameRenderer(),
        audio=audio,
        store=JsonScoreStore(cfg.score_file, key=cfg.score_key),
        keyboard=Keyboard(),
    )
    if cfg.run_log_path:
        app.run_log = RunLog(cfg.run_log_path)
    app.run()
