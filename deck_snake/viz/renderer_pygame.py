# deck_snake/viz/renderer_pygame.py
from __future__ import annotations
import logging
import os
from typing import Optional, Union
import pygame as pg
from deck_snake.config import AppConfig
from deck_snake.core.interfaces import FoodKind, Snapshot
import deck_snake.viz.renderer_colors as theme

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, os.PathLike]
CHEST_IMAGE = "trsure-chst.png"

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._overlay_text: Optional[str] = None
        self._chest: Optional[pg.Surface] = None
        self._font: Optional[pg.font.Font] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell
        side = cfg.grid_size * self.cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((side, side))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0
        self._load_assets(cfg)

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto an existing surface; the owner flips and paces it."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False
        self._load_assets(cfg)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        last = len(s.snake) - 1
        for i, (x, y) in enumerate(s.snake):
            rect = pg.Rect(x * c, y * c, c, c)
            col = theme.HEAD if i == 0 else (theme.TAIL if i == last else theme.BODY)
            pg.draw.rect(surf, col, rect)
            pg.draw.rect(surf, theme.OUTLINE, rect, width=1)
            if i % 2 == 0:
                pg.draw.rect(surf, theme.DECK, rect)

        fx, fy = s.food.cell
        food_rect = pg.Rect(fx * c, fy * c, c, c)
        if s.food.kind is FoodKind.TREASURE_CHEST and self._chest is not None:
            surf.blit(self._chest, food_rect)
        else:
            pg.draw.rect(surf, theme.FOOD[s.food.kind.value], food_rect)

        if self.cfg.render_show_hud:
            font = self._get_font()
            surf.blit(font.render(f"Score: {s.score}", True, theme.TEXT), (10, 6))
            surf.blit(font.render(f"Highest Score: {s.high_score}", True, theme.TEXT), (10, 26))

        if self._overlay_text:
            self._draw_overlay(self._overlay_text)

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None
            self._chest = None

    # internals
    def _get_font(self) -> pg.font.Font:
        if self._font is None:
            self._font = pg.font.SysFont("Arial", 16)
        return self._font

    def _draw_overlay(self, text: str) -> None:
        assert self.surf is not None
        font = self._get_font()
        lines = text.split("\n")
        h = 20 * len(lines) + 12
        w = self.surf.get_width()
        top = (self.surf.get_height() - h) // 2
        pg.draw.rect(self.surf, theme.OVERLAY_BG, pg.Rect(0, top, w, h))
        for i, line in enumerate(lines):
            img = font.render(line, True, theme.OVERLAY_TEXT)
            self.surf.blit(img, img.get_rect(midtop=(w // 2, top + 6 + 20 * i)))

    def _load_assets(self, cfg: AppConfig) -> None:
        self._chest = None
        path = os.path.join(cfg.asset_dir, CHEST_IMAGE)
        if not os.path.exists(path):
            return
        try:
            img = pg.image.load(path)
        except pg.error as e:
            logger.warning("could not load %s: %s", path, e)
            return
        self._chest = pg.transform.scale(img, (self.cell, self.cell))

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
