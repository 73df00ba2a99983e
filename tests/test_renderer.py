# tests/test_renderer.py
import os
import pygame as pg

from deck_snake.config import AppConfig
from deck_snake.core.food import Food
from deck_snake.core.grid import HEAD
from deck_snake.core.interfaces import FoodKind
from deck_snake.viz import renderer_colors as theme
from deck_snake.viz.renderer_headless import HeadlessRenderer
from deck_snake.viz.renderer_pygame import PygameRenderer


def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def _cfg(tmp_path, **kw):
    base = dict(grid_size=5, render_cell=20, render_show_hud=False, asset_dir=str(tmp_path))
    base.update(kw)
    return AppConfig().with_(**base)

def test_draws_segments_and_food(screen, tmp_path, state_factory):
    s = state_factory(grid_size=5)          # snake [(2,2),(2,3),(2,4)], food (0,0) blue
    ren = PygameRenderer()
    ren.attach_surface(screen, _cfg(tmp_path))
    ren.draw(s.snapshot())
    assert _rgb(screen.get_at((50, 70))) == theme.BODY      # index 1
    assert _rgb(screen.get_at((50, 50))) == theme.DECK      # head, even index
    assert _rgb(screen.get_at((10, 10))) == theme.FOOD["blue"]
    assert _rgb(screen.get_at((90, 10))) == theme.BG

def test_long_snake_tail_colour(screen, tmp_path, state_factory):
    s = state_factory(grid_size=5)
    s.snake = [(1, 1), (2, 1), (3, 1), (4, 1)]
    s.food = Food((0, 4), FoodKind.GREEN)
    ren = PygameRenderer()
    ren.attach_surface(screen, _cfg(tmp_path))
    ren.draw(s.snapshot())
    assert _rgb(screen.get_at((90, 30))) == theme.TAIL      # index 3, odd
    assert _rgb(screen.get_at((10, 90))) == theme.FOOD["green"]

def test_chest_without_image_falls_back_to_tile(screen, tmp_path, state_factory):
    s = state_factory(grid_size=5)
    s.food = Food((4, 0), FoodKind.TREASURE_CHEST)
    ren = PygameRenderer()
    ren.attach_surface(screen, _cfg(tmp_path))
    ren.draw(s.snapshot())
    assert _rgb(screen.get_at((90, 10))) == theme.FOOD["treasure_chest"]

def test_overlay_band(tmp_path, state_factory):
    surf = pg.Surface((400, 400))
    s = state_factory(grid_size=20)
    ren = PygameRenderer()
    ren.attach_surface(surf, _cfg(tmp_path, grid_size=20))
    ren.set_overlay("line one\nline two\nline three")
    ren.draw(s.snapshot())
    top = (400 - (20 * 3 + 12)) // 2
    assert _rgb(surf.get_at((2, top + 2))) == theme.OVERLAY_BG
    ren.set_overlay(None)
    ren.draw(s.snapshot())
    assert _rgb(surf.get_at((2, top + 2))) == theme.BG

def test_hud_renders_text(screen, tmp_path, state_factory):
    s = state_factory(grid_size=5)
    s.food = Food((4, 4), FoodKind.BLUE)
    ren = PygameRenderer()
    ren.attach_surface(screen, _cfg(tmp_path, render_show_hud=True))
    ren.draw(s.snapshot())
    strip = [_rgb(screen.get_at((x, y))) for x in range(10, 40) for y in range(6, 20)]
    assert any(px != theme.BG for px in strip)

def test_records_frames(screen, tmp_path, state_factory):
    rec = tmp_path / "frames"
    rec.mkdir()
    ren = PygameRenderer()
    ren.attach_surface(screen, _cfg(tmp_path, render_record_dir=str(rec)))
    snap = state_factory(grid_size=5).snapshot()
    ren.draw(snap)
    ren.draw(snap)
    assert sorted(os.listdir(rec)) == ["frame_000000.png", "frame_000001.png"]

def test_headless_renderer_keeps_last_frame(state_factory):
    ren = HeadlessRenderer()
    ren.open(AppConfig())
    ren.draw(state_factory(grid_size=5).snapshot())
    ren.set_overlay("paused")
    assert ren.frames == 1 and ren.frame[2, 2] == HEAD
    assert ren.overlay == "paused"
    ren.close()
    assert ren.closed
