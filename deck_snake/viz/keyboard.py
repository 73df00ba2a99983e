# deck_snake/viz/keyboard.py
from __future__ import annotations
from typing import Any, List, Optional, Tuple
import pygame as pg
from deck_snake.core.interfaces import Direction

Command = Tuple[str, Any]  # ("direction", Direction) | ("yes"|"no"|"key"|"quit", None)

KEY_DIRECTIONS = {
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
    pg.K_w: Direction.UP,
    pg.K_s: Direction.DOWN,
    pg.K_a: Direction.LEFT,
    pg.K_d: Direction.RIGHT,
}
YES_KEYS = (pg.K_y, pg.K_RETURN)
NO_KEYS = (pg.K_n,)

def translate(event: pg.event.Event) -> Optional[Command]:
    if event.type == pg.QUIT:
        return ("quit", None)
    if event.type != pg.KEYDOWN:
        return None
    if event.key == pg.K_ESCAPE:
        return ("quit", None)
    if event.key in KEY_DIRECTIONS:
        return ("direction", KEY_DIRECTIONS[event.key])
    if event.key in YES_KEYS:
        return ("yes", None)
    if event.key in NO_KEYS:
        return ("no", None)
    return ("key", None)

class Keyboard:
    def poll(self) -> List[Command]:
        cmds = []
        for e in pg.event.get():
            cmd = translate(e)
            if cmd is not None:
                cmds.append(cmd)
        return cmds
