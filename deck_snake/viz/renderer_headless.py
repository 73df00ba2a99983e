# deck_snake/viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
import numpy as np
from deck_snake.core.interfaces import Snapshot
from deck_snake.core.grid import encode_grid

class HeadlessRenderer:
    def __init__(self):
        self.cfg = None
        self.frame: Optional[np.ndarray] = None
        self.last: Optional[Snapshot] = None
        self.overlay: Optional[str] = None
        self.frames = 0
        self.closed = False

    def open(self, cfg) -> None:
        self.cfg = cfg
        self.closed = False

    def draw(self, snap: Snapshot) -> None:
        self.frame = encode_grid(snap)
        self.last = snap
        self.frames += 1

    def set_overlay(self, text: Optional[str]) -> None:
        self.overlay = text or None

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        self.closed = True
