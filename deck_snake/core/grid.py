# deck_snake/core/grid.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Snapshot

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3
GLYPHS = {EMPTY: ".", BODY: "o", HEAD: "H", FOOD: "F"}

def encode_grid(s: Snapshot) -> np.ndarray:
    """Occupancy grid indexed [y, x]; snake cells win over food underneath."""
    n = s.grid_size
    grid = np.zeros((n, n), dtype=np.int8)
    fx, fy = s.food.cell
    grid[fy, fx] = FOOD
    for (x, y) in s.snake[1:]:
        grid[y, x] = BODY
    hx, hy = s.snake[0]
    grid[hy, hx] = HEAD
    return grid

def render_ascii(grid: np.ndarray) -> List[str]:
    return ["".join(GLYPHS[int(v)] for v in row) for row in grid]
