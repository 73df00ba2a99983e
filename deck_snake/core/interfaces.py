# deck_snake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple, Optional, Protocol

if TYPE_CHECKING:
    from .food import Food

Cell = Tuple[int, int]

class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# ordered pairs (current, requested) that would reverse the snake onto itself
OPPOSITES = frozenset({
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
    (Direction.LEFT, Direction.RIGHT),
    (Direction.RIGHT, Direction.LEFT),
})

def is_opposite(current: Direction, requested: Direction) -> bool:
    return (current, requested) in OPPOSITES

def step_cell(cell: Cell, direction: Direction) -> Cell:
    dx, dy = DELTAS[direction]
    return (cell[0] + dx, cell[1] + dy)


class FoodKind(Enum):
    TREASURE_CHEST = "treasure_chest"
    GREEN = "green"
    LIGHT_RED = "light_red"
    BLUE = "blue"


class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    SELF_COLLISION = "self"
    BOUNDARY_BREACH = "wall"
    HALTED = "halted"        # tick on an already finished run

TERMINAL_OUTCOMES = frozenset({Outcome.SELF_COLLISION, Outcome.BOUNDARY_BREACH})

@dataclass(frozen=True)
class TickResult:
    outcome: Outcome
    head: Optional[Cell] = None          # attempted head cell, None when halted
    points: int = 0
    food_eaten: Optional[Food] = None

    @property
    def terminal(self) -> bool:
        return self.outcome in TERMINAL_OUTCOMES

    @property
    def ate(self) -> bool:
        return self.outcome is Outcome.ATE

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Food
    direction: Direction
    score: int
    high_score: int
    terminated: bool
    outcome: Optional[Outcome]
    grid_size: int
    tick_count: int


# ---- collaborator contracts ----
class ScoreStore(Protocol):
    def get(self) -> int: ...
    def set(self, value: int) -> None: ...

class Renderer(Protocol):
    def open(self, cfg) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...

class AudioSink(Protocol):
    """Fire-and-forget notifications; callers never wait on playback."""
    def food_eaten(self) -> None: ...
    def game_over(self) -> None: ...
    def theme_start(self) -> None: ...
    def theme_stop(self) -> None: ...
