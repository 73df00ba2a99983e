# deck_snake/core/food.py  (food-distribution policy, pure)
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple, Protocol
from .interfaces import Cell, FoodKind

FOOD_POINTS = {
    FoodKind.TREASURE_CHEST: 100,
    FoodKind.LIGHT_RED: 50,
    FoodKind.GREEN: 20,
    FoodKind.BLUE: 5,
}

# Evaluated top to bottom with a fresh draw per row; BLUE is the fall-through.
FOOD_CHANCES: Tuple[Tuple[FoodKind, float], ...] = (
    (FoodKind.TREASURE_CHEST, 0.02),
    (FoodKind.GREEN, 0.3),
    (FoodKind.LIGHT_RED, 0.6),
)
DEFAULT_FOOD_KIND = FoodKind.BLUE


class RandomSource(Protocol):
    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Food:
    cell: Cell
    kind: FoodKind

    @property
    def points(self) -> int:
        return FOOD_POINTS[self.kind]


def pick_kind(rng: RandomSource) -> FoodKind:
    """
    Sequential-threshold draw: each row gets its own uniform draw, so the
    effective rates are 2%, 29.4%, 41.16% and 27.44%, not the raw constants.
    """
    for kind, chance in FOOD_CHANCES:
        if rng.random() < chance:
            return kind
    return DEFAULT_FOOD_KIND


class FoodSpawner:
    def __init__(self, grid_size: int, rng: RandomSource, avoid_snake: bool = False):
        self.grid_size = grid_size
        self.rng = rng
        self.avoid_snake = avoid_snake

    def spawn(self, snake: Iterable[Cell] = ()) -> Food:
        cell = self._place(snake)
        return Food(cell=cell, kind=pick_kind(self.rng))

    def _place(self, snake: Iterable[Cell]) -> Cell:
        n = self.grid_size
        if self.avoid_snake:
            occ = set(snake)
            free = [(x, y) for x in range(n) for y in range(n) if (x, y) not in occ]
            if free:
                return free[self.rng.randrange(len(free))]
        # baseline: independent x/y picks, may land under the body
        x = self.rng.randrange(n)
        y = self.rng.randrange(n)
        return (x, y)
