# tests/test_food.py
import random
from collections import Counter
import pytest

from deck_snake.core.food import (
    FOOD_CHANCES, FOOD_POINTS, Food, FoodSpawner, pick_kind,
)
from deck_snake.core.interfaces import FoodKind


def test_points_table():
    assert FOOD_POINTS == {
        FoodKind.TREASURE_CHEST: 100,
        FoodKind.LIGHT_RED: 50,
        FoodKind.GREEN: 20,
        FoodKind.BLUE: 5,
    }
    assert Food((1, 1), FoodKind.LIGHT_RED).points == 50

def test_thresholds_are_checked_in_order():
    assert [k for k, _ in FOOD_CHANCES] == [
        FoodKind.TREASURE_CHEST, FoodKind.GREEN, FoodKind.LIGHT_RED]

@pytest.mark.parametrize("draws,kind,used", [
    ([0.01], FoodKind.TREASURE_CHEST, 1),
    ([0.5, 0.29], FoodKind.GREEN, 2),
    ([0.5, 0.5, 0.59], FoodKind.LIGHT_RED, 3),
    ([0.5, 0.5, 0.6], FoodKind.BLUE, 3),
    ([0.02, 0.3, 0.6], FoodKind.BLUE, 3),
])
def test_one_fresh_draw_per_threshold(scripted_rng, draws, kind, used):
    rng = scripted_rng(floats=draws + [0.0, 0.0])
    assert pick_kind(rng) is kind
    assert len(rng.floats) == len(draws) + 2 - used

def test_sequential_draw_rates():
    rng = random.Random(1234)
    n = 20000
    counts = Counter(pick_kind(rng) for _ in range(n))
    assert counts[FoodKind.TREASURE_CHEST] / n == pytest.approx(0.02, abs=0.005)
    assert counts[FoodKind.GREEN] / n == pytest.approx(0.98 * 0.3, abs=0.02)
    assert counts[FoodKind.LIGHT_RED] / n == pytest.approx(0.98 * 0.7 * 0.6, abs=0.02)
    assert counts[FoodKind.BLUE] / n == pytest.approx(0.98 * 0.7 * 0.4, abs=0.02)

def test_baseline_may_land_under_snake(scripted_rng):
    spawner = FoodSpawner(5, scripted_rng(ints=[2, 3]))
    food = spawner.spawn([(2, 2), (2, 3), (2, 4)])
    assert food.cell == (2, 3)
    assert food.kind is FoodKind.BLUE

def test_avoid_snake_uses_free_cells(scripted_rng):
    snake = [(x, y) for x in range(3) for y in range(3) if (x, y) != (1, 2)]
    spawner = FoodSpawner(3, scripted_rng(ints=[5]), avoid_snake=True)
    assert spawner.spawn(snake).cell == (1, 2)

def test_avoid_snake_falls_back_when_grid_full(scripted_rng):
    snake = [(x, y) for x in range(3) for y in range(3)]
    spawner = FoodSpawner(3, scripted_rng(ints=[1, 2]), avoid_snake=True)
    assert spawner.spawn(snake).cell == (1, 2)

def test_spawned_cells_inside_grid():
    spawner = FoodSpawner(7, random.Random(5))
    cells = {spawner.spawn().cell for _ in range(1000)}
    assert all(0 <= x < 7 and 0 <= y < 7 for x, y in cells)
    assert len(cells) == 49
