# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window or grab an audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a source checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest


class ScriptedRng:
    """Feeds fixed draws; falls back to 0 for cells and 0.99 (plain food) for kinds."""
    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)

    def random(self):
        return self.floats.pop(0) if self.floats else 0.99

    def randrange(self, stop):
        return (self.ints.pop(0) if self.ints else 0) % stop


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((100, 100), pg.SRCALPHA)

@pytest.fixture
def scripted_rng():
    return ScriptedRng

@pytest.fixture
def state_factory():
    from deck_snake.core.game_state import GameState
    def make(grid_size=5, store=None, rng=None, **kwargs):
        # default food lands on (0, 0) as a 5 point BLUE
        return GameState(grid_size, store=store, rng=rng or ScriptedRng(), **kwargs)
    return make
