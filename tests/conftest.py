import os
import sys

import pytest

# Add src/ to path so the tests run from a plain checkout too
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from snake.config import Config  # noqa: E402
from snake.game import Segment, new_game_state  # noqa: E402
from snake.grid import Coord  # noqa: E402


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, now: int = 1000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def _make_state(cells, direction, food=(1, 1), running=True, **config):
    """Game state with a hand-placed snake (head first) and food."""
    config.setdefault("seed", 7)
    state = new_game_state(Config(**config))
    state.snake = [Segment(r, c) for r, c in cells]
    state.direction = direction
    state.pending = direction
    state.food = Coord(*food)
    state.is_running = running
    state.started = running
    return state


@pytest.fixture
def make_state():
    return _make_state

