# food.py
import logging
from typing import Iterable, Optional

import numpy as np # type: ignore

from .grid import Coord

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when food is requested on a board with no free cell."""


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)

def place_food(snake: Iterable, size: int, rng: np.random.Generator) -> Coord:
    """
    Sample uniformly random cells in [1, size] x [1, size] until one is not
    covered by the snake.

    The retry loop is unbounded: it slows down as the snake fills the board
    and only the completely full board is rejected up front.
    """
    occupied = {(seg[0], seg[1]) for seg in snake}
    if len(occupied) >= size * size:
        raise BoardFullError(f"No free cell for food on a {size}x{size} board")

    attempts = 0
    while True:
        attempts += 1
        row, col = (int(v) for v in rng.integers(1, size + 1, size=2))
        if (row, col) not in occupied:
            logger.debug(f"Food placed at ({row}, {col}) after {attempts} attempt(s)")
            return Coord(row, col)
