# board.py
import numpy as np # type: ignore

from .game import GameState

# Cell codes in board_matrix()
EMPTY, BODY, BODY_FED, HEAD, FOOD = 0, 1, 2, 3, 4

_SYMBOLS = {EMPTY: ".", BODY: "o", BODY_FED: "O", HEAD: "@", FOOD: "*"}


def board_matrix(state: GameState) -> np.ndarray:
    """
    Snapshot of the board as a (size, size) int8 matrix.
    Cell (row, col) of the game lives at index [row - 1, col - 1].
    """
    size = state.config.size
    grid = np.zeros((size, size), dtype=np.int8)
    grid[state.food.row - 1, state.food.col - 1] = FOOD
    # Tail first so the head wins if anything overlaps
    for seg in reversed(state.snake[1:]):
        grid[seg.row - 1, seg.col - 1] = BODY_FED if seg.has_food else BODY
    head = state.snake[0]
    grid[head.row - 1, head.col - 1] = HEAD
    return grid

def format_board(state: GameState) -> str:
    """
    Text board for logs and debugging:
    . = empty, * = food, @ = head, o = body, O = body digesting food
    """
    grid = board_matrix(state)
    size = state.config.size
    lines = []
    for r in range(size):
        lines.append(f"{r + 1:2d} " + " ".join(_SYMBOLS[int(v)] for v in grid[r]))
    lines.append("   " + " ".join(str((c + 1) % 10) for c in range(size)))
    return "\n".join(lines)
