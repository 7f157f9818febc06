# src/snake/__init__.py
"""Grid snake: one-tick game rules, level/speed model, tick timer and a pygame front-end."""

from .config import Config, GrowthRule, Mode, ScoringFormula
from .food import BoardFullError, place_food
from .game import GameState, Segment, Status, new_game_state, set_pending_direction, step_game
from .grid import DOWN, LEFT, RIGHT, UP, Coord
from .scheduler import TickScheduler
from .session import SnakeSession

__all__ = [
    "Config", "GrowthRule", "Mode", "ScoringFormula",
    "BoardFullError", "place_food",
    "GameState", "Segment", "Status", "new_game_state", "set_pending_direction", "step_game",
    "UP", "DOWN", "LEFT", "RIGHT", "Coord",
    "TickScheduler",
    "SnakeSession",
]
