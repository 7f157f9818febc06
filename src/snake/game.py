# game.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Optional

import numpy as np # type: ignore

from .config import CFG, Config, GrowthRule, Mode
from .food import make_rng, place_food
from .grid import LEFT, Coord, add, coord_in_bounds, is_opposite, wrap_coord
from .levels import delay_for, level_for, points_for_food

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 4


class Segment(NamedTuple):
    row: int
    col: int
    has_food: bool = False   # still digesting a food unit

    @property
    def coord(self) -> Coord:
        return Coord(self.row, self.col)


class Status(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    DEAD = "dead"


# ---------- Helpers ----------
def initial_snake(size: int) -> List[Segment]:
    """Four cells in one row, head on the left (row 10, cols 10-13 when the board allows)."""
    row = min(10, size)
    col = min(10, size - INITIAL_LENGTH + 1)
    return [Segment(row, col + i) for i in range(INITIAL_LENGTH)]


# ---------- Growth rules ----------
def _body_immediate(snake: List[Segment], will_eat: bool) -> List[Segment]:
    # Eating keeps the whole old snake, so the length grows on this tick.
    kept = snake if will_eat else snake[:-1]
    return [seg._replace(has_food=False) if seg.has_food else seg for seg in kept]

def _body_digest(snake: List[Segment], will_eat: bool) -> List[Segment]:
    # The tail survives one extra tick only while it carries food.
    body = list(snake[:-1])
    tail = snake[-1]
    if tail.has_food:
        body.append(tail._replace(has_food=False))
    return body

GROWTH_RULES: Dict[GrowthRule, Callable[[List[Segment], bool], List[Segment]]] = {
    GrowthRule.IMMEDIATE: _body_immediate,
    GrowthRule.DIGEST: _body_digest,
}


# ---------- State ----------
@dataclass
class GameState:
    config: Config
    rng: np.random.Generator
    snake: List[Segment]           # head at index 0
    direction: Coord               # applied on the last tick
    pending: Coord                 # applied on the next tick
    food: Coord
    score: int = 0
    food_eaten: int = 0
    ticks: int = 0
    is_running: bool = False
    is_dead: bool = False
    started: bool = False
    death_reason: Optional[str] = None   # 'wall', 'self' or 'full'

    @property
    def head(self) -> Segment:
        return self.snake[0]

    @property
    def level(self) -> int:
        return level_for(self.config.scoring, self.score, self.food_eaten,
                         self.config.foods_per_level)

    @property
    def delay_ms(self) -> int:
        return delay_for(self.config.scoring, self.level, self.config.base_delay_ms)

    @property
    def status(self) -> Status:
        if self.is_dead:
            return Status.DEAD
        if self.is_running:
            return Status.RUNNING
        return Status.PAUSED if self.started else Status.NOT_STARTED

def new_game_state(config: Config = CFG, rng: Optional[np.random.Generator] = None) -> GameState:
    if rng is None:
        rng = make_rng(config.seed)
    snake = initial_snake(config.size)
    food = place_food(snake, config.size, rng)
    return GameState(
        config=config,
        rng=rng,
        snake=snake,
        direction=LEFT,
        pending=LEFT,
        food=food,
    )


# ---------- Input / Update ----------
def set_pending_direction(state: GameState, direction: Coord) -> bool:
    """Buffer a turn for the next tick (no 180° turns). Return False if rejected."""
    if not state.is_running:
        return False
    if is_opposite(direction, state.direction):
        logger.debug(f"Ignoring reversal {tuple(direction)} while heading {tuple(state.direction)}")
        return False
    state.pending = Coord(*direction)
    return True

def _die(state: GameState, reason: str) -> None:
    state.is_dead = True
    state.is_running = False
    state.death_reason = reason
    logger.info(f"Snake died ({reason}) at tick {state.ticks} with score {state.score}")

def step_game(state: GameState) -> bool:
    """
    Advance the game by exactly one tick.
    Returns True if the snake is alive afterwards, False on death.
    A dead game is left untouched.
    """
    if state.is_dead:
        return False

    cfg = state.config

    # Commit direction once per tick
    state.direction = state.pending
    target = add(state.head.coord, state.direction)

    # Wall collision (bounded board only)
    if cfg.mode is Mode.NORMAL:
        if not coord_in_bounds(target, cfg.size):
            _die(state, "wall")
            return False
        new_head = target
    else:
        new_head = wrap_coord(target, cfg.size)

    will_eat = new_head == state.food
    head_seg = Segment(new_head.row, new_head.col, will_eat)
    body = GROWTH_RULES[cfg.growth](state.snake, will_eat)

    # Self collision discards the move
    if any(seg.coord == new_head for seg in body):
        _die(state, "self")
        return False

    # No free cell would be left for the next food: the game ends here
    if will_eat and len(body) + 1 >= cfg.size * cfg.size:
        _die(state, "full")
        return False

    state.snake = [head_seg, *body]
    state.ticks += 1

    if will_eat:
        _eat(state)
    return True

def _eat(state: GameState) -> None:
    cfg = state.config
    level_before = state.level
    state.score += points_for_food(cfg.scoring, level_before)
    state.food_eaten += 1
    state.food = place_food(state.snake, cfg.size, state.rng)
    if state.level != level_before:
        logger.info(f"Level up: {level_before} -> {state.level} (tick every {state.delay_ms} ms)")
