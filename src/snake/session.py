# session.py
"""
The game as seen by a front-end: controls in, renderable state out.

SnakeSession owns one GameState and one TickScheduler and keeps them in
step: the timer runs exactly while the game runs, and it is re-armed
whenever the tick delay changes after a level-up.
"""
import dataclasses
import logging
import time
from typing import Callable, List, Optional

from .board import format_board
from .config import CFG, KEY_DIRECTIONS, Config, Mode
from .game import GameState, Segment, Status, new_game_state, set_pending_direction, step_game
from .grid import Coord
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class SnakeSession:
    def __init__(self, config: Config = CFG, clock: Optional[Callable[[], int]] = None):
        self.config = config
        self.clock = clock or monotonic_ms
        self.state: GameState = new_game_state(config)
        self.scheduler = TickScheduler(self._tick)
        self._now = self.clock()

    # ----- Controls -----
    def start(self) -> bool:
        if self.state.is_dead or self.state.is_running:
            logger.debug(f"start() ignored in status {self.state.status.value}")
            return False
        self.state.is_running = True
        self.state.started = True
        self._now = self.clock()
        self.scheduler.reschedule(self.state.delay_ms, self._now)
        logger.info(f"Game started ({self.config.mode.value} mode, level {self.state.level})")
        return True

    def pause(self) -> bool:
        if not self.state.is_running:
            return False
        self.state.is_running = False
        self.scheduler.cancel()
        logger.info(f"Game paused at tick {self.state.ticks}")
        return True

    def toggle(self) -> bool:
        """Space bar behaviour: pause a running game, otherwise try to start it."""
        return self.pause() if self.state.is_running else self.start()

    def reset(self) -> None:
        self.scheduler.cancel()
        self.state = new_game_state(self.config, self.state.rng)
        logger.info("Game reset")

    def set_mode(self, mode) -> bool:
        mode = Mode.parse(mode)
        if self.state.is_running:
            logger.debug("Mode change refused while running")
            return False
        self.config = dataclasses.replace(self.config, mode=mode)
        self.state.config = self.config
        logger.info(f"Mode set to {mode.value}")
        return True

    def toggle_mode(self) -> bool:
        other = Mode.INFINITE if self.config.mode is Mode.NORMAL else Mode.NORMAL
        return self.set_mode(other)

    # ----- Input -----
    def steer(self, direction: Coord) -> bool:
        return set_pending_direction(self.state, direction)

    def on_direction_key(self, code: int) -> bool:
        direction = KEY_DIRECTIONS.get(code)
        if direction is None:
            return False
        return self.steer(direction)

    # ----- Clock -----
    def update(self, now_ms: Optional[int] = None) -> bool:
        """Called by the host loop every frame; returns True if a tick ran."""
        self._now = self.clock() if now_ms is None else now_ms
        return self.scheduler.poll(self._now)

    def _tick(self) -> None:
        delay_before = self.state.delay_ms
        alive = step_game(self.state)
        if not alive:
            self.scheduler.cancel()
            logger.debug(f"Final board:\n{format_board(self.state)}")
        elif self.state.delay_ms != delay_before:
            self.scheduler.reschedule(self.state.delay_ms, self._now)

    # ----- Renderable state -----
    @property
    def snake_segments(self) -> List[Segment]:
        return list(self.state.snake)

    @property
    def food(self) -> Coord:
        return self.state.food

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def delay_ms(self) -> int:
        return self.state.delay_ms

    @property
    def is_dead(self) -> bool:
        return self.state.is_dead

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def death_reason(self) -> Optional[str]:
        return self.state.death_reason

    @property
    def board_size(self) -> int:
        return self.config.size

    @property
    def mode(self) -> Mode:
        return self.config.mode
