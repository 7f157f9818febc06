import pygame  # type: ignore

from snake.config import Config, Mode
from snake.game import Segment, Status
from snake.grid import DOWN, LEFT, UP, Coord
from snake.session import SnakeSession


def make_session(clock, **config):
    config.setdefault("seed", 11)
    return SnakeSession(Config(**config), clock=clock)


def park_food(game, cell=(1, 1)):
    game.state.food = Coord(*cell)


def test_fresh_session_is_not_running(clock):
    game = make_session(clock)
    assert game.status is Status.NOT_STARTED
    assert not game.is_running and not game.is_dead
    assert game.board_size == 15
    assert game.mode is Mode.NORMAL
    assert (game.score, game.level, game.delay_ms) == (0, 1, 250)
    assert len(game.snake_segments) == 4
    assert not game.update(clock.advance(1_000))


def test_start_ticks_on_the_delay(clock):
    game = make_session(clock)
    park_food(game)
    assert game.start()
    assert game.status is Status.RUNNING
    assert not game.update(clock.advance(249))
    assert game.update(clock.advance(1))
    assert game.snake_segments[0].coord == (10, 9)
    assert game.update(clock.advance(250))
    assert game.snake_segments[0].coord == (10, 8)


def test_pause_stops_the_clock_and_start_resumes(clock):
    game = make_session(clock)
    park_food(game)
    game.start()
    game.update(clock.advance(250))
    assert game.pause()
    assert game.status is Status.PAUSED
    assert not game.scheduler.active
    head = game.snake_segments[0]
    assert not game.update(clock.advance(5_000))
    assert game.snake_segments[0] == head

    assert game.start()
    assert not game.update(clock.advance(100))
    assert game.update(clock.advance(150))


def test_direction_keys(clock):
    game = make_session(clock)
    park_food(game)
    assert not game.on_direction_key(pygame.K_UP)  # not running yet
    game.start()
    assert not game.on_direction_key(pygame.K_RIGHT)  # reversal
    assert not game.on_direction_key(pygame.K_q)
    assert game.on_direction_key(pygame.K_w)
    assert game.state.pending == UP
    game.update(clock.advance(250))
    assert game.snake_segments[0].coord == (9, 10)


def test_wall_death_cancels_the_timer(clock):
    game = make_session(clock)
    game.start()
    game.state.snake = [Segment(1, 5), Segment(2, 5)]
    game.state.direction = game.state.pending = UP
    park_food(game, (15, 15))
    assert game.update(clock.advance(250))
    assert game.is_dead and not game.is_running
    assert game.status is Status.DEAD
    assert not game.scheduler.active
    assert not game.update(clock.advance(10_000))
    assert not game.start()


def test_level_up_rearms_with_shorter_delay(clock):
    game = make_session(clock)
    game.start()
    game.state.score = 4
    park_food(game, (10, 9))
    assert game.update(clock.advance(250))
    assert (game.score, game.level, game.delay_ms) == (5, 2, 125)
    assert game.scheduler.delay_ms == 125
    park_food(game)
    assert not game.update(clock.advance(124))
    assert game.update(clock.advance(1))


def test_reset_restores_initial_state(clock):
    game = make_session(clock)
    game.start()
    park_food(game, (10, 9))
    game.update(clock.advance(250))
    game.steer(DOWN)
    game.reset()
    assert game.status is Status.NOT_STARTED
    assert not game.scheduler.active
    assert [(s.row, s.col) for s in game.snake_segments] == [(10, 10), (10, 11), (10, 12), (10, 13)]
    assert game.state.direction == LEFT and game.state.pending == LEFT
    assert (game.score, game.state.food_eaten, game.level) == (0, 0, 1)
    assert game.food not in [s.coord for s in game.snake_segments]
    assert not game.update(clock.advance(1_000))


def test_reset_after_death_allows_a_new_game(clock):
    game = make_session(clock)
    game.start()
    game.state.snake = [Segment(1, 5), Segment(2, 5)]
    game.state.direction = game.state.pending = UP
    game.update(clock.advance(250))
    assert game.is_dead
    game.reset()
    assert not game.is_dead
    assert game.start()


def test_mode_change_refused_while_running(clock):
    game = make_session(clock)
    game.start()
    assert not game.set_mode(Mode.INFINITE)
    assert game.mode is Mode.NORMAL
    game.pause()
    assert game.set_mode("infinite")
    assert game.mode is Mode.INFINITE
    assert game.state.config.mode is Mode.INFINITE
    assert game.toggle_mode()
    assert game.mode is Mode.NORMAL


def test_toggle_starts_and_pauses(clock):
    game = make_session(clock)
    assert game.toggle()
    assert game.is_running
    assert game.toggle()
    assert not game.is_running


# Every cell of a 4x4 board except (1, 1), head first, heading for (1, 1)
SERPENTINE = [
    (1, 2), (1, 3), (1, 4),
    (2, 4), (2, 3), (2, 2), (2, 1),
    (3, 1), (3, 2), (3, 3), (3, 4),
    (4, 4), (4, 3), (4, 2), (4, 1),
]


def test_eating_the_last_free_cell_ends_the_game(clock):
    game = make_session(clock, size=4, mode=Mode.INFINITE)
    game.start()
    game.state.snake = [Segment(r, c) for r, c in SERPENTINE]
    game.state.direction = game.state.pending = LEFT
    park_food(game, (1, 1))
    before = list(game.state.snake)

    assert game.update(clock.advance(250))
    assert game.is_dead and not game.is_running
    assert game.death_reason == "full"
    assert not game.scheduler.active
    assert game.snake_segments == before
    assert (game.score, game.state.food_eaten) == (0, 0)
    assert game.food not in [s.coord for s in game.snake_segments]
    assert not game.update(clock.advance(10_000))


def test_mode_switched_while_paused_applies_on_resume(clock):
    game = make_session(clock)
    game.start()
    game.state.snake = [Segment(1, 5), Segment(2, 5), Segment(3, 5)]
    game.state.direction = game.state.pending = UP
    park_food(game, (15, 15))
    game.pause()
    assert game.set_mode(Mode.INFINITE)

    game.start()
    assert game.update(clock.advance(250))
    assert not game.is_dead
    assert game.snake_segments[0].coord == (15, 5)
