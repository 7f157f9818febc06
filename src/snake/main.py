# main.py
import argparse
import logging

import pygame # type: ignore

from .config import FPS, WIDTH, HEIGHT, Config, GrowthRule, Mode, ScoringFormula
from .render import draw_game, draw_game_over
from .session import SnakeSession

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a square grid, faster every level.")
    parser.add_argument("--size", type=int, default=15, help="board dimension in cells")
    parser.add_argument(
        "--mode",
        type=str,
        default="normal",
        choices=[m.name.lower() for m in Mode],
        help="normal: walls kill; infinite: edges wrap around",
    )
    parser.add_argument(
        "--scoring",
        type=str,
        default="a",
        choices=[f.name.lower() for f in ScoringFormula],
        help=(
            "a: +1 per food, level from score, delay 250/level\n"
            "b: +level per food, level from foods eaten, delay 250/(1+0.2*level)"
        ),
    )
    parser.add_argument(
        "--growth",
        type=str,
        default="immediate",
        choices=[g.value for g in GrowthRule],
        help="when the snake gets longer after eating",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)

def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        size=args.size,
        mode=args.mode,
        scoring=args.scoring,
        growth=args.growth,
        seed=args.seed,
    )

def handle_event(game: SnakeSession, event: pygame.event.Event) -> bool:
    """Route one pygame event to the session. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_SPACE:
            game.toggle()
        elif event.key == pygame.K_r:
            game.reset()
        elif event.key == pygame.K_m:
            game.toggle_mode()
        else:
            game.on_direction_key(event.key)
    return True

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = SnakeSession(cfg, clock=pygame.time.get_ticks)
    best = 0
    running = True

    try:
        while running:
            # 1) input
            for event in pygame.event.get():
                if not handle_event(game, event):
                    running = False
                    break
            if not running:
                break

            # 2) update (the session's timer decides whether a tick is due)
            game.update(pygame.time.get_ticks())
            best = max(best, game.score)

            # 3) render
            draw_game(screen, font, game)
            if game.is_dead:
                draw_game_over(screen, font, game.score)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()

    logger.info(f"Session ended: score {game.score}, level {game.level}, best {best}")
    print(f"Final score: {game.score} (level {game.level}), best this session: {best}")

if __name__ == "__main__":
    main()
