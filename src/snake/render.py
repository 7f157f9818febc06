# render.py
from typing import Tuple

import pygame # type: ignore

from .config import (
    BOARD_PX, HUD_H, WIDTH, HEIGHT,
    BG, BODY, BODY_FED, HEAD, FOOD, BORDER, TEXT, DEAD_TEXT,
    Mode,
)
from .session import SnakeSession

HELP = "Arrows/WASD steer   Space start/pause   R reset   M mode"


# ---------- Helpers ----------
def cell_rect(row: int, col: int, size: int) -> pygame.Rect:
    """Screen rect of a 1-indexed board cell."""
    cell = BOARD_PX / size
    x = int((col - 1) * cell)
    y = HUD_H + int((row - 1) * cell)
    return pygame.Rect(x, y, int(cell) + 1, int(cell) + 1)

def draw_cell(screen: pygame.Surface, row: int, col: int, size: int,
              color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(row, col, size))

def draw_border(screen: pygame.Surface, mode: Mode) -> None:
    """Solid walls kill (Normal); dashed walls wrap (Infinite)."""
    top, bottom = HUD_H, HUD_H + BOARD_PX - 1
    left, right = 0, BOARD_PX - 1
    if mode is Mode.NORMAL:
        pygame.draw.rect(screen, BORDER, pygame.Rect(0, HUD_H, BOARD_PX, BOARD_PX), 2)
        return
    dash, gap = 10, 6
    for x in range(left, right, dash + gap):
        pygame.draw.line(screen, BORDER, (x, top), (min(x + dash, right), top), 2)
        pygame.draw.line(screen, BORDER, (x, bottom), (min(x + dash, right), bottom), 2)
    for y in range(top, bottom, dash + gap):
        pygame.draw.line(screen, BORDER, (left, y), (left, min(y + dash, bottom)), 2)
        pygame.draw.line(screen, BORDER, (right, y), (right, min(y + dash, bottom)), 2)


# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, game: SnakeSession) -> None:
    screen.fill(BG)
    size = game.board_size

    # HUD
    title = font.render(f"{game.mode.value} Snake", True, TEXT)
    screen.blit(title, title.get_rect(center=(WIDTH // 2, 16)))
    lvl = font.render(f"Level: {game.level}", True, TEXT)
    sco = font.render(f"Score: {game.score}", True, TEXT)
    screen.blit(lvl, (8, 38))
    screen.blit(sco, sco.get_rect(topright=(WIDTH - 8, 38)))
    if game.is_dead:
        msg = "Board full!" if game.death_reason == "full" else "You Died!"
        died = font.render(msg, True, DEAD_TEXT)
        screen.blit(died, died.get_rect(midtop=(WIDTH // 2, 38)))

    # food
    fr = cell_rect(game.food.row, game.food.col, size)
    pygame.draw.ellipse(screen, FOOD, fr)

    # snake, tail first so the head is drawn on top
    segments = game.snake_segments
    for seg in reversed(segments[1:]):
        draw_cell(screen, seg.row, seg.col, size, BODY_FED if seg.has_food else BODY)
    head = segments[0]
    draw_cell(screen, head.row, head.col, size, HEAD)

    draw_border(screen, game.mode)

    hint = font.render(HELP, True, BORDER)
    screen.blit(hint, hint.get_rect(midbottom=(WIDTH // 2, HEIGHT - 6)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    # Dim the board with a translucent overlay
    overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, HUD_H))

    cy = HUD_H + BOARD_PX // 2
    title = font.render("GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, (220, 220, 230))
    sco   = font.render(f"Score: {score}", True, (220, 220, 230))

    screen.blit(title, title.get_rect(center=(WIDTH // 2, cy - 16)))
    screen.blit(sub, sub.get_rect(center=(WIDTH // 2, cy + 16)))
    screen.blit(sco, sco.get_rect(center=(WIDTH // 2, cy + 44)))
