from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pygame # type: ignore

from .grid import UP, DOWN, LEFT, RIGHT

# ----- Window & board -----
BOARD_PX = 500
HUD_H = 64
FOOTER_H = 28
WIDTH, HEIGHT = BOARD_PX, BOARD_PX + HUD_H + FOOTER_H
FPS = 60

# ----- Colors -----
BG        = (20, 20, 24)
BODY      = (200, 50, 50)
BODY_FED  = (120, 20, 20)   # segment still digesting a food unit
HEAD      = (128, 0, 128)
FOOD      = (60, 90, 230)
BORDER    = (68, 68, 68)
TEXT      = (220, 220, 230)
DEAD_TEXT = (230, 60, 60)

# ----- Key bindings (arrows + WASD) -----
KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}


# ----- Strategy switches -----
class _Choice(str, Enum):
    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        for member in cls:
            if str(value).lower() in (member.name.lower(), member.value.lower()):
                return member
        names = ", ".join(m.name.lower() for m in cls)
        raise ValueError(f"Unknown {cls.__name__}: {value!r} (expected one of {names})")


class Mode(_Choice):
    NORMAL = "Normal"      # hard walls
    INFINITE = "Infinite"  # edges wrap


class ScoringFormula(_Choice):
    A = "A"  # +1 per food, level from score
    B = "B"  # +level per food, level from foods eaten


class GrowthRule(_Choice):
    IMMEDIATE = "immediate"  # length +1 on the eating tick
    DIGEST = "digest"        # length +1 when the fed segment reaches the tail


# ----- Tunables -----
MIN_SIZE = 4
BASE_DELAY_MS = 250
FOODS_PER_LEVEL = 5

@dataclass(frozen=True)
class Config:
    size: int = 15
    mode: Mode = Mode.NORMAL
    scoring: ScoringFormula = ScoringFormula.A
    growth: GrowthRule = GrowthRule.IMMEDIATE
    seed: Optional[int] = None
    base_delay_ms: int = BASE_DELAY_MS
    foods_per_level: int = FOODS_PER_LEVEL

    def __post_init__(self):
        # Accept plain strings from the command line
        object.__setattr__(self, "mode", Mode.parse(self.mode))
        object.__setattr__(self, "scoring", ScoringFormula.parse(self.scoring))
        object.__setattr__(self, "growth", GrowthRule.parse(self.growth))
        if not isinstance(self.size, int) or self.size < MIN_SIZE:
            raise ValueError(f"Board size must be an int >= {MIN_SIZE}, got {self.size!r}")
        if self.base_delay_ms <= 0:
            raise ValueError(f"base_delay_ms must be positive, got {self.base_delay_ms}")
        if self.foods_per_level <= 0:
            raise ValueError(f"foods_per_level must be positive, got {self.foods_per_level}")

CFG = Config()
