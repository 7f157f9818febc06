# levels.py
"""
Level and tick-speed formulas.

Level and delay are never stored: they are recomputed from the score and
food counters, which only ever grow during one game, so the level never
drops and the delay never rises.
"""
import math

from .config import BASE_DELAY_MS, FOODS_PER_LEVEL, ScoringFormula


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def level_for(formula: ScoringFormula, score: int, food_eaten: int,
              per_level: int = FOODS_PER_LEVEL) -> int:
    if formula is ScoringFormula.A:
        return score // per_level + 1
    return food_eaten // per_level + 1

def delay_for(formula: ScoringFormula, level: int, base_ms: int = BASE_DELAY_MS) -> int:
    if formula is ScoringFormula.A:
        return round_half_up(base_ms / level)
    return round_half_up(base_ms / (1 + level * 0.2))

def points_for_food(formula: ScoringFormula, level: int) -> int:
    """Score gained for one food eaten at the given level."""
    if formula is ScoringFormula.A:
        return 1
    return level
