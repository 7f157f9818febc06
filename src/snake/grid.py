# grid.py
"""Coordinate and direction arithmetic on a 1-indexed square board."""
from typing import NamedTuple


class Coord(NamedTuple):
    row: int
    col: int


# ----- Directions (drow, dcol) -----
UP, DOWN, LEFT, RIGHT = Coord(-1, 0), Coord(1, 0), Coord(0, -1), Coord(0, 1)


def wrap(value: int, size: int) -> int:
    """Map any integer back into [1, size] (toroidal board)."""
    return ((value - 1 + size) % size) + 1

def in_bounds(value: int, size: int) -> bool:
    return 1 <= value <= size

def add(coord: Coord, direction: Coord) -> Coord:
    return Coord(coord[0] + direction[0], coord[1] + direction[1])

def is_opposite(a: Coord, b: Coord) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def wrap_coord(coord: Coord, size: int) -> Coord:
    return Coord(wrap(coord[0], size), wrap(coord[1], size))

def coord_in_bounds(coord: Coord, size: int) -> bool:
    return in_bounds(coord[0], size) and in_bounds(coord[1], size)
