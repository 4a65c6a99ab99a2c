from __future__ import annotations

from enum import IntEnum
from typing import Tuple


class Direction(IntEnum):
    """Cardinal heading of the rover, ordered clockwise."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


DIRECTIONS_NO = 4

# Indexed by Direction ordinal.
_DIRECTION_MOVE: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
_DIRECTION_NAME: Tuple[str, ...] = ("NORTH", "EAST", "SOUTH", "WEST")


def next_direction(direction: Direction) -> Direction:
    """Heading after one 90 degree clockwise turn."""
    return Direction((int(direction) + 1) % DIRECTIONS_NO)


def move_vector(direction: Direction) -> Tuple[int, int]:
    """Unit (dx, dy) step for the given heading."""
    return _DIRECTION_MOVE[int(direction)]


def direction_name(direction: Direction) -> str:
    return _DIRECTION_NAME[int(direction)]


def parse_direction(text: str) -> Direction:
    """Parse a heading name such as ``"east"`` or ``"WEST"``."""
    key = str(text).strip().upper()
    if key not in _DIRECTION_NAME:
        raise ValueError(f"Unknown heading: {text!r}")
    return Direction(_DIRECTION_NAME.index(key))
