from __future__ import annotations

import pytest

from grid_rover.directions import (
    Direction,
    direction_name,
    move_vector,
    next_direction,
    parse_direction,
)


def test_next_direction_is_clockwise() -> None:
    assert next_direction(Direction.NORTH) == Direction.EAST
    assert next_direction(Direction.EAST) == Direction.SOUTH
    assert next_direction(Direction.SOUTH) == Direction.WEST
    assert next_direction(Direction.WEST) == Direction.NORTH


@pytest.mark.parametrize("direction", list(Direction))
def test_four_turns_return_to_start(direction: Direction) -> None:
    d = direction
    for _ in range(4):
        d = next_direction(d)
    assert d == direction


def test_move_vectors_and_names() -> None:
    assert move_vector(Direction.NORTH) == (0, 1)
    assert move_vector(Direction.EAST) == (1, 0)
    assert move_vector(Direction.SOUTH) == (0, -1)
    assert move_vector(Direction.WEST) == (-1, 0)
    assert [direction_name(d) for d in Direction] == ["NORTH", "EAST", "SOUTH", "WEST"]


def test_parse_direction_is_case_insensitive() -> None:
    assert parse_direction("east") == Direction.EAST
    assert parse_direction(" West ") == Direction.WEST
    with pytest.raises(ValueError):
        parse_direction("UP")
