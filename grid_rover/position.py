from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, TYPE_CHECKING

from .directions import Direction, direction_name, move_vector, next_direction

if TYPE_CHECKING:
    from .sensors import Sensor


@dataclass(frozen=True)
class Coordinates:
    """Integer cell on the unbounded grid.

    Attributes
    ----------
    x : int
        Column, increasing towards EAST.
    y : int
        Row, increasing towards NORTH.
    """

    x: int
    y: int

    def __add__(self, other: "Coordinates") -> "Coordinates":
        if not isinstance(other, Coordinates):
            return NotImplemented
        return Coordinates(self.x + other.x, self.y + other.y)

    def is_safe(self, sensor: "Sensor") -> bool:
        return bool(sensor.is_safe(self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Position:
    """Coordinates together with a heading.

    Positions are mutated in place by ``rotate_90cw`` and ``advance``;
    callers that need the unmodified value take a ``copy()`` first.
    """

    __slots__ = ("coordinates", "direction")

    def __init__(self, coordinates: Coordinates, direction: Direction) -> None:
        self.coordinates = coordinates
        self.direction = Direction(direction)

    # ------------------------------------------------------------------
    # Motion primitives
    # ------------------------------------------------------------------
    def rotate_90cw(self) -> None:
        self.direction = next_direction(self.direction)

    def advance(self) -> None:
        dx, dy = move_vector(self.direction)
        self.coordinates = self.coordinates + Coordinates(dx, dy)

    def is_safe_under(self, sensor: "Sensor") -> bool:
        return self.coordinates.is_safe(sensor)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def copy(self) -> "Position":
        return Position(self.coordinates, self.direction)

    @property
    def x(self) -> int:
        return self.coordinates.x

    @property
    def y(self) -> int:
        return self.coordinates.y

    def to_dict(self) -> Dict[str, Any]:
        """Serialize position for telemetry."""
        return {
            "x": self.coordinates.x,
            "y": self.coordinates.y,
            "heading": direction_name(self.direction),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.coordinates == other.coordinates
            and self.direction == other.direction
        )

    def __repr__(self) -> str:
        return f"Position({self.coordinates!r}, {self.direction.name})"

    def __str__(self) -> str:
        return f"{self.coordinates} {direction_name(self.direction)}"
