from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from .position import Position


class Sensor(ABC):
    """Field safety oracle consulted before the rover commits a move.

    Implementations must be pure predicates: the rover may query them any
    number of times for the same cell.
    """

    @abstractmethod
    def is_safe(self, x: int, y: int) -> bool:
        """Return True if the cell (x, y) may be occupied."""


def all_safe(position: Position, sensors: Sequence[Sensor]) -> bool:
    """A field is safe only if every sensor agrees."""
    for sensor in sensors:
        if not position.is_safe_under(sensor):
            return False
    return True


class AlwaysSafeSensor(Sensor):
    def is_safe(self, x: int, y: int) -> bool:
        return True


class AlwaysUnsafeSensor(Sensor):
    def is_safe(self, x: int, y: int) -> bool:
        return False


class FunctionSensor(Sensor):
    """Adapt a plain ``(x, y) -> bool`` callable to the Sensor interface."""

    def __init__(self, predicate: Callable[[int, int], bool]) -> None:
        self.predicate = predicate

    def is_safe(self, x: int, y: int) -> bool:
        return bool(self.predicate(x, y))


class BoundarySensor(Sensor):
    """Geofence: cells inside the inclusive rectangle [xmin,ymin]-[xmax,ymax] are safe."""

    def __init__(self, xmin: int, ymin: int, xmax: int, ymax: int) -> None:
        if xmin > xmax or ymin > ymax:
            raise ValueError(
                f"Empty boundary: ({xmin}, {ymin}) - ({xmax}, {ymax})"
            )
        self.xmin = int(xmin)
        self.ymin = int(ymin)
        self.xmax = int(xmax)
        self.ymax = int(ymax)

    def is_safe(self, x: int, y: int) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax
