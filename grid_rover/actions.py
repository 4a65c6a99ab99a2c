"""
Rover actions.

Every action is a stateless operation mapping a starting Position to either
a new Position or an ``Unsafe`` result. Actions work on copies: the
position handed to ``execute`` is never modified, so the caller decides
whether to commit the outcome.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from .position import Coordinates, Position
from .sensors import Sensor, all_safe


@dataclass(frozen=True)
class Unsafe:
    """Result of a move whose candidate field was rejected by a sensor."""

    candidate: Coordinates


ActionResult = Union[Position, Unsafe]


class Action(ABC):
    """Something the rover can be programmed to do for one command symbol."""

    @abstractmethod
    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        """Return the resulting position, or ``Unsafe`` if the move was refused."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Rotations
# ---------------------------------------------------------------------------


class RotateRight(Action):
    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        p = position.copy()
        p.rotate_90cw()
        return p


class RotateLeft(Action):
    """Counter-clockwise turn, performed as three clockwise turns."""

    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        p = position.copy()
        p.rotate_90cw()
        p.rotate_90cw()
        p.rotate_90cw()
        return p


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------


def _checked(candidate: Position, sensors: Sequence[Sensor]) -> ActionResult:
    if not all_safe(candidate, sensors):
        return Unsafe(candidate.coordinates)
    return candidate


class MoveForward(Action):
    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        candidate = position.copy()
        candidate.advance()
        return _checked(candidate, sensors)


class MoveBackward(Action):
    """Step one cell against the heading; the heading itself is kept."""

    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        candidate = position.copy()
        candidate.rotate_90cw()
        candidate.rotate_90cw()
        candidate.advance()
        candidate.rotate_90cw()
        candidate.rotate_90cw()
        return _checked(candidate, sensors)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class Compose(Action):
    """Run sub-actions in order, stopping at the first ``Unsafe``.

    On failure the ``Unsafe`` result is returned and any progress made by
    earlier sub-actions is discarded along with it.
    """

    def __init__(self, actions: Iterable[Action]) -> None:
        self.actions: Tuple[Action, ...] = tuple(actions)
        for action in self.actions:
            if not isinstance(action, Action):
                raise TypeError(f"Compose expects Action instances, got {action!r}")

    def execute(self, position: Position, sensors: Sequence[Sensor]) -> ActionResult:
        current = position
        for action in self.actions:
            result = action.execute(current, sensors)
            if isinstance(result, Unsafe):
                return result
            current = result
        return current.copy() if current is position else current

    def __repr__(self) -> str:
        inner = ", ".join(repr(a) for a in self.actions)
        return f"Compose([{inner}])"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def move_forward() -> MoveForward:
    return MoveForward()


def move_backward() -> MoveBackward:
    return MoveBackward()


def rotate_left() -> RotateLeft:
    return RotateLeft()


def rotate_right() -> RotateRight:
    return RotateRight()


def compose(actions: Iterable[Action]) -> Compose:
    return Compose(actions)
