from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .actions import Action, Unsafe
from .directions import Direction
from .errors import RoverDidNotLand
from .position import Coordinates, Position
from .sensors import Sensor

HALT_UNKNOWN_COMMAND = "unknown_command"
HALT_UNSAFE_FIELD = "unsafe_field"


@dataclass(frozen=True)
class ExecutionReport:
    """Outcome of one ``Rover.execute`` call.

    Attributes
    ----------
    commands : str
        The command string that was submitted.
    consumed : int
        Number of symbols whose action was applied.
    halt_reason : str or None
        ``"unknown_command"``, ``"unsafe_field"`` or None if every symbol ran.
    halt_symbol : str or None
        The symbol processing stopped at.
    """

    commands: str
    consumed: int
    halt_reason: Optional[str] = None
    halt_symbol: Optional[str] = None

    @property
    def stopped(self) -> bool:
        return self.halt_reason is not None


class Rover:
    """Grid rover driven by programmed single-character commands.

    The command table and sensors are fixed at construction; use
    ``RoverBuilder`` to assemble them.
    """

    def __init__(self, commands: Mapping[str, Action], sensors: Iterable[Sensor]) -> None:
        self._commands: Mapping[str, Action] = MappingProxyType(dict(commands))
        self._sensors: Tuple[Sensor, ...] = tuple(sensors)

        self._landed = False
        self._stopped = False
        # Meaningless until the rover lands.
        self._position = Position(Coordinates(0, 0), Direction.NORTH)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def landed(self) -> bool:
        return self._landed

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def position(self) -> Optional[Position]:
        """A copy of the current position, or None before landing."""
        if not self._landed:
            return None
        return self._position.copy()

    @property
    def commands(self) -> Mapping[str, Action]:
        return self._commands

    @property
    def sensors(self) -> Tuple[Sensor, ...]:
        return self._sensors

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def land(self, coordinates: Coordinates, direction: Direction) -> None:
        """Place the rover. The landing site is not checked by the sensors."""
        self._position = Position(coordinates, direction)
        self._landed = True
        self._stopped = False

    def execute(self, command_list: str) -> ExecutionReport:
        """Run each command symbol in order.

        Processing halts, leaving the rover ``stopped``, at the first symbol
        that is not programmed or whose action would enter an unsafe field.
        The position is then the one reached after the last successful
        symbol.
        """
        if not self._landed:
            raise RoverDidNotLand()

        self._stopped = False
        consumed = 0
        for command in command_list:
            action = self._commands.get(command)
            if action is None:
                self._stopped = True
                return ExecutionReport(command_list, consumed, HALT_UNKNOWN_COMMAND, command)

            result = action.execute(self._position, self._sensors)
            if isinstance(result, Unsafe):
                self._stopped = True
                return ExecutionReport(command_list, consumed, HALT_UNSAFE_FIELD, command)

            self._position = result
            consumed += 1

        return ExecutionReport(command_list, consumed)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Serialize rover state for telemetry."""
        state: Dict[str, Any] = {
            "landed": self._landed,
            "stopped": self._stopped,
            "x": None,
            "y": None,
            "heading": None,
        }
        if self._landed:
            state.update(self._position.to_dict())
        return state

    def __str__(self) -> str:
        if not self._landed:
            return "unknown"
        text = str(self._position)
        if self._stopped:
            text += " stopped"
        return text

    def __repr__(self) -> str:
        return f"<Rover {self}>"


class RoverBuilder:
    """Collects command bindings and sensors, then produces a Rover.

    Methods return the builder so calls can be chained::

        rover = (
            RoverBuilder()
            .program_command("F", move_forward())
            .add_sensor(AlwaysSafeSensor())
            .build()
        )
    """

    def __init__(self) -> None:
        self._commands: Dict[str, Action] = {}
        self._sensors: List[Sensor] = []

    def program_command(self, name: str, action: Action) -> "RoverBuilder":
        if not isinstance(name, str) or len(name) != 1:
            raise ValueError(f"Command name must be a single character, got {name!r}")
        if not isinstance(action, Action):
            raise TypeError(f"Expected an Action for command {name!r}, got {action!r}")
        self._commands[name] = action
        return self

    def add_sensor(self, sensor: Sensor) -> "RoverBuilder":
        if not callable(getattr(sensor, "is_safe", None)):
            raise TypeError(f"Sensor must provide is_safe(x, y), got {sensor!r}")
        self._sensors.append(sensor)
        return self

    def build(self) -> Rover:
        return Rover(self._commands, self._sensors)
