"""
Command-driven rover on an unbounded 2D grid.

Components:
- directions: cardinal headings, movement vectors and rotation order
- position: integer coordinates and heading
- sensors: field safety oracles consulted before every move
- world: numpy-backed hazard maps loaded from JSON
- actions: rotate, move and composite actions
- rover: command table, rover state machine and builder
- config: YAML rover configuration
"""

from .actions import (
    Action,
    Compose,
    MoveBackward,
    MoveForward,
    RotateLeft,
    RotateRight,
    Unsafe,
    compose,
    move_backward,
    move_forward,
    rotate_left,
    rotate_right,
)
from .directions import Direction
from .errors import ConfigError, RoverDidNotLand, RoverError
from .position import Coordinates, Position
from .rover import ExecutionReport, Rover, RoverBuilder
from .sensors import AlwaysSafeSensor, AlwaysUnsafeSensor, BoundarySensor, FunctionSensor, Sensor
from .world import HazardMap, HazardMapSensor, Obstacle

__all__ = [
    "Action",
    "Compose",
    "MoveBackward",
    "MoveForward",
    "RotateLeft",
    "RotateRight",
    "Unsafe",
    "compose",
    "move_backward",
    "move_forward",
    "rotate_left",
    "rotate_right",
    "Direction",
    "ConfigError",
    "RoverDidNotLand",
    "RoverError",
    "Coordinates",
    "Position",
    "ExecutionReport",
    "Rover",
    "RoverBuilder",
    "AlwaysSafeSensor",
    "AlwaysUnsafeSensor",
    "BoundarySensor",
    "FunctionSensor",
    "Sensor",
    "HazardMap",
    "HazardMapSensor",
    "Obstacle",
]
