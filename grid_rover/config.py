"""
YAML configuration for building rovers.

A config file has a ``rover`` section with ``commands`` (symbol -> action
spec) and ``sensors`` (list of sensor specs), an optional ``landing``
section and an optional ``logging`` section. Action specs are action names
or lists of action specs (composites).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple
import os

import yaml

from .actions import Action, compose, move_backward, move_forward, rotate_left, rotate_right
from .directions import Direction, parse_direction
from .errors import ConfigError
from .position import Coordinates
from .rover import Rover, RoverBuilder
from .sensors import AlwaysSafeSensor, AlwaysUnsafeSensor, BoundarySensor, Sensor
from .world import HazardMap, HazardMapSensor

ACTION_FACTORIES: Dict[str, Callable[[], Action]] = {
    "forward": move_forward,
    "backward": move_backward,
    "left": rotate_left,
    "right": rotate_right,
}


def load_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping")
    return data


def action_from_spec(spec: Any) -> Action:
    """Build an action from ``"forward"`` style names or nested lists of them."""
    if isinstance(spec, str):
        factory = ACTION_FACTORIES.get(spec.strip().lower())
        if factory is None:
            raise ConfigError(
                f"Unknown action {spec!r}; expected one of {sorted(ACTION_FACTORIES)}"
            )
        return factory()
    if isinstance(spec, (list, tuple)):
        return compose([action_from_spec(s) for s in spec])
    raise ConfigError(f"Action spec must be a name or a list, got {spec!r}")


def sensor_from_spec(spec: Dict[str, Any], base_dir: str = ".") -> Sensor:
    if not isinstance(spec, dict) or "type" not in spec:
        raise ConfigError(f"Sensor spec must be a mapping with a 'type', got {spec!r}")
    kind = str(spec["type"]).strip().lower()

    if kind == "always_safe":
        return AlwaysSafeSensor()
    if kind == "always_unsafe":
        return AlwaysUnsafeSensor()
    if kind == "boundary":
        try:
            return BoundarySensor(
                xmin=int(spec["xmin"]),
                ymin=int(spec["ymin"]),
                xmax=int(spec["xmax"]),
                ymax=int(spec["ymax"]),
            )
        except KeyError as exc:
            raise ConfigError(f"Boundary sensor is missing {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise ConfigError(str(exc)) from exc
    if kind == "hazard_map":
        if "path" not in spec:
            raise ConfigError("Hazard map sensor requires a 'path'")
        path = os.path.join(base_dir, str(spec["path"]))
        return HazardMapSensor(HazardMap.from_map_file(path))

    raise ConfigError(f"Unknown sensor type {spec['type']!r}")


def config_section(cfg: Dict[str, Any], key: str, kind: type) -> Any:
    """Return ``cfg[key]``, an empty ``kind`` if unset, or raise if it has the wrong shape."""
    value = cfg.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ConfigError(
            f"'{key}' must be a {'mapping' if kind is dict else 'list'}, got {value!r}"
        )
    return value


def builder_from_config(cfg: Dict[str, Any], base_dir: str = ".") -> RoverBuilder:
    rover_cfg = config_section(cfg, "rover", dict)
    commands_cfg = config_section(rover_cfg, "commands", dict)
    sensors_cfg = config_section(rover_cfg, "sensors", list)

    builder = RoverBuilder()
    for name, spec in commands_cfg.items():
        # YAML reads bare digits such as 1 as ints.
        if not isinstance(name, str) or len(name) != 1:
            raise ConfigError(f"Command name must be a single character, got {name!r}")
        builder.program_command(name, action_from_spec(spec))
    for spec in sensors_cfg:
        builder.add_sensor(sensor_from_spec(spec, base_dir))
    return builder


def landing_from_config(cfg: Dict[str, Any]) -> Optional[Tuple[Coordinates, Direction]]:
    """Return the configured landing site, or None if there is none."""
    landing_cfg = config_section(cfg, "landing", dict)
    if not landing_cfg:
        return None
    try:
        coordinates = Coordinates(int(landing_cfg["x"]), int(landing_cfg["y"]))
        direction = parse_direction(landing_cfg["heading"])
    except KeyError as exc:
        raise ConfigError(f"Landing is missing {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid landing: {exc}") from exc
    return coordinates, direction


def load_rover(path: str) -> Rover:
    """Build an unlanded rover from a YAML config file."""
    cfg = load_yaml(path)
    base_dir = os.path.dirname(os.path.abspath(path))
    return builder_from_config(cfg, base_dir).build()
