from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import json

import numpy as np

from .errors import ConfigError
from .sensors import Sensor


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned block of hazardous cells.

    Attributes
    ----------
    x : int
        Column of the bottom-left cell.
    y : int
        Row of the bottom-left cell.
    w : int
        Width in cells (>= 1).
    h : int
        Height in cells (>= 1).
    """

    x: int
    y: int
    w: int = 1
    h: int = 1

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Return inclusive (xmin, ymin, xmax, ymax)."""
        return (self.x, self.y, self.x + self.w - 1, self.y + self.h - 1)


class HazardMap:
    """Hazardous cells placed on the otherwise unbounded, safe grid.

    Obstacle rectangles are kept as an ``(N, 4)`` array of inclusive
    (xmin, ymin, xmax, ymax) bounds, so memory grows with the number of
    obstacles rather than with the area they span.
    """

    def __init__(self, obstacles: Optional[List[Obstacle]] = None) -> None:
        self.obstacles: List[Obstacle] = []
        self._bounds = np.zeros((0, 4), dtype=np.int64)
        for obstacle in obstacles or []:
            self._validate(obstacle)
            self.obstacles.append(obstacle)
        self._update_bounds()

    # ------------------------------------------------------------------
    # Map loading
    # ------------------------------------------------------------------
    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "HazardMap":
        """Create a map from ``{"obstacles": [...], "hazards": [...]}``."""
        if not isinstance(data, dict):
            raise ConfigError(f"Hazard map must be a JSON object, got {type(data).__name__}")
        try:
            obstacles = [
                Obstacle(
                    int(o["x"]),
                    int(o["y"]),
                    int(o.get("w", 1)),
                    int(o.get("h", 1)),
                )
                for o in data.get("obstacles", [])
            ]
            obstacles.extend(
                Obstacle(int(c["x"]), int(c["y"])) for c in data.get("hazards", [])
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid hazard map: {exc}") from exc
        return cls(obstacles=obstacles)

    @classmethod
    def from_map_file(cls, path: str) -> "HazardMap":
        """Create a map from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in map file {path}: {exc}") from exc
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "obstacles": [
                {"x": o.x, "y": o.y, "w": o.w, "h": o.h} for o in self.obstacles
            ],
        }

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def add_obstacle(self, obstacle: Obstacle) -> None:
        self._validate(obstacle)
        self.obstacles.append(obstacle)
        self._update_bounds()

    def clear_obstacles(self) -> None:
        self.obstacles.clear()
        self._update_bounds()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Inclusive (xmin, ymin, xmax, ymax) around all obstacles, or None if empty."""
        if len(self._bounds) == 0:
            return None
        b = self._bounds
        return (
            int(b[:, 0].min()),
            int(b[:, 1].min()),
            int(b[:, 2].max()),
            int(b[:, 3].max()),
        )

    @property
    def hazard_count(self) -> int:
        """Number of distinct hazardous cells.

        Overlaps are resolved on a grid compressed to the obstacle edges, so
        the cost depends on the obstacle count only.
        """
        if len(self._bounds) == 0:
            return 0
        b = self._bounds
        xs = np.unique(np.concatenate([b[:, 0], b[:, 2] + 1]))
        ys = np.unique(np.concatenate([b[:, 1], b[:, 3] + 1]))
        covered = np.zeros((len(ys) - 1, len(xs) - 1), dtype=bool)
        for xmin, ymin, xmax, ymax in b:
            c0, c1 = np.searchsorted(xs, [xmin, xmax + 1])
            r0, r1 = np.searchsorted(ys, [ymin, ymax + 1])
            covered[r0:r1, c0:c1] = True
        areas = np.outer(np.diff(ys), np.diff(xs))
        return int(areas[covered].sum())

    def is_hazard(self, x: int, y: int) -> bool:
        b = self._bounds
        if len(b) == 0:
            return False
        inside = (b[:, 0] <= x) & (x <= b[:, 2]) & (b[:, 1] <= y) & (y <= b[:, 3])
        return bool(np.any(inside))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    @staticmethod
    def _validate(obstacle: Obstacle) -> None:
        if obstacle.w < 1 or obstacle.h < 1:
            raise ConfigError(f"Obstacle must cover at least one cell: {obstacle}")

    def _update_bounds(self) -> None:
        if not self.obstacles:
            self._bounds = np.zeros((0, 4), dtype=np.int64)
            return
        self._bounds = np.array([o.bounds for o in self.obstacles], dtype=np.int64)


class HazardMapSensor(Sensor):
    """Sensor reporting every cell outside the hazard map's obstacles as safe."""

    def __init__(self, hazard_map: HazardMap) -> None:
        self.hazard_map = hazard_map

    def is_safe(self, x: int, y: int) -> bool:
        return not self.hazard_map.is_hazard(x, y)
