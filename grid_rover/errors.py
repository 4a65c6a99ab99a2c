from __future__ import annotations


class RoverError(Exception):
    """Base class for errors raised by grid_rover."""


class RoverDidNotLand(RoverError):
    """Raised when commands are sent to a rover that has not landed yet."""

    def __init__(self, message: str = "Rover did not land") -> None:
        super().__init__(message)


class ConfigError(RoverError, ValueError):
    """Malformed rover, sensor or map configuration."""
