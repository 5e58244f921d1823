"""Data models for the duel scene and the missile simulation."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from .vector import Vector2


@dataclass(frozen=True)
class Planet:
    """Static gravitating body. Radius uses the same units as position."""

    position: Vector2
    radius: float


@dataclass(frozen=True)
class FieldBounds:
    """Playable rectangle ``[0, width] x [0, height]``."""

    width: float
    height: float

    def contains(self, position: Vector2) -> bool:
        return 0.0 < position.x < self.width and 0.0 < position.y < self.height

    def size(self) -> tuple[int, int]:
        return int(self.width), int(self.height)


@dataclass(frozen=True)
class LaunchState:
    position: Vector2
    angle: float


class TerminationReason(Enum):
    OUT_OF_RANGE = "out of range"
    OUT_OF_FUEL = "out of fuel"
    HIT_PLANET = "hit planet"
    HIT_ENEMY = "hit enemy"

    def __str__(self) -> str:
        return self.value


class Trajectory(NamedTuple):
    """Result of one simulation run; unpacks as ``(path, reason)``."""

    path: tuple[Vector2, ...]
    reason: TerminationReason

    @property
    def end(self) -> Vector2:
        return self.path[-1]


@dataclass
class Ship:
    """Player ship as seen by the scene and the renderer.

    ``x_size`` is signed so the barrel points toward the opponent at angle 0.
    """

    position: Vector2
    angle: float
    x_size: float
    y_size: float
    color: tuple[int, int, int]
    min_angle: float = -math.pi
    max_angle: float = math.pi

    def rotate(self, delta: float) -> None:
        self.angle = max(self.min_angle, min(self.max_angle, self.angle + delta))

    def launch_state(self) -> LaunchState:
        return LaunchState(position=self.position, angle=self.angle)


@dataclass
class Scene:
    """Mutable scene state owned by the application loop."""

    bounds: FieldBounds
    planets: tuple[Planet, ...]
    ships: list[Ship] = field(default_factory=list)

    def opponent_of(self, index: int) -> Ship:
        if len(self.ships) != 2:
            raise ValueError(f"a duel needs exactly two ships, got {len(self.ships)}")
        if index not in (0, 1):
            raise IndexError(f"ship index must be 0 or 1, got {index}")
        return self.ships[1 - index]


__all__ = [
    "FieldBounds",
    "LaunchState",
    "Planet",
    "Scene",
    "Ship",
    "TerminationReason",
    "Trajectory",
]
