"""Immutable 2D vector used by the missile simulation."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """2D vector value type in scene units (screen axes, y grows downward)."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> "Vector2":
        """Unit vector obtained by rotating ``(1, 0)`` by ``angle`` radians."""

        return cls(math.cos(angle), math.sin(angle))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        length = self.length()
        if length == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def distance(self, other: "Vector2") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def rotate(self, angle: float) -> "Vector2":
        """Rotate counter-clockwise in math axes (clockwise on screen)."""

        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


__all__ = ["Vector2"]
