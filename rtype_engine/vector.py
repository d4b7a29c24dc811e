"""Two-dimensional vectors and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    x: float = 0
    y: float = 0

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / size, self.y / size)

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    def is_colliding(self, position: Vector2, other: Rect, other_position: Vector2) -> bool:
        """Whether this rect at ``position`` overlaps ``other`` at ``other_position``."""
        a_left = self.left + position.x
        a_top = self.top + position.y
        b_left = other.left + other_position.x
        b_top = other.top + other_position.y
        return (
            a_left < b_left + other.width
            and b_left < a_left + self.width
            and a_top < b_top + other.height
            and b_top < a_top + self.height
        )