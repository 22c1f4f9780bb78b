"""Plain 2D geometry types: vectors, integer points and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(slots=True)
class Vector2:
    """A mutable two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vector2:
        """Return a unit vector with the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        inv = 1.0 / self.length()
        return Vector2(self.x * inv, self.y * inv)

    def dot(self, other: Vector2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the cross product with another vector."""
        return self.x * other.y - self.y * other.x

    def rotated(self, angle: float) -> Vector2:
        """Return the vector rotated by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, Number]) -> Vector2:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, scalar: Number) -> Vector2:
        if isinstance(scalar, (int, float)):
            return Vector2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass(slots=True)
class Point:
    """An integer screen coordinate."""

    x: int = 0
    y: int = 0


@dataclass(slots=True)
class Rect:
    """An integer rectangle given by its edges."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        """Horizontal extent, right minus left."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Vertical extent, bottom minus top."""
        return self.bottom - self.top