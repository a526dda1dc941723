"""Two-dimensional vector used for positions, velocities and gravity."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2D:
    """A mutable 2D vector with the usual arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2D:
        """Scale the vector to unit length in place and return it.

        A zero vector is left unchanged.
        """
        size = self.length()
        if size > 0:
            self.x /= size
            self.y /= size
        return self