"""Two-dimensional float vector used for positions on screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2f:
    """A mutable 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2f) -> Vector2f:
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2f:
        return Vector2f(self.x * scalar, self.y * scalar)

    def dot(self, other: Vector2f) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def squared_magnitude(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def __str__(self) -> str:
        return f"{{{self.x:g}, {self.y:g}}}"