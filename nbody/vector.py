#!/usr/bin/env python3
"""
2D vector type used throughout the simulator.

Vector2D is an immutable value: arithmetic returns new vectors, so compound
assignment (``a += b``) simply rebinds the name. Equality is exact float equality.
"""
import math
from dataclasses import dataclass
from typing import Iterator


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


@dataclass(frozen=True)
class Vector2D:
    """
    A 2D vector of floats.

    Division by a zero scalar raises ZeroDivisionError; every other operation is total.
    normalized() of the zero vector returns the zero vector instead of raising.
    """
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> "Vector2D":
        return Vector2D(0.0, 0.0)

    @staticmethod
    def lerp(a: "Vector2D", b: "Vector2D", t: float) -> "Vector2D":
        """Linear interpolation a + (b - a) * t; t is not clamped."""
        return a + (b - a) * t

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> "Vector2D":
        return Vector2D(self.x * s, self.y * s)

    def __rmul__(self, s: float) -> "Vector2D":
        return self.__mul__(s)

    def __truediv__(self, s: float) -> "Vector2D":
        if s == 0:
            raise ZeroDivisionError("vector division by zero")
        return Vector2D(self.x / s, self.y / s)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        """Allow tuple unpacking: x, y = v"""
        return iter((self.x, self.y))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> "Vector2D":
        l = self.magnitude()
        if l == 0:
            return Vector2D.zero()
        return Vector2D(self.x / l, self.y / l)

    def perpendicular(self) -> "Vector2D":
        """Counter-clockwise perpendicular (-y, x)."""
        return Vector2D(-self.y, self.x)

    def angle(self) -> float:
        """Angle from the +x axis in radians, in [-pi, pi]."""
        return math.atan2(self.y, self.x)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: "Vector2D") -> float:
        return (other - self).magnitude()

    def rotated(self, angle: float) -> "Vector2D":
        """Return a copy rotated ``angle`` radians counter-clockwise."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector2D(self.x * c - self.y * s, self.x * s + self.y * c)

    def component_mul(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x * other.x, self.y * other.y)

    def component_div(self, other: "Vector2D") -> "Vector2D":
        if other.x == 0 or other.y == 0:
            raise ZeroDivisionError("component-wise division by a zero component")
        return Vector2D(self.x / other.x, self.y / other.y)
