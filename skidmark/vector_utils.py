#!/usr/bin/env python3
"""
Vector helpers for 2D operations.

Screen conventions apply everywhere: x grows to the right, y grows downward,
so a positive rotation angle turns a point clockwise on screen.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector. Every operation returns a new instance."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> "Vec2":
        return Vec2(self.x * s, self.y * s)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def rotate(self, origin: "Vec2", angle: float) -> "Vec2":
        """
        Rotate this point by `angle` radians about `origin`.

        Used with origin=Vec2() to turn body-local vectors into world space,
        and with origin=body position to place points on the rotated body.
        """
        x = self.x - origin.x
        y = self.y - origin.y

        cos = math.cos(angle)
        sin = math.sin(angle)

        return Vec2(
            x * cos - y * sin + origin.x,
            x * sin + y * cos + origin.y,
        )

    def as_tuple(self):
        return (self.x, self.y)


ZERO = Vec2()
