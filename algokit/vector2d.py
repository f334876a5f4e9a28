"""Plane vectors and the convex hull of a point set."""

from __future__ import annotations

import math
from dataclasses import dataclass
from collections.abc import Iterable


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector."""

    x: float = 0
    y: float = 0

    def modulus(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def modulus_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def parallel(self, other: Vector2D) -> bool:
        return self.cross(other) == 0

    def rotate(self, alpha: float) -> Vector2D:
        """Rotate counter-clockwise by ``alpha`` radians."""
        c, s = math.cos(alpha), math.sin(alpha)
        return Vector2D(self.x * c - self.y * s, self.y * c + self.x * s)

    def slope(self) -> float:
        return self.y / self.x

    def alpha(self) -> float:
        """Return ``acos(cross(self, (1, 0)) / |self|)``."""
        return math.acos(self.cross(Vector2D(1, 0)) / self.modulus())

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        return self.x * other.y - self.y * other.x

    def __add__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other: object):
        """Dot product with a vector, or scaling by a number."""
        if isinstance(other, Vector2D):
            return self.dot(other)
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2D:
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.x} {self.y}"


def convex_hull(points: Iterable[Vector2D]) -> list[Vector2D]:
    """Return the hull counter-clockwise from the lowest (x, y) point, without collinear points."""
    pts = sorted(set(points), key=lambda p: (p.x, p.y))
    if len(pts) <= 2:
        return pts

    def build(sequence: Iterable[Vector2D]) -> list[Vector2D]:
        chain: list[Vector2D] = []
        for p in sequence:
            while len(chain) > 1 and (chain[-1] - chain[-2]).cross(p - chain[-1]) <= 0:
                chain.pop()
            chain.append(p)
        return chain

    lower = build(pts)
    upper = build(reversed(pts))
    return lower[:-1] + upper[:-1]