# vector2.py

import math


class Vector2:
    """
    Minimal mutable 2D vector used for particle kinematics and emitter origins.

    Operations mutate in place and return self so they can be chained,
    e.g. ``Vector2(vx, vy).mult(speed)``.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def add(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def mult(self, scalar: float) -> "Vector2":
        self.x *= scalar
        self.y *= scalar
        return self

    def set(self, x: float, y: float) -> "Vector2":
        self.x = float(x)
        self.y = float(y)
        return self

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vector2({self.x}, {self.y})"
