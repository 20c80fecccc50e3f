"""Two-dimensional vector arithmetic shared by every physics value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

import numpy as np

EPSILON: float = float(np.finfo(np.float64).eps)

_V = TypeVar("_V", bound="Vector2D")


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2-D vector.

    Every operation returns a new instance of the *receiver's* type, so a
    ``Velocity`` scaled by a scalar is still a ``Velocity``.

    Attributes:
        x: Component along the race direction.
        y: Component perpendicular to the race direction.
    """

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Euclidean norm; 0.0 for the zero vector."""
        return math.sqrt(self.x**2 + self.y**2)

    def unit(self: _V) -> _V:
        """Return the normalised vector.

        Vectors shorter than machine epsilon map to the zero vector so
        that direction computations never divide by zero.
        """
        mag = self.magnitude()
        if mag < EPSILON:
            return type(self)(0.0, 0.0)
        return self.scale(1.0 / mag)

    def scale(self: _V, scalar: float) -> _V:
        return type(self)(self.x * scalar, self.y * scalar)

    def add(self: _V, other: Vector2D) -> _V:
        return type(self)(self.x + other.x, self.y + other.y)

    def sub(self: _V, other: Vector2D) -> _V:
        return type(self)(self.x - other.x, self.y - other.y)

    def __add__(self: _V, other: Vector2D) -> _V:
        return self.add(other)

    def __sub__(self: _V, other: Vector2D) -> _V:
        return self.sub(other)

    def __mul__(self: _V, scalar: float) -> _V:
        return self.scale(scalar)

    def __rmul__(self: _V, scalar: float) -> _V:
        return self.scale(scalar)

    def __neg__(self: _V) -> _V:
        return self.scale(-1.0)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
