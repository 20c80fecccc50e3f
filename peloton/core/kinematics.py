"""Named physics quantities built on :class:`Vector2D`.

x is the direction of the race, y is perpendicular to it.
"""

from __future__ import annotations

from dataclasses import dataclass

from peloton.core.vector import Vector2D


@dataclass(frozen=True)
class Position(Vector2D):
    """Location of a rider in metres."""

    @classmethod
    def zero(cls) -> Position:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Velocity(Vector2D):
    """Velocity in m/s."""

    @classmethod
    def zero(cls) -> Velocity:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Force(Vector2D):
    """Force in newtons.  Computed per tick and never stored."""
