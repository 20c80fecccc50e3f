"""Ambient wind model."""

from __future__ import annotations

import math
from dataclasses import dataclass

from peloton.core.kinematics import Velocity


@dataclass(frozen=True)
class Wind:
    """Constant wind shared read-only by every rider in a simulation.

    Attributes:
        velocity: Air velocity in m/s.  A negative x component is a
            headwind for riders travelling in +x.
    """

    velocity: Velocity

    def __post_init__(self) -> None:
        """Validate wind components."""
        if not (math.isfinite(self.velocity.x) and math.isfinite(self.velocity.y)):
            raise ValueError("wind velocity components must be finite.")

    @classmethod
    def calm(cls) -> Wind:
        """Return still air."""
        return cls(Velocity.zero())
