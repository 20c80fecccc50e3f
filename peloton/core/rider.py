"""Rider model for the peloton simulation engine.

A rider is the combined "system" of athlete, kit and bicycle.  Physical
parameters are fixed at creation; position and velocity are the only
mutable state and are advanced exclusively by the simulation tick.
"""

from __future__ import annotations

import itertools
import math

from peloton.core.kinematics import Position, Velocity


class Rider:
    """A single rider.

    Attributes:
        rider_id: Identifier unique within the owning simulation.
        position: Current position in metres.
        velocity: Current velocity in m/s.
        power: Sustained power output in watts (> 0, read-only).
        cda: Drag area coefficient in m^2 (>= 0, read-only).
        mass: Combined rider and bicycle mass in kg (> 0, read-only).
    """

    __slots__ = (
        "rider_id",
        "position",
        "velocity",
        "_power",
        "_cda",
        "_mass",
        "_owned",
    )

    def __init__(self, rider_id: int, power: float, cda: float, mass: float) -> None:
        if not math.isfinite(power) or power <= 0.0:
            raise ValueError("power must be > 0.")
        if not math.isfinite(cda) or cda < 0.0:
            raise ValueError("cda must be >= 0.")
        if not math.isfinite(mass) or mass <= 0.0:
            raise ValueError("mass must be > 0.")
        self.rider_id: int = rider_id
        self.position: Position = Position.zero()
        self.velocity: Velocity = Velocity.zero()
        self._power: float = float(power)
        self._cda: float = float(cda)
        self._mass: float = float(mass)
        self._owned: bool = False

    @property
    def power(self) -> float:
        return self._power

    @property
    def cda(self) -> float:
        return self._cda

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def speed(self) -> float:
        """Magnitude of the current velocity in m/s."""
        return self.velocity.magnitude()

    @property
    def owned(self) -> bool:
        """Whether a simulation has taken ownership of this rider."""
        return self._owned

    def claim(self) -> None:
        """Mark the rider as owned by a simulation.

        Raises:
            ValueError: If another simulation already owns the rider.
        """
        if self._owned:
            raise ValueError(f"Rider {self.rider_id} already belongs to a simulation.")
        self._owned = True

    def __repr__(self) -> str:
        return (
            f"Rider(rider_id={self.rider_id}, power={self._power}, "
            f"cda={self._cda}, mass={self._mass})"
        )


class RiderFactory:
    """Creates riders with monotonically increasing ids.

    The counter lives on the factory instance, so two factories never
    share state and tests can build riders deterministically.
    """

    __slots__ = ("_ids",)

    def __init__(self, start_id: int = 1) -> None:
        self._ids = itertools.count(start_id)

    def create(self, power: float, cda: float, mass: float) -> Rider:
        """Return a new rider at rest at the origin."""
        rider_id = next(self._ids)
        return Rider(rider_id, power=power, cda=cda, mass=mass)
