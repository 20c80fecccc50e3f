"""Deterministic force model and integration step for the peloton engine."""

from __future__ import annotations

import math

from peloton.core.kinematics import Force, Position, Velocity
from peloton.core.rider import Rider
from peloton.core.vector import Vector2D
from peloton.core.wind import Wind

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

AIR_DENSITY: float = 1.225  # kg/m^3, sea level
MIN_PROPULSION_VELOCITY: float = 1.0  # m/s floor for power / velocity

_BISECTION_ITERATIONS: int = 200

# ---------------------------------------------------------------------------
# Forces
# ---------------------------------------------------------------------------


def propulsive_force(rider: Rider) -> Force:
    """Forward force generated by the rider's power output.

    The force is ``power / v_x`` along the race direction, with ``v_x``
    floored at :data:`MIN_PROPULSION_VELOCITY`.  The floor removes the
    singularity at rest and caps the unrealistic acceleration a pure
    ``power / velocity`` model produces near zero speed.

    Args:
        rider: The rider producing power.

    Returns:
        Propulsive force with a zero lateral component.
    """
    v_x = max(rider.velocity.x, MIN_PROPULSION_VELOCITY)
    return Force(rider.power / v_x, 0.0)


def drag_force(rider: Rider, wind: Wind) -> Force:
    """Aerodynamic drag acting on the rider.

    Drag depends on the velocity relative to the air:

        relative  = rider.velocity - wind.velocity
        magnitude = 0.5 * cda * AIR_DENSITY * |relative|^2

    and always opposes the relative airflow.  When the relative velocity
    is (near) zero the unit vector collapses to zero and so does drag.

    Args:
        rider: The rider moving through the air.
        wind: Ambient wind.

    Returns:
        Drag force vector.
    """
    relative = rider.velocity.sub(wind.velocity)
    drag_magnitude = 0.5 * rider.cda * AIR_DENSITY * relative.magnitude() ** 2
    direction = relative.unit()
    return Force(-drag_magnitude * direction.x, -drag_magnitude * direction.y)


def net_force(rider: Rider, wind: Wind) -> Force:
    """Vector sum of propulsive and drag forces."""
    return propulsive_force(rider).add(drag_force(rider, wind))


def acceleration(rider: Rider, wind: Wind) -> Vector2D:
    """Acceleration in m/s^2 produced by the net force."""
    force = net_force(rider, wind)
    return Vector2D(force.x / rider.mass, force.y / rider.mass)


# ---------------------------------------------------------------------------
# Integration
# ---------------------------------------------------------------------------


def update_rider_velocity(rider: Rider, dt: float, wind: Wind) -> None:
    """Advance the rider's velocity by one explicit Euler step.

    Forces are evaluated from the velocity *before* the update.
    """
    accel = acceleration(rider, wind)
    rider.velocity = Velocity(
        rider.velocity.x + accel.x * dt,
        rider.velocity.y + accel.y * dt,
    )


def update_rider_position(rider: Rider, dt: float) -> None:
    """Advance the rider's position using its current velocity."""
    rider.position = Position(
        rider.position.x + rider.velocity.x * dt,
        rider.position.y + rider.velocity.y * dt,
    )


def advance_rider(rider: Rider, dt: float, wind: Wind) -> None:
    """Apply one semi-implicit Euler step: velocity first, then position.

    The position update uses the freshly updated velocity.  Swapping the
    order changes the numerical results.
    """
    update_rider_velocity(rider, dt, wind)
    update_rider_position(rider, dt)


# ---------------------------------------------------------------------------
# Analysis helpers
# ---------------------------------------------------------------------------


def terminal_velocity(power: float, cda: float, wind_x: float = 0.0) -> float:
    """Equilibrium forward speed for a rider in axial wind.

    Solves ``propulsion(v) == drag(v)`` along the race direction, i.e.

        power / max(v, MIN_PROPULSION_VELOCITY) = k * (v - wind_x) * |v - wind_x|

    with ``k = 0.5 * cda * AIR_DENSITY``.  The left side is
    non-increasing and the right side strictly increasing in ``v``, so
    the root is unique and bisection converges.

    Args:
        power: Rider power in watts (> 0).
        cda: Drag area coefficient in m^2 (>= 0).
        wind_x: Wind velocity along the race direction in m/s.

    Returns:
        Terminal velocity in m/s, or ``math.inf`` when ``cda`` is zero.

    Raises:
        ValueError: If power <= 0 or cda < 0.
    """
    if power <= 0.0:
        raise ValueError("power must be > 0.")
    if cda < 0.0:
        raise ValueError("cda must be >= 0.")
    if cda == 0.0:
        return math.inf

    k = 0.5 * cda * AIR_DENSITY

    def residual(v: float) -> float:
        rel = v - wind_x
        return power / max(v, MIN_PROPULSION_VELOCITY) - k * rel * abs(rel)

    span = math.sqrt(power / k) + 1.0
    lo = wind_x - span
    hi = max(MIN_PROPULSION_VELOCITY, wind_x) + span

    for _ in range(_BISECTION_ITERATIONS):
        mid = 0.5 * (lo + hi)
        if residual(mid) > 0.0:
            lo = mid
        else:
            hi = mid

    return 0.5 * (lo + hi)
