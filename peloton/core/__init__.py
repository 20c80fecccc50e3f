"""Core simulation modules for the peloton engine."""

from peloton.core.kinematics import Force, Position, Velocity
from peloton.core.physics import (
    AIR_DENSITY,
    MIN_PROPULSION_VELOCITY,
    acceleration,
    advance_rider,
    drag_force,
    net_force,
    propulsive_force,
    terminal_velocity,
    update_rider_position,
    update_rider_velocity,
)
from peloton.core.rider import Rider, RiderFactory
from peloton.core.simulation import RiderSnapshot, Simulation
from peloton.core.vector import EPSILON, Vector2D
from peloton.core.wind import Wind

__all__ = [
    "AIR_DENSITY",
    "EPSILON",
    "Force",
    "MIN_PROPULSION_VELOCITY",
    "Position",
    "Rider",
    "RiderFactory",
    "RiderSnapshot",
    "Simulation",
    "Vector2D",
    "Velocity",
    "Wind",
    "acceleration",
    "advance_rider",
    "drag_force",
    "net_force",
    "propulsive_force",
    "terminal_velocity",
    "update_rider_position",
    "update_rider_velocity",
]
