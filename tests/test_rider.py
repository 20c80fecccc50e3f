"""Tests for the rider model, the rider factory and the wind model."""

import math

import pytest

from peloton.core.kinematics import Position, Velocity
from peloton.core.rider import Rider, RiderFactory
from peloton.core.wind import Wind

# ---------------------------------------------------------------------------
# Rider
# ---------------------------------------------------------------------------


def test_rider_starts_at_rest_at_origin() -> None:
    rider = Rider(7, power=250.0, cda=0.3, mass=75.0)
    assert rider.rider_id == 7
    assert rider.position == Position(0.0, 0.0)
    assert rider.velocity == Velocity(0.0, 0.0)
    assert rider.speed == 0.0


def test_rider_speed_is_velocity_magnitude() -> None:
    rider = Rider(1, power=250.0, cda=0.3, mass=75.0)
    rider.velocity = Velocity(3.0, 4.0)
    assert rider.speed == 5.0


@pytest.mark.parametrize(
    "power, cda, mass",
    [
        (0.0, 0.3, 75.0),
        (-10.0, 0.3, 75.0),
        (250.0, -0.01, 75.0),
        (250.0, 0.3, 0.0),
        (250.0, 0.3, -1.0),
        (math.nan, 0.3, 75.0),
        (250.0, math.inf, 75.0),
    ],
)
def test_rider_rejects_invalid_parameters(power: float, cda: float, mass: float) -> None:
    """Construction must reject non-physical parameters."""
    with pytest.raises(ValueError):
        Rider(1, power=power, cda=cda, mass=mass)


def test_rider_accepts_zero_cda() -> None:
    rider = Rider(1, power=250.0, cda=0.0, mass=75.0)
    assert rider.cda == 0.0


# ---------------------------------------------------------------------------
# RiderFactory
# ---------------------------------------------------------------------------


def test_factory_assigns_increasing_ids() -> None:
    """Ids follow creation order."""
    factory = RiderFactory()
    ids = [factory.create(250.0, 0.3, 75.0).rider_id for _ in range(4)]
    assert ids == [1, 2, 3, 4]


def test_factory_start_id() -> None:
    factory = RiderFactory(start_id=100)
    assert factory.create(250.0, 0.3, 75.0).rider_id == 100
    assert factory.create(250.0, 0.3, 75.0).rider_id == 101


def test_factories_are_independent() -> None:
    """Two factories never share a counter."""
    a = RiderFactory()
    b = RiderFactory()
    a.create(250.0, 0.3, 75.0)
    a.create(250.0, 0.3, 75.0)
    assert b.create(250.0, 0.3, 75.0).rider_id == 1


def test_factory_ids_stay_monotonic_after_rejection() -> None:
    """A rejected rider never causes an id to be reused."""
    factory = RiderFactory()
    first = factory.create(250.0, 0.3, 75.0)
    with pytest.raises(ValueError):
        factory.create(-1.0, 0.3, 75.0)
    second = factory.create(250.0, 0.3, 75.0)
    assert second.rider_id > first.rider_id


# ---------------------------------------------------------------------------
# Wind
# ---------------------------------------------------------------------------


def test_wind_is_immutable() -> None:
    wind = Wind(Velocity(-5.0, 1.0))
    with pytest.raises(Exception):
        wind.velocity = Velocity(0.0, 0.0)  # type: ignore[misc]


def test_calm_wind_is_zero() -> None:
    assert Wind.calm().velocity == Velocity(0.0, 0.0)


def test_wind_rejects_non_finite_components() -> None:
    with pytest.raises(ValueError):
        Wind(Velocity(math.inf, 0.0))
    with pytest.raises(ValueError):
        Wind(Velocity(0.0, math.nan))


def test_rider_parameters_are_read_only() -> None:
    """power, cda and mass cannot be reassigned after creation."""
    rider = Rider(1, power=250.0, cda=0.3, mass=75.0)
    for name in ("power", "cda", "mass"):
        with pytest.raises(AttributeError):
            setattr(rider, name, 0.0)
    assert (rider.power, rider.cda, rider.mass) == (250.0, 0.3, 75.0)


def test_rider_claim_is_exclusive() -> None:
    rider = Rider(1, power=250.0, cda=0.3, mass=75.0)
    assert not rider.owned
    rider.claim()
    assert rider.owned
    with pytest.raises(ValueError):
        rider.claim()
