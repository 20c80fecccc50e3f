"""Tests for the shared 2-D vector capability."""

import math

import pytest

from peloton.core.kinematics import Force, Position, Velocity
from peloton.core.vector import EPSILON, Vector2D


def test_magnitude_345() -> None:
    """A 3-4-5 triangle has magnitude 5."""
    assert Vector2D(3.0, 4.0).magnitude() == 5.0
    assert Vector2D(-3.0, -4.0).magnitude() == 5.0


def test_magnitude_of_zero_vector() -> None:
    """The zero vector has magnitude 0."""
    assert Vector2D(0.0, 0.0).magnitude() == 0.0


def test_unit_of_zero_is_zero() -> None:
    """unit() of the zero vector must return the zero vector, not NaN."""
    unit = Velocity(0.0, 0.0).unit()
    assert unit == Velocity(0.0, 0.0)


def test_unit_below_epsilon_is_zero() -> None:
    """Vectors shorter than machine epsilon collapse to zero."""
    tiny = Force(EPSILON / 4.0, 0.0)
    assert tiny.unit() == Force(0.0, 0.0)


def test_unit_has_magnitude_one_and_is_parallel() -> None:
    """unit() of a non-zero vector has magnitude 1 and keeps direction."""
    v = Vector2D(3.0, 3.0)
    unit = v.unit()
    assert unit.magnitude() == pytest.approx(1.0)
    assert unit.x == pytest.approx(math.sqrt(2.0) / 2.0)
    assert unit.x == pytest.approx(unit.y)
    # Parallel: 2-D cross product vanishes and dot product is positive.
    assert v.x * unit.y - v.y * unit.x == pytest.approx(0.0)
    assert v.x * unit.x + v.y * unit.y > 0.0


@pytest.mark.parametrize("k", [0.0, 0.5, 1.0, 2.0, 10.0])
def test_scale_scales_magnitude(k: float) -> None:
    """|scale(v, k)| == k * |v| for k >= 0."""
    v = Vector2D(-1.5, 2.0)
    assert v.scale(k).magnitude() == pytest.approx(k * v.magnitude())


def test_scale_components() -> None:
    scaled = Vector2D(3.0, 4.0).scale(2.0)
    assert (scaled.x, scaled.y) == (6.0, 8.0)


def test_add_and_sub() -> None:
    """add and sub are componentwise."""
    a = Vector2D(3.0, 4.0)
    b = Vector2D(1.0, 2.0)
    assert a.add(b) == Vector2D(4.0, 6.0)
    assert a.sub(b) == Vector2D(2.0, 2.0)


def test_operations_are_pure() -> None:
    """Arithmetic must not modify its operands."""
    a = Vector2D(1.0, 2.0)
    b = Vector2D(3.0, 4.0)
    a.add(b)
    a.sub(b)
    a.scale(5.0)
    assert a == Vector2D(1.0, 2.0)
    assert b == Vector2D(3.0, 4.0)


def test_operations_preserve_receiver_type() -> None:
    """Results keep the domain type of the receiver."""
    assert isinstance(Velocity(1.0, 0.0).scale(2.0), Velocity)
    assert isinstance(Position(1.0, 0.0).add(Velocity(1.0, 1.0)), Position)
    assert isinstance(Force(3.0, 4.0).unit(), Force)


def test_operators_delegate() -> None:
    """Operator sugar matches the named methods."""
    a = Velocity(1.0, 2.0)
    b = Velocity(0.5, -1.0)
    assert a + b == a.add(b)
    assert a - b == a.sub(b)
    assert a * 3.0 == a.scale(3.0)
    assert 3.0 * a == a.scale(3.0)
    assert -a == Velocity(-1.0, -2.0)


def test_vectors_are_immutable() -> None:
    """Value types are frozen."""
    v = Velocity(1.0, 2.0)
    with pytest.raises(Exception):
        v.x = 5.0  # type: ignore[misc]


def test_str_formats_components() -> None:
    assert str(Velocity(1.5, -2.0)) == "(1.5, -2.0)"
