"""Tests for tuple vector helpers."""

import pytest
from cue import vec


def test_add_and_scale():
    """add() sums componentwise and scale() multiplies every component."""
    assert vec.add((1.0, 2.0, 3.0), (1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)
    assert vec.scale((1.0, 2.0, 3.0), 2.0) == (2.0, 4.0, 6.0)


def test_mismatched_dimensions_raise():
    """Vectors of different lengths cannot be combined."""
    with pytest.raises(ValueError):
        vec.add((1.0, 2.0), (1.0, 2.0, 3.0))


def test_lerp_midpoint():
    """lerp() at t=0.5 lands halfway between the endpoints."""
    assert vec.lerp((0.0, 0.0, 0.0), (2.0, 4.0, -2.0), 0.5) == (1.0, 2.0, -1.0)


def test_lerp_endpoints_are_exact():
    """t at or past the ends returns the endpoint values unchanged."""
    a = (0.1, 0.2, 0.3)
    b = (1.7, -3.3, 0.9)
    assert vec.lerp(a, b, 1.0) == b
    assert vec.lerp(a, b, 1.5) == b
    assert vec.lerp(a, b, 0.0) == a
    assert vec.lerp(a, b, -1.0) == a
