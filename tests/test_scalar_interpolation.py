"""
Tests for the clamp/lerp/move family in mathf/scalar.py

Expected values are worked out by hand from the formulas in the docstrings,
including the deliberate quirks (lerp_unclamped's abs(), move_towards with a
negative max_delta).
"""

import math
import sys

import numpy as np
import pytest

from mathf.scalar import (
    DEG2RAD,
    RAD2DEG,
    approximately,
    clamp,
    clamp01,
    inverse_lerp,
    lerp,
    lerp_unclamped,
    move_towards,
)


def test_conversion_constants():
    """Test degree/radian factors and that they invert each other."""
    assert np.isclose(DEG2RAD, math.pi / 180)
    assert np.isclose(RAD2DEG, 180 / math.pi)
    assert np.isclose(180 * DEG2RAD, math.pi)
    assert abs(RAD2DEG * DEG2RAD - 1.0) <= sys.float_info.epsilon


def test_approximately_uses_absolute_epsilon():
    """Test that approximately compares against machine epsilon, unscaled."""
    assert approximately(1.0, 1.0)
    assert approximately(0.1 + 0.2, 0.3)
    assert not approximately(1.0, 1.0 + 1e-9)
    # 100 and its neighbour differ by ~1.4e-14, far above epsilon
    assert not approximately(100.0, 100.0 + 1e-14)


@pytest.mark.parametrize("value, expected", [(-5, 0), (15, 10), (5, 5), (0, 0), (10, 10)])
def test_clamp_known_values(value, expected):
    """Test clamp below, above and inside [0, 10]."""
    assert clamp(value, 0, 10) == expected


def test_clamp_result_always_in_range():
    """Test that clamp(v, 0, 10) lands in [0, 10] for a sweep of inputs."""
    for v in np.linspace(-50.0, 50.0, 101):
        assert 0 <= clamp(v, 0, 10) <= 10


def test_clamp_returns_input_object_unchanged():
    """Test that in-range values pass through without conversion."""
    assert clamp(3, 0, 10) == 3
    assert isinstance(clamp(3, 0, 10), int)


def test_clamp_inverted_bounds_checks_min_first():
    """Test clamp with min > max: the min comparison wins."""
    assert clamp(5, 10, 0) == 10
    assert clamp(-1, 10, 0) == 10


def test_clamp01():
    """Test clamp01 at and beyond the unit interval."""
    assert clamp01(-0.5) == 0
    assert clamp01(1.5) == 1
    assert clamp01(0.25) == 0.25


def test_lerp_midpoint_and_clamping():
    """Test lerp at t=0.5 and that t is clamped to [0, 1]."""
    assert lerp(0, 10, 0.5) == 5
    assert lerp(0, 10, -1) == 0
    assert lerp(0, 10, 2) == 10


def test_lerp_descending_range():
    """Test lerp when b < a."""
    assert lerp(10, 0, 0.25) == 7.5


def test_lerp_unclamped_uses_absolute_difference():
    """Test that extrapolation uses abs(b - a), so direction follows t."""
    assert lerp_unclamped(0, 10, 2) == 20
    # 10 + abs(0 - 10) * 2, not 10 + (0 - 10) * 2
    assert lerp_unclamped(10, 0, 2) == 30
    assert lerp_unclamped(10, 0, -1) == 0


def test_lerp_unclamped_inside_unit_interval_matches_lerp():
    """Test that lerp_unclamped equals lerp for t in [0, 1]."""
    for t in [0.0, 0.25, 0.5, 1.0]:
        assert lerp_unclamped(10, 0, t) == lerp(10, 0, t)
        assert lerp_unclamped(0, 10, t) == lerp(0, 10, t)


def test_inverse_lerp_known_values():
    """Test inverse_lerp for ascending and descending ranges."""
    assert np.isclose(inverse_lerp(0, 10, 5), 0.5)
    assert np.isclose(inverse_lerp(0, 10, 2.5), 0.25)
    assert np.isclose(inverse_lerp(10, 0, 2.5), 0.75)


def test_inverse_lerp_clamps_value_to_range():
    """Test that value outside [min(a,b), max(a,b)] maps to 0 or 1."""
    assert inverse_lerp(0, 10, 20) == 1.0
    assert inverse_lerp(0, 10, -5) == 0.0
    assert inverse_lerp(10, 0, 20) == 0.0


def test_inverse_lerp_equal_endpoints_is_nan():
    """Test that a == b gives nan (0 / 0) instead of raising."""
    assert np.isnan(inverse_lerp(5, 5, 7))
    assert np.isnan(inverse_lerp(5, 5, 5))


def test_move_towards_steps_and_snaps():
    """Test stepping toward the target and snapping instead of overshooting."""
    assert move_towards(0, 10, 3) == 3
    assert move_towards(8, 10, 3) == 10
    assert move_towards(10, 0, 4) == 6
    assert move_towards(2, 0, 4) == 0


def test_move_towards_repeated_calls_settle_on_target():
    """Test that repeated steps end exactly at the target."""
    current = 0.0
    for _ in range(10):
        current = move_towards(current, 1.0, 0.3)
    assert current == 1.0


def test_move_towards_negative_max_delta_moves_away():
    """Test that a negative max_delta is applied without abs()."""
    assert move_towards(0, 10, -3) == -3
    assert move_towards(10, 0, -3) == 13


def test_move_towards_at_target_still_steps():
    """Test that current == target adds max_delta."""
    assert move_towards(5, 5, 1) == 6
