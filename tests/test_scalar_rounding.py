"""
Tests for round and sign in mathf/scalar.py
"""

import numpy as np
import pytest

from mathf.scalar import round, sign


@pytest.mark.parametrize(
    "f, expected",
    [
        (2.5, 2.0),    # ceil_val 3 is odd -> 2.5 - 0.5
        (3.5, 4.0),    # ceil_val 4 is even -> 3.5 + 0.5
        (0.5, 0.0),
        (1.5, 2.0),
        (-2.5, -2.0),  # ceil_val -2 is even -> -2.5 + 0.5
        (-3.5, -4.0),  # ceil_val -3 is odd -> -3.5 - 0.5
        (-0.5, 0.0),
    ],
)
def test_round_ties_go_to_even(f, expected):
    """Test the .5 boundary branch."""
    assert round(f) == expected


@pytest.mark.parametrize(
    "f, expected",
    [
        (2.4, 2.0),
        (2.6, 3.0),
        (-2.4, -2.0),
        (-2.6, -3.0),
        (4.0, 4.0),
        (0.0, 0.0),
    ],
)
def test_round_non_ties_round_to_nearest(f, expected):
    """Test values off the .5 boundary."""
    assert round(f) == expected


def test_round_returns_float():
    """Test the result type for tie and non-tie inputs."""
    assert isinstance(round(2.5), float)
    assert isinstance(round(2.4), float)
    assert isinstance(round(3), float)


def test_round_large_integral_values_unchanged():
    """Test that integral doubles above 2**52 are not nudged by the +0.5."""
    value = float(2**52 + 1)
    assert round(value) == value


def test_round_non_finite_passes_through():
    """Test that inf and nan do not raise."""
    assert round(float("inf")) == float("inf")
    assert round(float("-inf")) == float("-inf")
    assert np.isnan(round(float("nan")))


def test_sign_has_no_zero_result():
    """Test that zero (either sign) maps to 1."""
    assert sign(0) == 1
    assert sign(-0.0) == 1
    assert sign(-0.0001) == -1
    assert sign(42) == 1


def test_sign_nan_is_negative():
    """Test that nan fails f >= 0 and maps to -1."""
    assert sign(float("nan")) == -1
