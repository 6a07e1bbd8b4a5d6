"""
mathf – scalar game-math utilities.

Angle, interpolation, wrapping, rounding and power-of-two helpers modelled on
the Unity Mathf API, plus tooling to sample those functions into pandas
tables and CSV files for inspection.

Usage:
    >>> import mathf
    >>> mathf.lerp(0, 10, 0.5)
    5.0
    >>> mathf.closest_power_of_two(5)
    4
"""

from mathf.scalar import (
    DEG2RAD,
    RAD2DEG,
    approximately,
    clamp,
    clamp01,
    closest_power_of_two,
    closest_power_of_two_long,
    delta_angle,
    gamma_to_linear_space,
    inverse_lerp,
    is_power_of_two,
    lerp,
    lerp_angle,
    lerp_unclamped,
    linear_to_gamma_space,
    move_towards,
    next_power_of_two,
    ping_pong,
    repeat,
    round,
    sign,
)

__version__ = "0.1.0"

__all__ = [
    "DEG2RAD",
    "RAD2DEG",
    "approximately",
    "clamp",
    "clamp01",
    "closest_power_of_two",
    "closest_power_of_two_long",
    "delta_angle",
    "gamma_to_linear_space",
    "inverse_lerp",
    "is_power_of_two",
    "lerp",
    "lerp_angle",
    "lerp_unclamped",
    "linear_to_gamma_space",
    "move_towards",
    "next_power_of_two",
    "ping_pong",
    "repeat",
    "round",
    "sign",
]
