"""
Scalar math utilities modelled on the Unity Mathf API.

This module provides the angle, interpolation, wrapping, rounding and
power-of-two helpers that game and animation code reaches for constantly:
clamp/lerp families, ping-pong and repeat wave shapes, delta and lerp for
angles in degrees, gamma/linear colour-space conversion, and 32-bit
power-of-two rounding for texture sizes.

**Behavioural contract**:
  - Every function is pure and deterministic; there is no module state apart
    from the two conversion constants.
  - Nothing here raises for numeric input. Degenerate input (e.g. `a == b` in
    inverse_lerp, `length == 0` in repeat) yields inf/nan or a defined but
    meaningless number, never an exception. See mathf.utils.ieee.
  - Several functions keep the exact quirks of the API they mirror
    (lerp_unclamped uses `abs(b - a)`, delta_angle does not normalize into
    [-180, 180], sign(0) is 1). Callers relying on that API get identical
    numbers.

**Integer semantics**: the power-of-two helpers work on signed 32-bit
integers. Input is truncated toward zero and wrapped into 32 bits
(mathf.utils.ieee.to_int32) before any bit twiddling, so values at or above
2**31 wrap negative and map to 0.
"""

import math
import sys

from mathf.utils import ieee

FULL_ANGLE = 360
STRAIGHT_ANGLE = 180
GAMMA_TO_LINEAR = 2.2
LINEAR_TO_GAMMA = 0.45454545
IS_INTEGER = 0.5

EPSILON = sys.float_info.epsilon

# Degrees-to-radians and radians-to-degrees conversion factors
DEG2RAD = math.pi * 2 / FULL_ANGLE
RAD2DEG = FULL_ANGLE / (math.pi * 2)


def approximately(f1: float, f2: float) -> bool:
    """
    Compare two floats for near-equality.

    **Functionally**: True when `abs(f1 - f2)` is below machine epsilon
    (2**-52). The tolerance is absolute, not scaled by magnitude, so values
    of 1.0 or more only compare equal when they are identical.

    Example:
        >>> approximately(0.1 + 0.2, 0.3)
        True
        >>> approximately(1.0, 1.0001)
        False
    """
    return abs(f1 - f2) < EPSILON


def clamp(value: float, min: float, max: float) -> float:
    """
    Clamp a value to the range [min, max].

    Returns `min` if `value < min`, `max` if `value > max`, otherwise `value`
    itself (the same object, no conversion). If `min > max` the result is
    whichever comparison fires first; ordering the bounds is the caller's job.

    Example:
        >>> clamp(-5, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    if value < min:
        return min
    if value > max:
        return max
    return value


def clamp01(value: float) -> float:
    """Clamp a value to [0, 1]."""
    return clamp(value, 0, 1)


def next_power_of_two(value: float) -> int:
    """
    Smallest power of two greater than or equal to `value`.

    **Mathematical**: classic bit-smear: decrement, OR the value with itself
    shifted right by 1, 2, 4, 8 and 16 so every bit below the highest set bit
    becomes 1, then increment.

    **Edge cases**:
    - Input is truncated to a signed 32-bit integer first (5.9 -> 5).
    - Negative input (after truncation) returns 0.
    - 0 returns 0: -1 smears to -1, and -1 + 1 == 0.
    - Anything from 2**30 + 1 up to 2**31 - 1 returns 2**31. The final
      increment is not wrapped, so 2**31 comes back as a positive int.
    - Input at or above 2**31 wraps negative during truncation and
      returns 0 (or the next power of a wrapped positive value).

    Example:
        >>> next_power_of_two(5)
        8
        >>> next_power_of_two(-3)
        0
    """
    value = ieee.to_int32(value)

    if value < 0:
        return 0

    value -= 1
    value |= value >> 1
    value |= value >> 2
    value |= value >> 4
    value |= value >> 8
    value |= value >> 16
    value += 1

    return value


def closest_power_of_two(value: float) -> int:
    """
    Power of two nearest to `value`, biased toward the larger one.

    **Functionally**: Let `next = next_power_of_two(value)`. When the distance
    `next - value` exceeds a quarter of `next`, the previous power of two
    (`next >> 1`) is returned, otherwise `next`. The distance is computed
    against the untruncated `value`; the shifts are 32-bit.

    Example:
        >>> closest_power_of_two(5)   # 8 - 5 = 3 > 2  -> 4
        4
        >>> closest_power_of_two(7)   # 8 - 7 = 1 <= 2 -> 8
        8
    """
    next_value = next_power_of_two(value)

    # more than a quarter below the next power: fall back to the previous one
    if next_value - value > ieee.shift_right(next_value, 2):
        return ieee.shift_right(next_value, 1)

    return next_value


def closest_power_of_two_long(value: float) -> int:
    """
    Closest power of two computed via floating-point log2.

    **Functionally**:
    - Truncate `value` to 32 bits; negative returns 0.
    - `next = 2 << floor(log2(value))`, then the same quarter-distance rule
      as closest_power_of_two.

    **Edge cases**:
    - The shift is still 32-bit, so despite the name the usable range is the
      same as closest_power_of_two: above 2**30, `2 << 30` wraps to -2**31.
    - `log2(0)` is -inf, which shifts by 0 bits; 0 therefore returns 1.
    - Exact powers of two overshoot first (4 -> next 8) and the quarter rule
      brings them back (8 - 4 > 2 -> 4).

    Example:
        >>> closest_power_of_two_long(5)
        4
        >>> closest_power_of_two_long(0)
        1
    """
    value = ieee.to_int32(value)

    if value < 0:
        return 0

    next_value = ieee.shift_left(2, ieee.floor(ieee.log2(value)))

    if next_value - value > ieee.shift_right(next_value, 2):
        return ieee.shift_right(next_value, 1)

    return next_value


def is_power_of_two(value: float) -> bool:
    """
    Whether the 32-bit truncation of `value` is a power of two.

    Uses the `v & (v - 1) == 0` test, which is also true for 0 and for the
    32-bit minimum -2**31.

    Example:
        >>> is_power_of_two(16)
        True
        >>> is_power_of_two(0)
        True
        >>> is_power_of_two(15)
        False
    """
    value = ieee.to_int32(value)

    return (value & ieee.to_int32(value - 1)) == 0


def delta_angle(current: float, target: float) -> float:
    """
    Difference between two angles in degrees.

    **Functionally**:
    - An angle whose magnitude exceeds 360 is reduced with a sign-preserving
      remainder (`-370 -> -10`, `370 -> 10`); angles within [-360, 360] are
      used as-is.
    - Returns `target - current` after reduction.

    **Edge cases**: The result is not wrapped into [-180, 180], so it is not
    always the shortest rotation: `delta_angle(10, 350)` is 340, not -20.
    Callers that need the shortest signed rotation must wrap the result.

    Example:
        >>> delta_angle(370, 10)
        0.0
        >>> delta_angle(30, 90)
        60
    """
    if abs(current) > FULL_ANGLE:
        current = ieee.remainder(current, FULL_ANGLE)

    if abs(target) > FULL_ANGLE:
        target = ieee.remainder(target, FULL_ANGLE)

    return target - current


def gamma_to_linear_space(value: float) -> float:
    """Convert a gamma (sRGB) encoded value to linear space: `value ** 2.2`."""
    return ieee.power(value, GAMMA_TO_LINEAR)


def linear_to_gamma_space(value: float) -> float:
    """Convert a linear value to gamma (sRGB) space: `value ** 0.45454545`."""
    return ieee.power(value, LINEAR_TO_GAMMA)


def inverse_lerp(a: float, b: float, value: float) -> float:
    """
    Interpolation parameter t in [0, 1] that produces `value` between a and b.

    **Mathematical**:
        t = (clamp(value, min(a, b), max(a, b)) - a) / (b - a)

    **Edge cases**: `a == b` is not guarded. The numerator is then 0 as well,
    so the result is nan (0 / 0).

    Example:
        >>> inverse_lerp(0, 10, 2.5)
        0.25
        >>> inverse_lerp(10, 0, 2.5)
        0.75
        >>> inverse_lerp(0, 10, 20)
        1.0
    """
    clamped = clamp(value, ieee.minimum(a, b), ieee.maximum(a, b))
    return ieee.divide(clamped - a, b - a)


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation from a to b by t, with t clamped to [0, 1].

    Example:
        >>> lerp(0, 10, 0.5)
        5.0
        >>> lerp(0, 10, 2)
        10
    """
    return (b - a) * clamp01(t) + a


def lerp_unclamped(a: float, b: float, t: float) -> float:
    """
    Linear interpolation that extrapolates for t outside [0, 1].

    **Functionally**: Inside [0, 1] this is lerp. Outside, it returns
    `a + abs(b - a) * t`: the distance between the endpoints is used without
    its sign, so the direction of extrapolation follows the sign of t, not
    the order of a and b.

    Example:
        >>> lerp_unclamped(0, 10, 2)
        20
        >>> lerp_unclamped(10, 0, 2)   # 10 + abs(0 - 10) * 2
        30
    """
    if t < 0 or t > 1:
        return a + abs(b - a) * t

    return (b - a) * clamp01(t) + a


def lerp_angle(a: float, b: float, t: float) -> float:
    """
    Lerp between two angles in degrees, taking the shorter way round.

    `b` is shifted by whole turns until it lies within 180 degrees of `a`,
    then the two are lerped. Inputs must be finite: an infinite `b` never
    comes within half a turn of a finite `a`.

    Example:
        >>> lerp_angle(350, 10, 0.5)   # 10 becomes 370
        360.0
    """
    while a > b + STRAIGHT_ANGLE:
        b += FULL_ANGLE

    while b > a + STRAIGHT_ANGLE:
        b -= FULL_ANGLE

    return lerp(a, b, t)


def move_towards(current: float, target: float, max_delta: float) -> float:
    """
    Move `current` toward `target` by at most `max_delta`.

    **Functionally**:
    - With a positive `max_delta`, a step that would reach or pass `target`
      returns `target` exactly, so repeated calls settle instead of
      oscillating around it.
    - Otherwise steps by `max_delta` toward `target`: subtract when
      `current > target`, add when it is not.

    **Edge cases**: A negative `max_delta` is applied as-is, so it moves
    `current` away from `target`. When `current == target` the step is
    still added (`move_towards(5, 5, 1) == 6`).

    Example:
        >>> move_towards(0, 10, 3)
        3
        >>> move_towards(8, 10, 3)
        10
    """
    if max_delta > 0:
        if target < current and current - max_delta < target:
            return target
        elif target > current and current + max_delta > target:
            return target

    if current > target:
        return current - max_delta

    return current + max_delta


def ping_pong(t: float, length: float) -> float:
    """
    Triangle wave: bounce t back and forth between 0 and length.

    **Mathematical**: Negative t is mirrored to positive first. With
    `mod = t % length` (sign-preserving) and `n = ceil(t / length)`:
        n even -> length - mod  (0 when mod == 0)
        n odd  -> mod           (length when mod == 0)

    Example:
        >>> ping_pong(3, 5)
        3.0
        >>> ping_pong(7, 5)
        3.0
        >>> ping_pong(10, 5)
        0.0
    """
    if t < 0:
        t = -t

    mod = ieee.remainder(t, length)

    if ieee.remainder(ieee.ceil(ieee.divide(t, length)), 2) == 0:
        return 0.0 if mod == 0 else length - mod

    return length if mod == 0 else mod


def repeat(t: float, length: float) -> float:
    """
    Sawtooth wrap of t into the range [0, length].

    Positive t gives `t % length`; zero and negative t give
    `length + t % length` with a sign-preserving remainder. Whole multiples
    on the negative side (including 0) land on `length`, not 0.

    Example:
        >>> repeat(7, 5)
        2.0
        >>> repeat(-2, 5)
        3.0
    """
    if t > 0:
        return ieee.remainder(t, length)

    return length + ieee.remainder(t, length)


def round(f: float) -> float:
    """
    Round to the nearest integer, sending exact .5 ties to the even neighbour.

    **Functionally**:
    - If `f + 0.5 == ceil(f)` (f sits exactly on a .5 boundary) the result is
      `f + 0.5` when that is even and `f - 0.5` otherwise.
    - Any other value rounds to nearest (JavaScript Math.round).

    Example:
        >>> round(2.5)
        2.0
        >>> round(3.5)
        4.0
        >>> round(2.4)
        2.0
    """
    ceil_val = f + IS_INTEGER

    if ceil_val == ieee.ceil(f):
        return float(f + IS_INTEGER) if ieee.remainder(ceil_val, 2) == 0 else float(f - IS_INTEGER)

    return ieee.round_half_up(f)


def sign(f: float) -> float:
    """
    1.0 for zero and positive numbers, -1.0 for negative numbers.

    There is no zero result: sign(0) and sign(-0.0) are both 1.0, and nan
    (which fails `f >= 0`) is -1.0.
    """
    return 1.0 if f >= 0 else -1.0
