"""
IEEE-754 and 32-bit integer helpers for the scalar math functions.

**Conceptual**: The scalar functions in mathf.scalar mirror an API whose
numbers are IEEE-754 doubles and whose bitwise operators work on signed
32-bit integers. Plain Python disagrees with both in a few places:
  - `1.0 / 0` raises ZeroDivisionError instead of returning inf/nan.
  - `math.fmod(x, 0)`, `math.fmod(inf, x)` and `math.pow(-1.0, 2.2)` raise
    ValueError instead of returning nan.
  - `math.ceil(inf)` / `math.floor(nan)` raise instead of passing through.
  - Python integers never overflow, so `x << 30` does not wrap at 32 bits.

Every helper here returns the value an IEEE double (or a 32-bit signed
integer) would produce, silently. Floating-point work goes through numpy
float64 with floating-point warnings suppressed; integer work uses masking.

**Teaching note**: Centralizing these conversions keeps mathf.scalar readable
(one call per operation) and makes the "never throws" contract testable in
one place instead of being scattered across every function.
"""

import math

import numpy as np

INT32_MODULUS = 1 << 32
INT32_SIGN_BIT = 1 << 31
SHIFT_MASK = 0x1F


def _ignore_fp_errors():
    # inf/nan results are the expected output, not a problem to warn about
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def to_int32(value) -> int:
    """
    Convert a number to a signed 32-bit integer (ECMAScript ToInt32).

    **Functionally**:
    - nan, inf and -inf convert to 0.
    - Finite values are truncated toward zero.
    - The result wraps modulo 2**32 into the range [-2**31, 2**31).

    Args:
        value: int or float.

    Returns:
        Python int in [-2147483648, 2147483647].

    Example:
        >>> to_int32(5.9)
        5
        >>> to_int32(-5.9)
        -5
        >>> to_int32(2**31)
        -2147483648
        >>> to_int32(float("nan"))
        0
    """
    if isinstance(value, (int, np.integer)):
        n = int(value)
    elif not math.isfinite(value):
        return 0
    else:
        # int() on a float truncates toward zero
        n = int(value)

    n %= INT32_MODULUS
    if n >= INT32_SIGN_BIT:
        n -= INT32_MODULUS
    return n


def shift_left(value, bits) -> int:
    """
    32-bit left shift (`value << bits`), wrapping into signed 32-bit range.

    Both operands are converted with to_int32 first; the shift count uses
    only its low 5 bits, so shifting by 32 is the same as shifting by 0.

    Example:
        >>> shift_left(2, 30)
        -2147483648
        >>> shift_left(1, 33)
        2
    """
    return to_int32(to_int32(value) << (to_int32(bits) & SHIFT_MASK))


def shift_right(value, bits) -> int:
    """
    32-bit arithmetic (sign-propagating) right shift (`value >> bits`).

    Example:
        >>> shift_right(8, 2)
        2
        >>> shift_right(2**31, 2)
        -536870912
    """
    return to_int32(value) >> (to_int32(bits) & SHIFT_MASK)


def divide(a, b) -> float:
    """
    IEEE division: `x / 0` gives +/-inf, `0 / 0` gives nan.

    Example:
        >>> divide(1, 0)
        inf
        >>> divide(-1, 0)
        -inf
    """
    with _ignore_fp_errors():
        return float(np.float64(a) / np.float64(b))


def remainder(a, b) -> float:
    """
    Sign-preserving floating-point remainder (C fmod).

    **Mathematical**: `a - b * trunc(a / b)`. The result takes the sign of `a`,
    unlike Python's `%` which takes the sign of `b`:
        remainder(-370, 360) == -10.0   while   -370 % 360 == 350

    **Edge cases**:
    - `b == 0` or `a` infinite gives nan.
    - `b` infinite and `a` finite gives `a`.

    Example:
        >>> remainder(7, 5)
        2.0
        >>> remainder(-2, 5)
        -2.0
    """
    with _ignore_fp_errors():
        return float(np.fmod(np.float64(a), np.float64(b)))


def power(base, exponent) -> float:
    """
    IEEE power: negative base with a fractional exponent gives nan,
    overflow gives inf.
    """
    with _ignore_fp_errors():
        return float(np.power(np.float64(base), np.float64(exponent)))


def ceil(value) -> float:
    """Ceiling that passes inf and nan through unchanged."""
    with _ignore_fp_errors():
        return float(np.ceil(np.float64(value)))


def floor(value) -> float:
    """Floor that passes inf and nan through unchanged."""
    with _ignore_fp_errors():
        return float(np.floor(np.float64(value)))


def log2(value) -> float:
    """Base-2 logarithm: `log2(0)` is -inf, negative input gives nan."""
    with _ignore_fp_errors():
        return float(np.log2(np.float64(value)))


def minimum(a, b) -> float:
    """Smaller of two numbers; nan if either is nan."""
    with _ignore_fp_errors():
        return float(np.minimum(np.float64(a), np.float64(b)))


def maximum(a, b) -> float:
    """Larger of two numbers; nan if either is nan."""
    with _ignore_fp_errors():
        return float(np.maximum(np.float64(a), np.float64(b)))


def round_half_up(value) -> float:
    """
    Round to the nearest integer, ties toward +inf (JavaScript Math.round).

    **Functionally**:
    - Values that are already integral (including every double >= 2**52)
      and non-finite values are returned unchanged.
    - Otherwise returns `floor(value + 0.5)`.

    Example:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(-2.6)
        -3.0
    """
    with _ignore_fp_errors():
        v = np.float64(value)
        whole = np.floor(v)
        if whole == v or not np.isfinite(v):
            return float(v)
        return float(np.floor(v + 0.5))
