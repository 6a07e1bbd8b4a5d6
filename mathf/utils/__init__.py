"""
Low-level helpers shared across modules.

Includes IEEE-754 floating-point and 32-bit integer conversions used by the
scalar functions.
"""
