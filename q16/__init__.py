"""
q16 — deterministic Q16.16 fixed-point arithmetic.

Re-exports the arithmetic core; see q16.core.math.fixed_point.
"""

from q16.core.math.fixed_point import (
    FP_EPSILON,
    FP_HALF,
    FP_MAX,
    FP_MIN,
    FP_ONE,
    FP_SHIFT,
    divide,
    fixed_sqrt,
    multiply,
    to_i32,
)

__all__ = [
    "FP_EPSILON",
    "FP_HALF",
    "FP_MAX",
    "FP_MIN",
    "FP_ONE",
    "FP_SHIFT",
    "divide",
    "fixed_sqrt",
    "multiply",
    "to_i32",
]
