"""
Core math modules для q16

Детерминированная арифметика Q16.16 без участия float.
"""

# Fixed Point (ядро: mul / div / sqrt)
from q16.core.math.fixed_point import (
    # Format constants
    FP_EPSILON,
    FP_FRACTION_MASK,
    FP_HALF,
    FP_MAX,
    FP_MIN,
    FP_ONE,
    FP_SHIFT,
    # Narrowing
    to_i32,
    # Core operations
    divide,
    fixed_sqrt,
    multiply,
)

# Fixed Ops (скалярные операции)
from q16.core.math.fixed_ops import (
    fixed_abs,
    fixed_add,
    fixed_ceil,
    fixed_clamp,
    fixed_floor,
    fixed_lerp,
    fixed_max,
    fixed_min,
    fixed_round,
    fixed_sub,
    isqrt,
)

# Trig (приближённые sin/cos)
from q16.core.math.trig import (
    FP_HALF_PI,
    FP_PI,
    FP_TWO_PI,
    fixed_cos,
    fixed_sin,
)

__all__ = [
    # Fixed Point — Format constants
    "FP_EPSILON",
    "FP_FRACTION_MASK",
    "FP_HALF",
    "FP_MAX",
    "FP_MIN",
    "FP_ONE",
    "FP_SHIFT",
    # Fixed Point — Narrowing
    "to_i32",
    # Fixed Point — Core operations
    "divide",
    "fixed_sqrt",
    "multiply",
    # Fixed Ops
    "fixed_abs",
    "fixed_add",
    "fixed_ceil",
    "fixed_clamp",
    "fixed_floor",
    "fixed_lerp",
    "fixed_max",
    "fixed_min",
    "fixed_round",
    "fixed_sub",
    "isqrt",
    # Trig — Constants
    "FP_HALF_PI",
    "FP_PI",
    "FP_TWO_PI",
    # Trig — Functions
    "fixed_cos",
    "fixed_sin",
]
