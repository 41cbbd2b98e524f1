"""
Domain models and calling-layer conversions.

Contains real <-> Q16.16 conversions and conformance vector models.
"""

from q16.core.domain.conversions import (
    from_float,
    from_int,
    is_fixed,
    to_float,
    to_int,
    validate_fixed,
)
from q16.core.domain.vectors import ConformanceSuite, ConformanceVector, FixedOp

__all__ = [
    # Conversions
    "from_int",
    "from_float",
    "to_int",
    "to_float",
    "is_fixed",
    "validate_fixed",
    # Conformance vectors
    "FixedOp",
    "ConformanceVector",
    "ConformanceSuite",
]
