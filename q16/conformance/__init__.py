"""
Conformance: эталонные векторы и проверка битовой идентичности ядра.
"""

from q16.conformance.runner import (
    GOLDEN_SUITE_PATH,
    OPERATIONS,
    ConformanceConfig,
    ConformanceRunner,
    SuiteReport,
    VectorResult,
    load_golden_suite,
    load_suite,
)

__all__ = [
    "GOLDEN_SUITE_PATH",
    "OPERATIONS",
    "ConformanceConfig",
    "ConformanceRunner",
    "SuiteReport",
    "VectorResult",
    "load_golden_suite",
    "load_suite",
]
