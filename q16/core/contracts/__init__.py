"""
Contract Validation Module

Модуль для валидации JSON контрактов q16 (наборы эталонных векторов).
"""

from .validators import (
    ConformanceSuiteValidator,
    ContractValidator,
    SchemaLoader,
    validate_conformance_suite,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConformanceSuiteValidator",
    # Functions
    "validate_conformance_suite",
]
