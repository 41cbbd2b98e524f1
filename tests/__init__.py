"""
Test suite for q16

Contains:
- tests/unit/          : Unit tests for the arithmetic core, conversions,
                         contracts and the conformance runner
"""
