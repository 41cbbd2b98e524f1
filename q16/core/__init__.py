"""
Core fixed-point primitives, calling-layer conversions, and contracts.

This module contains the arithmetic building blocks that are independent
of any host environment (bindings, simulations, replays).
"""
