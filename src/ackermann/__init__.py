"""
Exact Ackermann–Péter function for arbitrary-precision naturals.

A(m, n) is evaluated through the hyperoperation hierarchy:
recursion over the order, iteration over the exponent.
"""

from src.ackermann.math import (
    A,
    HyperOpLimits,
    HyperOpResourceExhausted,
    NaturalDomainViolation,
    NaturalUnderflow,
    ackermann,
    binary_pow,
    hyper_op,
)

__all__ = [
    "A",
    "ackermann",
    "binary_pow",
    "hyper_op",
    "HyperOpLimits",
    "HyperOpResourceExhausted",
    "NaturalDomainViolation",
    "NaturalUnderflow",
]
