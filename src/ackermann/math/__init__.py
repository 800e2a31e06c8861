"""
Math modules для Ackermann

Точная арифметика натуральных чисел, гипероператоры и функция Аккермана.
"""

# Naturals
from src.ackermann.math.naturals import (
    # Constants
    DESCRIBE_MAX_BITS,
    N0,
    N1,
    N2,
    N3,
    # Exceptions
    NaturalDomainViolation,
    NaturalUnderflow,
    # Functions
    describe_natural,
    halve,
    is_natural,
    lowest_bit,
    natural_sub,
    validate_natural,
)

# Binary Exponentiation
from src.ackermann.math.exponentiation import binary_pow

# Hyperoperation
from src.ackermann.math.hyperoperation import (
    DEFAULT_LIMITS,
    MAX_ORDER_DEFAULT,
    MAX_RESULT_BITS_DEFAULT,
    HyperOpLimits,
    HyperOpResourceExhausted,
    hyper_op,
)

# Ackermann
from src.ackermann.math.ackermann_peter import A, ackermann
from src.ackermann.math.reference import (
    REFERENCE_MAX_STEPS_DEFAULT,
    ackermann_reference,
)

__all__ = [
    # Naturals — Constants
    "DESCRIBE_MAX_BITS",
    "N0",
    "N1",
    "N2",
    "N3",
    # Naturals — Exceptions
    "NaturalDomainViolation",
    "NaturalUnderflow",
    # Naturals — Functions
    "describe_natural",
    "halve",
    "is_natural",
    "lowest_bit",
    "natural_sub",
    "validate_natural",
    # Binary Exponentiation
    "binary_pow",
    # Hyperoperation — Constants
    "DEFAULT_LIMITS",
    "MAX_ORDER_DEFAULT",
    "MAX_RESULT_BITS_DEFAULT",
    # Hyperoperation — Types
    "HyperOpLimits",
    # Hyperoperation — Exceptions
    "HyperOpResourceExhausted",
    # Hyperoperation — Functions
    "hyper_op",
    # Ackermann
    "A",
    "ackermann",
    "REFERENCE_MAX_STEPS_DEFAULT",
    "ackermann_reference",
]
