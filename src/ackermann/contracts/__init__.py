"""
Contract Validation Module

Модуль для валидации JSON контрактов запроса и результата A(m, n).
"""

from .validators import (
    REQUEST_CONTRACT,
    RESULT_CONTRACT,
    SCHEMA_DIR,
    ContractViolation,
    contract_validator,
    load_schema,
    validate_ackermann_request,
    validate_ackermann_result,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "REQUEST_CONTRACT",
    "RESULT_CONTRACT",
    # Exceptions
    "ContractViolation",
    # Functions
    "load_schema",
    "contract_validator",
    "validate_ackermann_request",
    "validate_ackermann_result",
]
