"""
Domain models.

Contains request/result models for Ackermann evaluation.
"""

from src.ackermann.domain.evaluation import (
    SCHEMA_VERSION,
    AckermannRequest,
    AckermannResult,
)

__all__ = [
    "SCHEMA_VERSION",
    "AckermannRequest",
    "AckermannResult",
]
