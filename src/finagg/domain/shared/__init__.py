"""Shared domain components.

This module exports shared exceptions, the tagged result type and time
helpers used across domain boundaries.
"""

# Re-export all exceptions from the exceptions module
from finagg.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from finagg.domain.shared.result import Err, Ok, Result
from finagg.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    # Results
    "Ok",
    "Err",
    "Result",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
