"""Utility modules for the meter reader application."""

from .validators import (
    ValidationResult,
    is_valid_confirmed_value,
    is_valid_measure_type,
    is_valid_uuid,
    to_confirmed_value,
    validate_measure_request,
)

__all__ = [
    "ValidationResult",
    "is_valid_confirmed_value",
    "is_valid_measure_type",
    "is_valid_uuid",
    "to_confirmed_value",
    "validate_measure_request",
]
