"""
Request validation for the meter reading API.

All checks are pure functions. Expected failures are reported through a
ValidationResult instead of exceptions; the use cases decide which error
kind a failed result becomes.
"""
import base64
import binascii
import re
import uuid
from dataclasses import dataclass
from typing import Any, Optional

from ..domain.models.measure import MeasureType
from .datetime_utils import parse_iso
from .image_utils import strip_data_url_prefix

_INTEGER_PATTERN = re.compile(r"[+-]?\d{1,20}")

# Signed 64-bit, the widest integer MongoDB stores
MIN_CONFIRMED_VALUE = -(2 ** 63)
MAX_CONFIRMED_VALUE = 2 ** 63 - 1

_MEASURE_TYPES = frozenset(measure_type.value for measure_type in MeasureType)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: valid, or invalid with a readable reason."""
    is_valid: bool
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error_message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=error_message)


def is_valid_base64(value: Any) -> bool:
    """
    True for canonical base64 text that decodes to at least one byte.
    A leading data URL prefix ("data:image/png;base64,") is allowed.
    """
    if not isinstance(value, str) or not value:
        return False

    payload = strip_data_url_prefix(value)
    try:
        decoded = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return False
    return bool(decoded) and base64.b64encode(decoded).decode("ascii") == payload


def is_valid_customer_code(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_valid_measure_type(value: Any, case_sensitive: bool = True) -> bool:
    """WATER or GAS; lower/mixed case is accepted only when case_sensitive is False."""
    if not isinstance(value, str):
        return False
    candidate = value if case_sensitive else value.upper()
    return candidate in _MEASURE_TYPES


def is_valid_datetime(value: Any) -> bool:
    return parse_iso(value) is not None


def is_valid_uuid(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def is_valid_confirmed_value(value: Any) -> bool:
    """
    True when value represents a 64-bit integer: 123, 123.0, "123", " -7 ".
    Booleans, fractional numbers, non-numeric strings and out-of-range
    values are rejected.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            return False
        number = int(value)
    elif isinstance(value, str):
        if _INTEGER_PATTERN.fullmatch(value.strip()) is None:
            return False
        number = int(value.strip())
    else:
        return False
    return MIN_CONFIRMED_VALUE <= number <= MAX_CONFIRMED_VALUE


def to_confirmed_value(value: Any) -> int:
    """Convert a value accepted by is_valid_confirmed_value to int."""
    if not is_valid_confirmed_value(value):
        raise ValueError(f"Not an integer value: {value!r}")
    if isinstance(value, str):
        return int(value.strip())
    return int(value)


def validate_measure_request(request: Any) -> ValidationResult:
    """
    Validate an upload payload.

    Checks, in order: image present and base64, customer code present,
    measure type WATER/GAS (case-sensitive), measure_datetime ISO-8601 when given.

    Args:
        request: object exposing image, customer_code, measure_type and
            measure_datetime attributes (missing attributes count as absent)
    """
    image = getattr(request, "image", None)
    customer_code = getattr(request, "customer_code", None)
    measure_type = getattr(request, "measure_type", None)
    measure_datetime = getattr(request, "measure_datetime", None)

    if not image:
        return ValidationResult.fail("Image is required")
    if not is_valid_base64(image):
        return ValidationResult.fail("Invalid base64 image")

    if not is_valid_customer_code(customer_code):
        return ValidationResult.fail("Valid customer code is required")

    if not is_valid_measure_type(measure_type, case_sensitive=True):
        return ValidationResult.fail("Measure type must be WATER or GAS")

    if measure_datetime is not None and not is_valid_datetime(measure_datetime):
        return ValidationResult.fail("measure_datetime must be an ISO-8601 datetime")

    return ValidationResult.ok()
