# Standard library imports
import secrets
import string
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


CUSTOMER_CODE_ALPHABET = string.ascii_uppercase + string.digits
CUSTOMER_CODE_LENGTH = 8


class MeasureType(str, Enum):
    """Kind of utility meter a reading belongs to."""
    WATER = "WATER"
    GAS = "GAS"


def generate_customer_code(length: int = CUSTOMER_CODE_LENGTH) -> str:
    """Random customer code made of upper-case letters and digits."""
    return "".join(secrets.choice(CUSTOMER_CODE_ALPHABET) for _ in range(length))


@dataclass
class Measure:
    """
    Pure domain model for a meter reading.

    A measure is created by the upload workflow with the OCR value already
    populated (Pending) and becomes Confirmed once confirmed_value is set.
    confirmed_value is set at most once; measure_value never changes.
    """
    id: Optional[int]
    measure_uuid: str
    customer_code: str
    measure_datetime: datetime
    billing_month: str  # "YYYY-MM" bucket derived from measure_datetime
    measure_type: MeasureType
    measure_value: int
    image_path: str  # file name under the image storage root
    confirmed_value: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.measure_uuid:
            raise ValueError("Measure UUID is required")
        if not self.customer_code or len(self.customer_code.strip()) < 1:
            raise ValueError("Customer code is required")
        if not isinstance(self.measure_type, MeasureType):
            raise ValueError(f"Invalid measure type: {self.measure_type!r}")
        if not self.billing_month:
            raise ValueError("Billing month is required")
        if not self.image_path:
            raise ValueError("Image path is required")

    @property
    def is_confirmed(self) -> bool:
        return self.confirmed_value is not None
