from typing import Any, List, Optional

from pydantic import BaseModel


class MeasureUploadRequest(BaseModel):
    """DTO for POST /upload. Fields are optional so validators can report what is missing."""
    image: Optional[str] = None  # base64, optionally as a data URL
    customer_code: Optional[str] = None
    measure_datetime: Optional[str] = None  # accepted but the server assigns the stored time
    measure_type: Optional[str] = None


class MeasureUploadResponse(BaseModel):
    """DTO for upload response"""
    image_url: str
    measure_value: int
    measure_uuid: str


class MeasureConfirmRequest(BaseModel):
    """DTO for PATCH /confirm"""
    measure_uuid: Optional[str] = None
    confirmed_value: Any = None  # int or integer-like string, checked by validators


class MeasureConfirmResponse(BaseModel):
    success: bool = True


class MeasureSummary(BaseModel):
    """One entry of a customer's measure list"""
    measure_uuid: str
    measure_datetime: str
    measure_type: str
    has_confirmed: bool
    image_url: str


class MeasureListResponse(BaseModel):
    customer_code: str
    measures: List[MeasureSummary]


class ErrorResponse(BaseModel):
    """Body returned for every error status"""
    error_code: str
    error_description: str
