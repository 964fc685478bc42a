from .measure_dto import (
    ErrorResponse,
    MeasureConfirmRequest,
    MeasureConfirmResponse,
    MeasureListResponse,
    MeasureSummary,
    MeasureUploadRequest,
    MeasureUploadResponse,
)

__all__ = [
    "ErrorResponse",
    "MeasureConfirmRequest",
    "MeasureConfirmResponse",
    "MeasureListResponse",
    "MeasureSummary",
    "MeasureUploadRequest",
    "MeasureUploadResponse",
]
