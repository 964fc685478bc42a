"""
Error kinds for the meter reading workflow.

Every failure the API can report is one ErrorKind member. Each member carries
its HTTP status code, a stable machine-readable code and a default display
message. MeasureError wraps a single kind and is translated to a response in
one place (api.error_handlers).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Dict, Optional


class ErrorKind(Enum):
    """Tagged enumeration of domain error kinds."""

    INVALID_DATA = (400, "INVALID_DATA", "Request data is invalid")
    INVALID_TYPE = (400, "INVALID_TYPE", "Measure type not allowed")
    MEASURE_NOT_FOUND = (404, "MEASURE_NOT_FOUND", "Measure not found")
    MEASURES_NOT_FOUND = (404, "MEASURES_NOT_FOUND", "No measures found")
    IMAGE_NOT_FOUND = (404, "IMAGE_NOT_FOUND", "Image not found")
    DOUBLE_REPORT = (409, "DOUBLE_REPORT", "Reading for this month already registered")
    CONFIRMATION_DUPLICATE = (409, "CONFIRMATION_DUPLICATE", "Measure already confirmed")
    SERVER_ERROR = (500, "SERVER_ERROR", "An unexpected error occurred")

    def __init__(self, status_code: int, code: str, message: str) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class MeasureError(Exception):
    """Exception carrying one ErrorKind and an optional detailed description."""

    def __init__(self, kind: ErrorKind, description: Optional[str] = None) -> None:
        super().__init__(description or kind.message)
        self.kind = kind
        self.description = description or kind.message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def error_code(self) -> str:
        return self.kind.code

    def to_response(self) -> Dict[str, str]:
        """
        Build the JSON error body.

        Server errors never expose their description; only the kind's generic
        message is returned to the caller.
        """
        description = self.kind.message if self.kind.is_server_error else self.description
        return {
            "error_code": self.kind.code,
            "error_description": description,
        }
