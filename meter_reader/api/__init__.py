"""
HTTP layer for the meter reader.

Exposes the measure endpoints (upload, confirm, list) and the image
download endpoint, plus the central error-to-response mapping.
"""
from .measure_controller import router as measure_router
from .image_controller import router as image_router
from .error_handlers import register_error_handlers


__all__ = ["measure_router", "image_router", "register_error_handlers"]
