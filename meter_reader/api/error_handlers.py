"""Central mapping from exceptions to JSON error responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..domain.exceptions import ErrorKind, MeasureError

logger = logging.getLogger(__name__)

# error_code for framework-raised HTTP errors (unknown route, wrong method)
HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_response(error: MeasureError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_response())


async def handle_measure_error(request: Request, exc: MeasureError) -> JSONResponse:
    if exc.kind.is_server_error:
        logger.error(
            f"Server error on {request.method} {request.url.path}: {exc.description}",
            exc_info=exc,
        )
    return error_response(exc)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    description = f"{location}: {message}" if location else message
    return error_response(MeasureError(ErrorKind.INVALID_DATA, description))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            "error_description": str(exc.detail),
        },
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(MeasureError(ErrorKind.SERVER_ERROR))


def register_error_handlers(application: FastAPI) -> None:
    """Install the exception handlers on the application"""
    application.add_exception_handler(MeasureError, handle_measure_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
    application.add_exception_handler(Exception, handle_unexpected_error)
