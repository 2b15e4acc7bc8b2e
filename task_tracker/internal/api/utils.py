"""
API utility functions for response formatting and error mapping.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_tracker.core.errors import (
    StoreError,
    TaskNotFoundError,
    TaskTrackerError,
    TaskValidationError,
)
from task_tracker.core.logger import logger


def error_response(status_code: int, message: str) -> JSONResponse:
    """
    Create an error response.

    Args:
        status_code: HTTP status code
        message: Error message

    Returns:
        JSONResponse with body {"error": message}
    """
    return JSONResponse(status_code=status_code, content={"error": message})


def status_for_error(exception: TaskTrackerError) -> int:
    """Map a service error to its HTTP status code."""
    if isinstance(exception, TaskValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exception, TaskNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers that render every known error as {"error": ...}."""

    @app.exception_handler(TaskTrackerError)
    async def handle_task_tracker_error(request: Request, exc: TaskTrackerError):
        code = status_for_error(exc)
        if isinstance(exc, StoreError):
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning(f"Invalid request {request.method} {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)
