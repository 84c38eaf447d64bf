"""Error Handlers: global exception handlers for the daily tracker API.

Invariants:
    - Every error body has one shape: TrackerError.to_response()
      ({"error": {code, message, category, severity, timestamp, details}})
    - RequestValidationError → 400 VALIDATION_ERROR, details.errors per field
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Validation and catch-all failures are wrapped in TrackerError subclasses
      instead of hand-built dicts
    - 400-level errors log at WARNING, 500-level at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from daily_tracker.core.errors import (
    InvalidRequestError, TrackerError, UnexpectedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TrackerError, handle_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _respond(request: Request, err: TrackerError) -> JSONResponse:
    level = logging.WARNING if err.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{err.code}: {err.message}",
        extra={
            "error_code": err.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=err.http_status, content=err.to_response())


async def handle_tracker_error(request: Request, exc: TrackerError):
    return _respond(request, exc)


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
):
    errors = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return _respond(request, InvalidRequestError(errors))


async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all: the exception text goes to the log, never the body."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
    )
    return _respond(request, UnexpectedError())
