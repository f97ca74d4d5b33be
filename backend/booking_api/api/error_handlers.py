"""Error Handlers: global exception handlers and the ErrorKind → HTTP status mapping.

Invariants:
    - BookingApiError → status from HTTP_STATUS_BY_KIND + structured JSON envelope
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - An ErrorKind missing from the mapping collapses to 500

Design Decisions:
    - Three-layer handler: domain (BookingApiError), validation (Pydantic), catch-all (Exception)
    - Status mapping lives here so core/ stays free of HTTP concerns
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from booking_api.core.errors import BookingApiError, ErrorKind, ErrorSeverity

logger = logging.getLogger(__name__)

HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DATABASE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    return HTTP_STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_booking_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_booking_error_handler(app: FastAPI) -> None:
    """Register booking domain/infrastructure error handler."""

    @app.exception_handler(BookingApiError)
    async def booking_error_handler(request: Request, exc: BookingApiError):
        """Handle all booking domain/infrastructure errors."""
        http_status = status_for(exc.kind)
        log = logger.error if http_status >= 500 else logger.warning
        log(
            f"BookingApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "booking_id": exc.context.booking_id,
                "room_id": exc.context.room_id,
            },
        )
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if exc.kind is ErrorKind.UNAUTHORIZED else None
        )
        return JSONResponse(
            status_code=http_status, content=exc.to_response(), headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "kind": ErrorKind.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "kind": ErrorKind.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
