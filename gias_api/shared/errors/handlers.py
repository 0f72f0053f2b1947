"""
Centralized error handlers for FastAPI.

Maps domain-specific, request-validation and HTTP errors to responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse shape: ``error`` plus a
``detail`` that is always present and may be null.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from gias_api.domain.establishments.errors import (
    EstablishmentError,
    EstablishmentNotFoundError,
    InvalidArgumentError,
)
from gias_api.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail},
        headers=headers,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into "location: message" pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request payloads and parameters."""
        detail = _describe_validation_errors(exc)
        logger.warning("Request validation failed: %s", detail)
        return _error_response(HTTP_422, "Invalid request", detail)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle framework HTTP errors such as unknown routes."""
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(EstablishmentNotFoundError)
    async def handle_establishment_not_found(
        _request: Request, exc: EstablishmentNotFoundError
    ) -> JSONResponse:
        """Handle unknown URN lookups."""
        logger.warning("Establishment not found: %s", exc.urn)
        return _error_response(HTTP_404, "Establishment not found")

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Handle malformed arguments such as a bad URN."""
        logger.warning("Invalid argument %s: %s", exc.param_name, exc.message)
        return _error_response(HTTP_422, "Invalid argument", exc.message)

    @app.exception_handler(EstablishmentError)
    async def handle_establishment_error(
        _request: Request, exc: EstablishmentError
    ) -> JSONResponse:
        """Handle broken establishment invariants."""
        logger.warning("Invalid establishment: %s", exc.message)
        return _error_response(HTTP_422, "Invalid establishment", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
