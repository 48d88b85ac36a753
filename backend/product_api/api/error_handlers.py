"""Error Handlers — global exception handlers for the Product API.

Invariants:
    - ProductApiError → structured JSON with error code, message, severity
    - RequestValidationError (malformed/incomplete body) → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details
    - All three share the ProductApiError envelope, timestamp and context included

Design Decisions:
    - Three-layer handler: domain (ProductApiError), validation (Pydantic), catch-all (Exception)
    - 4xx logged at WARNING, 5xx at ERROR: caller mistakes are not incidents
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from product_api.core.errors import (
    ErrorCategory, ErrorSeverity, ProductApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_product_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_product_api_error_handler(app: FastAPI) -> None:
    """Register domain/backend error handler."""

    @app.exception_handler(ProductApiError)
    async def product_api_error_handler(request: Request, exc: ProductApiError):
        """Handle all Product API domain/backend errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"ProductApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
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
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        error = ProductApiError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error.to_response(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    error = ProductApiError(
        "Invalid request data", "VALIDATION_ERROR",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR, http_status=400,
    )
    response = error.to_response()
    response["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return response
