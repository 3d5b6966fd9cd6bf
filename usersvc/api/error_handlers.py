"""Error Handlers: global exception handlers for the users API.

Invariants:
    - UserServiceError → its http_status with its static message as text/plain
    - RequestValidationError → 422 with field-level error details (JSON)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (UserServiceError), validation (Pydantic), catch-all (Exception)
    - Plain-text bodies for domain errors: the /users contract returns fixed strings,
      not a JSON envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from usersvc.core.errors import ErrorSeverity, UserServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserServiceError)
    async def service_error_handler(request: Request, exc: UserServiceError):
        """Handle all users-service domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                **exc.log_extra(),
                "path": request.url.path,
                "method": request.method,
            },
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=422,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

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
                    "category": "internal",
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
            "category": "validation",
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
