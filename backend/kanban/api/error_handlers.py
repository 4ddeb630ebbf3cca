"""Error Handlers: global exception handlers for the Kanban API.

Invariants:
    - KanbanError -> {"error": message, "code", "category", ...} with the error's status
    - Malformed or missing JSON body -> plain-text "Invalid JSON", 400
    - Other RequestValidationError -> JSON "error" with field-level details, 400
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Three-layer handler: domain (KanbanError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from kanban.core.errors import KanbanError, ErrorSeverity

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_kanban_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_kanban_error_handler(app: FastAPI) -> None:
    """Register domain/store error handler."""

    @app.exception_handler(KanbanError)
    async def kanban_error_handler(request: Request, exc: KanbanError):
        """Handle all Kanban lookup and store errors."""
        logger.error(
            f"KanbanError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
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
        """Handle body decoding and field validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        if is_malformed_body(exc):
            return PlainTextResponse(
                INVALID_JSON_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST,
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
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        )


def is_malformed_body(exc: RequestValidationError) -> bool:
    """True when the body is not JSON, is missing, or is not a JSON object."""
    for e in exc.errors():
        if e["type"] == "json_invalid":
            return True
        if tuple(e["loc"]) == ("body",):
            return True
    return False


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": "Invalid request data",
        "code": "VALIDATION_ERROR",
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
    }
