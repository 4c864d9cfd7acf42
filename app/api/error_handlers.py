"""Error Handlers — global exception handlers for the Bloglist API.

Invariants:
    - BloglistError → JSON {"error": message, code, category, severity} with the error's status
    - RequestValidationError → 400 with field-level details
    - Framework HTTP errors (unknown route, wrong method) keep their status, same envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four handlers: domain (BloglistError), framework HTTP, validation (Pydantic), catch-all
    - 4xx domain errors logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import BloglistError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bloglist_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_bloglist_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(BloglistError)
    async def bloglist_error_handler(request: Request, exc: BloglistError):
        """Handle all Bloglist domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"BloglistError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
                "entity_kind": exc.context.entity_kind,
                "entity_id": exc.context.entity_id,
            },
        )
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if exc.http_status == status.HTTP_401_UNAUTHORIZED else None
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(), headers=headers,
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (unknown endpoint, bad method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "unknown endpoint"
                if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail),
                "code": "HTTP_ERROR",
                "category": "internal",
                "severity": ErrorSeverity.WARNING.value,
            },
            headers=getattr(exc, "headers", None),
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


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    summary = (
        f"{details[0]['field']}: {details[0]['message']}"
        if details else "Invalid request data"
    )
    return {
        "error": summary,
        "code": "VALIDATION_ERROR",
        "category": "validation",
        "severity": ErrorSeverity.ERROR.value,
        "details": details,
    }
