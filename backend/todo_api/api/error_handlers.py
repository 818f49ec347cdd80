"""Error Handlers — the only place typed errors become HTTP status codes.

Invariants:
    - TodoApiError → uniform envelope (TodoApiError.to_response) with a status
      chosen by the route, or by DEFAULT_HTTP_STATUS when it escapes a route
    - Exception (catch-all) → never leaks internal details, 500

Design Decisions:
    - Routes pass the status explicitly to error_response(): the same category
      maps to different statuses on different routes (malformed id is 404 on
      GET, 400 on PUT/DELETE)
    - Two-layer handler: domain (TodoApiError), catch-all (Exception). Routes take raw
      str ids and read bodies by hand, so FastAPI request validation never fires
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from todo_api.core.errors import ErrorCategory, ErrorSeverity, TodoApiError

logger = logging.getLogger(__name__)

DEFAULT_HTTP_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.MALFORMED_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCategory.CONNECTIVITY: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCategory.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def log_error(exc: TodoApiError, request: Request | None = None) -> None:
    """Log a typed error that is about to become a response."""
    logger.warning(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "todo_id": exc.context.todo_id,
            "path": request.url.path if request else None,
            "method": request.method if request else None,
        },
    )


def error_response(
    exc: TodoApiError, status_code: int, request: Request | None = None,
) -> JSONResponse:
    """Render a typed error with the status the caller picked."""
    log_error(exc, request)
    return JSONResponse(status_code=status_code, content=exc.to_response())


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_todo_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_todo_api_error_handler(app: FastAPI) -> None:
    """Register handler for typed errors that escaped a route."""

    @app.exception_handler(TodoApiError)
    async def todo_api_error_handler(request: Request, exc: TodoApiError):
        """Handle all Todo API domain/infrastructure errors."""
        return error_response(exc, DEFAULT_HTTP_STATUS[exc.category], request)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
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
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
