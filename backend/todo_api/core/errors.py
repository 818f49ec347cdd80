"""Error Hierarchy — typed, categorized exceptions for every Todo API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - No HTTP status lives here: the API layer maps categories to status codes
    - to_response() produces the REST envelope shared by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TodoApiError base: one global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """The four failure kinds a request can end in, plus internal."""
    MALFORMED_INPUT = "malformed_input"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PERSISTENCE = "persistence"
    CONNECTIVITY = "connectivity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    todo_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class TodoApiError(Exception):
    """Base exception for all Todo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "todo_id": self.context.todo_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Request Errors ──────────────────────────────────────────────

class MalformedInputError(TodoApiError):
    """Path id or request body could not be parsed."""
    def __init__(
        self, message: str, field: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "MALFORMED_INPUT", ErrorCategory.MALFORMED_INPUT,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class ResourceNotFoundError(TodoApiError):
    """Requested resource does not exist (or was soft-deleted)."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors ───────────────────────────────────────

class PersistenceError(TodoApiError):
    """The store rejected a read or write."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.PERSISTENCE,
            ErrorSeverity.ERROR, ctx,
        )
        self.operation = operation


class DatabaseConnectionError(TodoApiError):
    """The store cannot be reached. Fatal when raised during startup."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATABASE_UNAVAILABLE", ErrorCategory.CONNECTIVITY,
            ErrorSeverity.CRITICAL, context,
        )
