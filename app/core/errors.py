"""Error Hierarchy — typed, categorized exceptions for all Bloglist failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries a human-readable "error" message field
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BloglistError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    entity_kind: str | None = None
    entity_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BloglistError(Exception):
    """Base exception for all Bloglist errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(BloglistError):
    """Entity fields violate a domain rule."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidIdentifierError(BloglistError):
    """Identifier is not in the storage id format."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            "malformatted id", "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_id = raw_id


class AuthenticationError(BloglistError):
    """Login failed. Never says which factor was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "invalid username or password", "AUTHENTICATION_FAILED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(BloglistError):
    """Missing/invalid/expired token (401) or not the owner (403)."""
    def __init__(
        self, message: str, http_status: int = 401,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "NOT_AUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, http_status,
        )


class ResourceNotFoundError(BloglistError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BloglistError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
