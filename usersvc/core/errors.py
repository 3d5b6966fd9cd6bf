"""Error Hierarchy: typed, categorized exceptions for every users-service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity), http_status
    - message is the static text sent to the client, never driver output
    - Debug detail lives in ErrorContext and only reaches the logs

Design Decisions:
    - Single hierarchy with UserServiceError base: FastAPI global handler catches all (ADR: uniform error shape)
    - http_status is a constructor argument for handler-facing errors so the
      error-mapping policy decides the status, not the exception class
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    STATIC_ASSET = "static_asset"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    operation: str | None = None


class UserServiceError(Exception):
    """Base exception for all users-service errors."""

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

    def log_extra(self) -> dict:
        """Fields attached to the log record (surfaced by JSONFormatter)."""
        return {
            "error_code": self.code,
            "user_id": self.context.user_id,
            "operation": self.context.operation,
        }


# ─── Client-facing Errors ───────────────────────────────────────

class InvalidUserIdError(UserServiceError):
    """Path identifier is not a valid ObjectId."""
    def __init__(self, raw_id: str, http_status: int = 500, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = raw_id
        super().__init__(
            "INVALID ID", "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, http_status,
        )
        self.raw_id = raw_id


class ResourceNotFoundError(UserServiceError):
    """Requested user does not exist (or could not be read back)."""
    def __init__(self, message: str = "USER NOT FOUND", context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class StoreOperationError(UserServiceError):
    """A store call failed and the handler reports it with a fixed status."""
    def __init__(self, message: str, http_status: int = 500, context: ErrorContext | None = None):
        super().__init__(
            message, "STORE_OPERATION_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, context, http_status,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(UserServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class StaticAssetMissingError(UserServiceError):
    """A fixed page asset is missing; raised during startup."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Static asset missing: {path}", "STATIC_ASSET_MISSING",
            ErrorCategory.STATIC_ASSET, ErrorSeverity.CRITICAL, context, 500,
        )
        self.path = path
