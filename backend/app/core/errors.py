"""Error Hierarchy — typed, categorized exceptions for all TaskTree failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) carry a user-facing message; infrastructure errors (500-level) never do
    - to_response() produces the REST error envelope: {success, error: {code, message}, timestamp}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskTreeError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - public_message separate from message: 500s log the real cause, respond with the generic text
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    PERMISSION = "permission"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    procedure: str | None = None
    account_id: int | None = None
    debug_info: dict[str, Any] | None = None


class TaskTreeError(Exception):
    """Base exception for all TaskTree errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message or message

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.public_message,
            },
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BusinessRuleError(TaskTreeError):
    """Procedure store rejected the operation (error number 51000).

    The message is the store's own text (e.g. ``categoryNameAlreadyExists``)
    and is returned to the caller unchanged.
    """
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BUSINESS_RULE_VIOLATION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class PermissionDeniedError(TaskTreeError):
    """Credential lacks the permission an endpoint requires."""
    def __init__(
        self, securable: str, permission: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"User lacks {permission} permission on {securable}",
            "UNAUTHORIZED", ErrorCategory.PERMISSION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.securable = securable
        self.permission = permission


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskTreeError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "INTERNAL_SERVER_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
            public_message=GENERIC_ERROR_MESSAGE,
        )
        self.operation = operation


class ProcedureContractError(TaskTreeError):
    """Procedure returned a result that breaks its call contract."""
    def __init__(self, procedure: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.procedure = procedure
        super().__init__(
            f"Procedure {procedure} broke its contract: {reason}",
            "INTERNAL_SERVER_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
            public_message=GENERIC_ERROR_MESSAGE,
        )
        self.procedure = procedure
