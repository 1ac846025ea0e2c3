"""Error Hierarchy - typed, categorized exceptions for every Animal API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) never reach the store; store errors are 500/504
    - to_response() produces the single REST error envelope used by every handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AnimalApiError base: one FastAPI handler renders all of them
    - ErrorContext as dataclass: carries observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    animal_id: str | None = None
    operation: str | None = None


class AnimalApiError(Exception):
    """Base exception for all Animal API errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "animal_id": self.context.animal_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidAnimalIdError(AnimalApiError):
    """Path id is not a valid ObjectId."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.animal_id = raw_id
        super().__init__(
            "Invalid animal ID",
            "INVALID_ANIMAL_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class AnimalNotFoundError(AnimalApiError):
    """No animal document matches the requested id."""
    def __init__(self, animal_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.animal_id = animal_id
        super().__init__(
            f"Animal '{animal_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(AnimalApiError):
    """Store operation failed (connection, server or document decode)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class DatabaseTimeoutError(AnimalApiError):
    """Store operation exceeded the per-request deadline."""
    def __init__(
        self, operation: str, timeout_seconds: float | None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        deadline = f" {timeout_seconds:g}s" if timeout_seconds is not None else ""
        super().__init__(
            f"Database {operation} exceeded{deadline} deadline",
            "DATABASE_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ctx, 504,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
