"""Error Hierarchy — typed, categorized exceptions for reporting failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Closed set of concrete kinds: ResourceNotFoundError, FetchFailureError,
      OperationCancelledError
    - Context is structured (operation, entity type/id), never free text
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ReportingError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability without coupling to the logging setup
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CANCELLED = "cancelled"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Structured context attached to every reporting error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    entity_type: str | None = None
    entity_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ReportingError(Exception):
    """Base exception for all reporting errors."""

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
                    "operation": self.context.operation,
                    "entity_type": self.context.entity_type,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ReportingError):
    """Single-entity lookup found no matching row."""
    def __init__(
        self, entity_type: str, entity_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_type = entity_type
        ctx.entity_id = str(entity_id)
        super().__init__(
            f"{entity_type} '{entity_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class FetchFailureError(ReportingError):
    """Underlying data source failed during a read."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Fetch {operation} failed: {message}",
            "FETCH_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class OperationCancelledError(ReportingError):
    """Computation was cancelled or timed out before completing."""
    def __init__(
        self,
        operation: str,
        timeout_seconds: float | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        if timeout_seconds is not None:
            message = f"{operation} cancelled after {timeout_seconds:g}s"
            ctx.debug_info = {"timeout_seconds": timeout_seconds}
        else:
            message = f"{operation} cancelled"
        super().__init__(
            message, "OPERATION_CANCELLED", ErrorCategory.CANCELLED,
            ErrorSeverity.WARNING, ctx, 504,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
