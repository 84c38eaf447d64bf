"""Error Hierarchy: typed, categorized exceptions for every request failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the REST envelope
    - StorageError never carries driver detail into the user-facing message

Design Decisions:
    - Single hierarchy with TrackerError base: FastAPI global handler catches all
    - Structured details dict instead of free text so clients can point at fields
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


class TrackerError(Exception):
    """Base exception for all daily tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.details = details or {}
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
                "details": self.details,
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class MissingFieldsError(TrackerError):
    """Required body field absent or null."""
    def __init__(self, fields: list[str]):
        super().__init__(
            f"Missing fields in request body: {', '.join(fields)}.",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, {"fields": fields}, 400,
        )
        self.fields = fields


class InvalidDateFormatError(TrackerError):
    """A date or date-time value did not parse."""
    def __init__(self, field: str, value: Any):
        super().__init__(
            f"Invalid date format for '{field}'.",
            "INVALID_DATE_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, {"field": field, "value": str(value)}, 400,
        )
        self.field = field


class InvalidRequestError(TrackerError):
    """Body is not JSON, or a field has the wrong type."""
    def __init__(self, errors: list[dict[str, str]]):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, {"errors": errors}, 400,
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(TrackerError):
    """Store operation failed. Detail stays in the server log."""
    def __init__(self, reason: str, operation: str):
        super().__init__(
            "Database error.",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, {"operation": operation}, 500,
        )
        self.reason = reason
        self.operation = operation


class UnexpectedError(TrackerError):
    """Anything no other handler claimed. Never carries the original message."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, None, 500,
        )
