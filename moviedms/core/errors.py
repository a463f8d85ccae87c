"""Error Hierarchy — typed, categorized exceptions for Movie DMS internals.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised only by internal helpers (field parsing, CSV reading)
    - Public store operations catch them and answer with bool / LoadReport
    - to_dict() produces a JSON-safe envelope for logging

Design Decisions:
    - Single hierarchy with MovieDMSError base: one except clause at each boundary
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    PARSE = "parse"
    RESOURCE_NOT_FOUND = "resource_not_found"
    IO = "io"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where the error happened; any subset may be known."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    movie_id: str | None = None
    field_name: str | None = None
    line_number: int | None = None


class MovieDMSError(Exception):
    """Base exception for all Movie DMS errors."""

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

    def to_dict(self) -> dict:
        """Convert to a JSON-safe error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "movie_id": self.context.movie_id,
                    "field_name": self.context.field_name,
                    "line_number": self.context.line_number,
                },
            }
        }


# ─── Input Errors (recoverable) ─────────────────────────────────

class FieldParseError(MovieDMSError):
    """Text could not be converted to the field's numeric type."""
    def __init__(
        self, field_name: str, raw_value: str, expected: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"{field_name}: {raw_value!r} is not a valid {expected}",
            "FIELD_PARSE_ERROR", ErrorCategory.PARSE,
            ErrorSeverity.WARNING, ctx,
        )
        self.field_name = field_name
        self.raw_value = raw_value


class UnknownFieldError(MovieDMSError):
    """Update requested a field name that is not updatable."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"Unsupported field: {field_name!r}",
            "UNKNOWN_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.field_name = field_name


# ─── Source Errors (batch-level) ────────────────────────────────

class SourceNotFoundError(MovieDMSError):
    """CSV path does not exist or is not a regular file."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"File not found: {path}",
            "SOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )
        self.path = path


class SourceUnreadableError(MovieDMSError):
    """CSV path exists but could not be read or decoded."""
    def __init__(self, path: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Could not read {path}: {reason}",
            "SOURCE_UNREADABLE", ErrorCategory.IO,
            ErrorSeverity.ERROR, context,
        )
        self.path = path
        self.reason = reason
