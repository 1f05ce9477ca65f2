"""Error Hierarchy — typed, categorized exceptions for all Personality API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - severity picks the log level, category and debug_info go into the log record
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the shared envelope: {error, message, details?}
    - No internal details leaked in user-facing messages
    - Gateway outcomes (RecordNotFoundError, DuplicateRecordError) never reach the HTTP boundary

Design Decisions:
    - Single hierarchy with PersonalityAPIError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Gateway outcomes are plain exceptions: the service translates them into domain errors,
      so the persistence layer stays free of HTTP vocabulary
"""

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    personality_id: int | None = None
    debug_info: dict[str, Any] | None = None


class PersonalityAPIError(Exception):
    """Base exception for all Personality API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details or {}

    @property
    def title(self) -> str:
        """Short error title, the HTTP reason phrase by default."""
        return HTTPStatus(self.http_status).phrase

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        body: dict[str, Any] = {"error": self.title, "message": self.message}
        if self.details:
            body["details"] = dict(self.details)
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequestError(PersonalityAPIError):
    """Malformed path parameter or request body."""
    def __init__(self, message: str, details: dict[str, str] | None = None,
                 context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, details,
        )


class RequestValidationFailedError(PersonalityAPIError):
    """Transfer object failed field-level validation."""
    def __init__(self, violations: dict[str, str], context: ErrorContext | None = None):
        super().__init__(
            "The provided data is invalid", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
            violations,
        )

    @property
    def title(self) -> str:
        return "Validation Error"


class InvalidIdError(PersonalityAPIError):
    """Identifier is zero or unset."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID", "INVALID_ID", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class PersonalityNotFoundError(PersonalityAPIError):
    """No personality stored under the requested identifier."""
    def __init__(self, personality_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.personality_id = personality_id
        super().__init__(
            "Personality not found", "NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.personality_id = personality_id


class PersonalityAlreadyExistsError(PersonalityAPIError):
    """Another personality already uses the requested name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            "A personality with this name already exists", "ALREADY_EXISTS",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context, 409,
        )
        self.name = name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PersonalityAPIError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"operation": operation, "reason": message}
        super().__init__(
            "An unexpected error occurred", "DATABASE_ERROR",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, ctx, 500,
        )


# ─── Gateway Outcomes (never rendered) ──────────────────────────

class RecordNotFoundError(Exception):
    """The store returned no rows for a lookup."""
    def __init__(self, record_id: int):
        super().__init__(f"no row with id {record_id}")
        self.record_id = record_id


class DuplicateRecordError(Exception):
    """The store rejected a write on its unique constraint."""
