"""Error Hierarchy: typed, categorized exceptions for every store and lookup failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-caused errors (bad id, unknown id) are 400-level; store failures are 500-level
    - to_response() keeps the message under the "error" key of the REST envelope

Design Decisions:
    - Single hierarchy with KanbanError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Repositories raise these, services never catch them (no retry anywhere)
"""

from dataclasses import dataclass, field
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    DECODE = "decode"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class KanbanError(Exception):
    """Base exception for all Kanban API errors."""

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
        """Convert to the REST error envelope: {"error": <message>, ...}."""
        return {
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Lookup Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(KanbanError):
    """Identifier string cannot be parsed into the store's native id form."""
    def __init__(self, kind: str, raw: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or kind
        super().__init__(
            f"Invalid {kind} id: {raw!r}",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.kind = kind
        self.raw = raw


class ResourceNotFoundError(KanbanError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, lookup: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        ctx.entity_id = ctx.entity_id or lookup
        super().__init__(
            f"{resource_type} '{lookup}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.lookup = lookup


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreUnavailableError(KanbanError):
    """Store connection or write failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class DecodeError(KanbanError):
    """Stored row cannot be mapped onto the entity shape."""
    def __init__(self, resource_type: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        super().__init__(
            f"Cannot decode stored {resource_type}: {reason}",
            "DECODE_ERROR", ErrorCategory.DECODE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.resource_type = resource_type


class StoreTimeoutError(KanbanError):
    """Store operation exceeded its deadline."""
    def __init__(
        self, operation: str, timeout_seconds: float, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Store {operation} timed out after {timeout_seconds:g}s",
            "STORE_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ctx, 504,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
