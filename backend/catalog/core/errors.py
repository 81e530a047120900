"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Data-integrity errors are raised at join time, never deferred to render time
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Join failures are fail-fast: one unresolved reference rejects the whole catalog
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_INTEGRITY = "data_integrity"
    DATA_SOURCE = "data_source"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(CatalogError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Data Errors (500-level) ────────────────────────────────────

class ReferentialIntegrityError(CatalogError):
    """A foreign key in the static collections does not resolve."""
    def __init__(
        self,
        record_kind: str,
        missing_key: Any,
        referrer: str,
        context: ErrorContext | None = None,
        code: str = "REFERENTIAL_INTEGRITY",
        message: str | None = None,
    ):
        super().__init__(
            message or f"{referrer} references unknown {record_kind} id={missing_key!r}",
            code, ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.record_kind = record_kind
        self.missing_key = missing_key
        self.referrer = referrer


class DuplicateRecordError(ReferentialIntegrityError):
    """Two records of one collection share an identity — the index is ambiguous."""
    def __init__(
        self, record_kind: str, duplicate_key: Any, context: ErrorContext | None = None,
    ):
        super().__init__(
            record_kind, duplicate_key, f"{record_kind} collection", context,
            code="DUPLICATE_RECORD",
            message=f"Duplicate {record_kind} id={duplicate_key!r}",
        )


class CatalogLoadError(CatalogError):
    """A static collection could not be read or failed validation."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.source = source
        super().__init__(
            f"Failed to load {source}: {message}",
            "CATALOG_LOAD_FAILED", ErrorCategory.DATA_SOURCE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.source = source


class CatalogUnavailableError(CatalogError):
    """Request arrived before the catalog was loaded."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Catalog is not loaded",
            "CATALOG_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
