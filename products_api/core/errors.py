"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the JSON body the client receives, nothing more
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProductApiError base: one FastAPI handler catches all
    - Response bodies keep the public contract: {"errors": [...]} for validation,
      {"error": "..."} for everything else
"""

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
    INTERNAL = "internal"


PRODUCT_NOT_FOUND_MESSAGE = "No existe el producto"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class ProductApiError(Exception):
    """Base exception for all products API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the JSON error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(ProductApiError):
    """One or more field rules rejected the request."""
    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            f"{len(errors)} validation error(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"errors": self.errors}


class ProductNotFoundError(ProductApiError):
    """Valid id, but no product row matches it."""
    def __init__(self, product_id: int):
        super().__init__(
            PRODUCT_NOT_FOUND_MESSAGE,
            "PRODUCT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ProductApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
