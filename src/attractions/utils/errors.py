"""
Error types for the attractions service.

Lookups, updates and deletes by name never raise: a missing record is reported
as ``None`` or ``False``. Only positional access has no not-found fallback, so
it is the one operation that raises.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    BUSINESS_LOGIC = "BUSINESS_LOGIC"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.BUSINESS_LOGIC,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.user_message = user_message or "An error occurred while processing your request."
        self.details = details or {}
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging and response."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "details": self.details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class AttractionIndexError(BaseServiceError, IndexError):
    """Raised when a positional update targets a position outside the collection."""

    def __init__(self, index: int, size: int):
        super().__init__(
            message=f"Attraction index {index} out of range for collection of size {size}",
            error_code="ATTRACTION_INDEX_OUT_OF_RANGE",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            user_message="The requested attraction position does not exist.",
            details={"index": index, "size": size},
        )
        self.index = index
        self.size = size
