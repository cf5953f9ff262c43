"""
Custom Exceptions Module

All exceptions inherit from EmailAutocorrectError so callers can catch
the whole family at once. Validation and correction never raise these for
string input; they surface from I/O edges (TLD loading, batch files).
"""

from typing import Any, Dict, Optional


class EmailAutocorrectError(Exception):
    """
    Base exception for the package.

    Attributes:
        message: Human-readable error message
        details: Additional error details (optional)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class TLDLoadError(EmailAutocorrectError):
    """
    Raised when a TLD list cannot be fetched or parsed.

    Never escapes DomainRegistry.load_tlds(); it is logged there and the
    registry keeps its current TLD set.
    """

    def __init__(
        self,
        message: str = "Failed to load TLD list",
        source_url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            details={"source_url": source_url, **(details or {})},
        )


class ColumnNotFoundError(EmailAutocorrectError):
    """Raised when a batch file has no column with the requested name."""

    def __init__(self, column: str, available: Optional[list] = None):
        super().__init__(
            message=f"Column '{column}' not found",
            details={"column": column, "available": available or []},
        )
        self.column = column
