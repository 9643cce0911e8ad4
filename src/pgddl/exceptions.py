"""
Exception classes for pgddl.
"""

from typing import Any, Dict, Optional


class PgDDLError(Exception):
    """Base exception for all pgddl errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        result = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            result += f" [{details_str}]"
        if self.cause:
            result += f" (caused by: {self.cause})"
        return result


class ConfigurationError(PgDDLError):
    """Raised when there's an error in configuration."""

    pass


class ValidationError(PgDDLError):
    """Raised when input cannot be turned into a valid statement."""

    pass


class SchemaError(PgDDLError):
    """Raised when there's an error generating a schema statement."""

    pass


class UnsupportedOperationError(SchemaError):
    """Raised when an operation has no DDL rendition."""

    def __init__(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Operation '{operation}' is not supported", details)
        self.operation = operation


class IrreversibleOperationError(SchemaError):
    """Raised when an inverse statement cannot be derived for an operation."""

    def __init__(
        self,
        operation: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(f"Operation '{operation}' cannot be reversed: {reason}", details)
        self.operation = operation
        self.reason = reason
