"""
Exception types raised by biotools.

Every error derives from BiotoolsError so callers can catch the whole
family in one place, while the concrete classes also inherit from the
matching builtin (ValueError, LookupError) for code that already expects
those.
"""

from typing import Optional


class BiotoolsError(Exception):
    """Base class for all biotools errors."""


class ValidationError(BiotoolsError, ValueError):
    """The input failed the character-set check required by an operation."""


class UnsupportedOperationError(BiotoolsError, LookupError):
    """
    Raised for an operation identifier the dispatcher does not know.

    Attributes:
        operation_id: The identifier that was requested
    """

    def __init__(self, operation_id: str, message: Optional[str] = None):
        self.operation_id = operation_id
        super().__init__(message or f"Unsupported operation: {operation_id}")


class RemoteOperationError(UnsupportedOperationError):
    """The operation exists but is only served by the remote sequence service."""

    def __init__(self, operation_id: str):
        super().__init__(
            operation_id,
            f"Operation '{operation_id}' is not implemented locally "
            "and requires the sequence service",
        )


class ServiceError(BiotoolsError):
    """The remote sequence service failed or answered with an error body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
