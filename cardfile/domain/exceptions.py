"""Domain exceptions for CardFile.

Defines domain-level exceptions that represent business rule violations
and failures propagated from the store. Presentation layer maps them to
HTTP responses in exception handlers.
"""

from typing import Any


class CardFileException(Exception):
    """Base exception for all CardFile application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CardFileException):
    """Raised when input validation fails (e.g. empty title)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidSortFieldException(CardFileException):
    """Raised when an order-by clause names an unknown field or direction."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        """Initialize with the rejected value and the allowed field names.

        Args:
            value: The sort field (or clause) that could not be parsed.
            allowed: Field names accepted for ordering.
        """
        super().__init__(
            f"Invalid sort field: {value!r}",
            "INVALID_SORT_FIELD",
            {"value": value, "allowed": allowed},
        )


class InvalidPaginationException(CardFileException):
    """Raised when page number or page size is not a positive integer."""

    def __init__(self, page_number: int, page_size: int) -> None:
        super().__init__(
            "page_number and page_size must be positive integers",
            "INVALID_PAGINATION",
            {"page_number": page_number, "page_size": page_size},
        )


class ResourceNotFoundException(CardFileException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'text_material').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class ConcurrencyConflictException(CardFileException):
    """Raised when a concurrent writer won the update of the same entity (optimistic lock)."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        super().__init__(
            f"{resource_type} {resource_id} was updated by another request; retry.",
            "CONCURRENCY_CONFLICT",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class StorageException(CardFileException):
    """Raised when the underlying store fails (connection, constraint, driver error)."""

    def __init__(self, message: str = "Storage operation failed") -> None:
        super().__init__(message, "STORAGE_ERROR")


class AuthenticationException(CardFileException):
    """Raised when authentication fails (e.g. invalid or expired token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CardFileException):
    """Raised when the caller lacks the role or ownership required for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'text_material').
            action: Optional action that was attempted (e.g. 'approve').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)
