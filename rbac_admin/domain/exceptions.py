"""Domain exceptions for the RBAC admin panel.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class RbacAdminException(Exception):
    """Base exception for all RBAC admin errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

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
        """Return the JSON body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RbacAdminException):
    """Raised when input validation fails. Scoped to one form field when known."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)

    @property
    def field(self) -> str | None:
        return self.details.get("field")


class DuplicateNameException(ValidationException):
    """Raised when a name is already used by another active record of the same kind."""

    def __init__(self, resource_type: str, name: str) -> None:
        super().__init__(
            f"The name '{name}' has already been taken by another {resource_type}.",
            field="name",
        )


class UnknownActionException(ValidationException):
    """Raised when a permission map carries an action token outside ModuleAction."""

    def __init__(self, action: str, field: str = "permissions") -> None:
        super().__init__(f"Unrecognized action: {action!r}", field=field)
        self.details["action"] = action


class InvalidParentException(ValidationException):
    """Raised when a module's parent is missing, deleted, itself, or a descendant."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field="parent_id")


class ResourceNotFoundException(RbacAdminException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'module', 'role').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class SqlNotConfiguredException(RbacAdminException):
    """Raised when an operation requires the database but no engine is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
