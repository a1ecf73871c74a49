"""Domain exceptions for the task manager.

Defines domain-level exceptions that represent business rule violations
and collaborator failures. Presentation layer maps them to HTTP responses
in exception handlers (see taskmanager.core.exception_handlers).
"""

from typing import Any


class TaskManagerException(Exception):
    """Base exception for all task manager errors.

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
        """Return the JSON error body: error code, message and (if any) details."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(TaskManagerException):
    """Raised when input validation fails (missing field, bad enum value, bad format)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskManagerException):
    """Raised when the caller cannot be identified (e.g. invalid bearer token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(TaskManagerException):
    """Raised when the actor lacks the role or relation required for the operation."""

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        action: str | None = None,
    ) -> None:
        """Initialize with optional message, resource, and action.

        Args:
            message: Human-readable message; built from resource/action when omitted.
            resource: Optional resource type (e.g. 'task').
            action: Optional action that was attempted (e.g. 'create').
        """
        if message is None:
            if resource and action:
                message = f"Permission denied: {action} on {resource}"
            else:
                message = "Permission denied"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class InvalidAssigneesException(TaskManagerException):
    """Raised when one or more assignees do not resolve to an active user."""

    def __init__(self, invalid_user_ids: list[str]) -> None:
        """Initialize with the identifiers that failed to resolve.

        Args:
            invalid_user_ids: Assignee ids that are unknown, inactive, or have no email.
        """
        super().__init__(
            "Invalid assignees",
            "INVALID_ASSIGNEES",
            {"invalid_assignees": list(invalid_user_ids)},
        )


class ResourceNotFoundException(TaskManagerException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StorageException(TaskManagerException):
    """Raised when the datastore rejects or fails a read or write."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failed operation and a reason (logged, never returned).

        Args:
            operation: Storage operation name (e.g. 'put_task').
            reason: Underlying error description.
        """
        super().__init__(
            f"Storage operation failed: {operation}",
            "STORAGE_ERROR",
            {"operation": operation, "reason": reason},
        )


class NotificationException(TaskManagerException):
    """Raised when one or more assignment notifications could not be sent."""

    def __init__(
        self,
        message: str,
        recipients: list[str] | None = None,
        task_id: str | None = None,
    ) -> None:
        """Initialize with failed recipients and the task they were notified about.

        Args:
            message: Description of the failure.
            recipients: Email addresses whose send failed.
            task_id: Task the notification was about (already persisted).
        """
        details: dict[str, Any] = {"recipients": list(recipients or [])}
        if task_id:
            details["task_id"] = task_id
        super().__init__(message, "NOTIFICATION_ERROR", details)
