"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from taskmanager.domain.entities import Comment, TaskEntity
from taskmanager.domain.enums import TaskPriority, TaskStatus, UserRole, UserStatus
from taskmanager.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    InvalidAssigneesException,
    NotificationException,
    ResourceNotFoundException,
    StorageException,
    TaskManagerException,
    ValidationException,
)

__all__ = [
    # Entities
    "Comment",
    "TaskEntity",
    # Enums
    "TaskPriority",
    "TaskStatus",
    "UserRole",
    "UserStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "InvalidAssigneesException",
    "NotificationException",
    "ResourceNotFoundException",
    "StorageException",
    "TaskManagerException",
    "ValidationException",
]
