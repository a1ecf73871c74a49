"""Domain enumerations for the task manager.

Enums represent fixed sets of domain values (task priority, task status,
user role and directory status).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TaskPriority(_ValuesMixin, str, Enum):
    """Task priority. Drives the wording of assignment notifications."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class TaskStatus(_ValuesMixin, str, Enum):
    """Task progress status. New tasks start in TO_DO."""

    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class UserRole(_ValuesMixin, str, Enum):
    """Actor role as carried by identity claims.

    UNKNOWN is the sentinel for a missing or unrecognised role claim; it is
    never granted any privileged operation.
    """

    ADMIN = "admin"
    MEMBER = "member"
    UNKNOWN = "unknown"

    @classmethod
    def from_claim(cls, value: object) -> "UserRole":
        """Map a raw claim value to a role; anything unrecognised is UNKNOWN."""
        if not isinstance(value, str):
            return cls.UNKNOWN
        normalized = value.strip().lower()
        if normalized in (cls.ADMIN.value, cls.MEMBER.value):
            return cls(normalized)
        return cls.UNKNOWN


class UserStatus(_ValuesMixin, str, Enum):
    """Directory status of a user. Only ACTIVE users can be assigned tasks."""

    ACTIVE = "active"
    INACTIVE = "inactive"
