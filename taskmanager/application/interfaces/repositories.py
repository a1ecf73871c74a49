"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskmanager.application.dtos.user import UserResult
    from taskmanager.domain.entities.task import Comment, TaskEntity


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task persistence.

    Implementations raise StorageException when the datastore fails; they do
    not retry.
    """

    async def put(self, task: TaskEntity) -> None:
        """Persist a new task (single atomic write keyed by task id)."""

    async def get_by_id(self, task_id: str) -> TaskEntity | None:
        """Return the task or None if it does not exist."""

    async def list_all(self, status: str | None = None) -> list[TaskEntity]:
        """Return all tasks, optionally filtered by status, newest first."""

    async def list_for_assignee(
        self, user_id: str, status: str | None = None
    ) -> list[TaskEntity]:
        """Return tasks whose assignees include user_id, newest first."""

    async def update_status(
        self, task_id: str, status: str, updated_at: datetime
    ) -> None:
        """Set the status of an existing task."""

    async def append_comment(
        self, task_id: str, comment: Comment, updated_at: datetime
    ) -> None:
        """Append a comment to an existing task."""


# User directory interface
class IUserDirectory(Protocol):
    """Protocol for read-only user directory lookups."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return the user or None if not found."""

    async def list_users(self, status: str | None = None) -> list[UserResult]:
        """Return directory users, optionally filtered by status."""
