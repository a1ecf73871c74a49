"""Task read and update operations: role-scoped listing, status changes, comments."""

from __future__ import annotations

from taskmanager.application.dtos.actor import ActorContext
from taskmanager.application.interfaces.repositories import ITaskRepository
from taskmanager.domain.entities.task import Comment, TaskEntity
from taskmanager.domain.enums import TaskStatus
from taskmanager.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from taskmanager.shared.telemetry.logging import get_logger
from taskmanager.shared.utils.datetime import utc_now
from taskmanager.shared.utils.sanitization import sanitize_text

logger = get_logger(__name__)


def _require_identified(actor: ActorContext) -> str:
    if not actor.is_authenticated:
        raise AuthenticationException("Authentication required")
    return actor.id


def _validate_status_filter(status: str | None) -> str | None:
    if status is None or status == "":
        return None
    if status not in TaskStatus.values():
        raise ValidationException("Invalid status", field="status")
    return status


class TaskService:
    """Task operations after creation.

    Admins see and update every task; members only the tasks assigned to them.
    """

    def __init__(self, task_repo: ITaskRepository) -> None:
        self._task_repo = task_repo

    async def list_tasks(
        self, actor: ActorContext, status: str | None = None
    ) -> list[TaskEntity]:
        """Return tasks visible to the actor, optionally filtered by status."""
        actor_id = _require_identified(actor)
        status = _validate_status_filter(status)
        if actor.is_admin:
            return await self._task_repo.list_all(status=status)
        return await self._task_repo.list_for_assignee(actor_id, status=status)

    async def get_task(self, actor: ActorContext, task_id: str) -> TaskEntity:
        """Return a task the actor may see.

        Raises:
            ResourceNotFoundException: Task does not exist.
            AuthorizationException: Member who is not an assignee.
        """
        actor_id = _require_identified(actor)
        task = await self._task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        if not actor.is_admin and not task.is_assigned_to(actor_id):
            raise AuthorizationException(resource="task", action="read")
        return task

    async def _get_for_update(self, actor: ActorContext, task_id: str) -> TaskEntity:
        actor_id = _require_identified(actor)
        task = await self._task_repo.get_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        if not actor.is_admin and not task.is_assigned_to(actor_id):
            raise AuthorizationException(resource="task", action="update")
        return task

    async def update_status(
        self, actor: ActorContext, task_id: str, status: str
    ) -> TaskEntity:
        """Move a task to another status (admin or assignee).

        Raises:
            ValidationException: status is not To Do / In Progress / Completed.
        """
        if status not in TaskStatus.values():
            raise ValidationException("Invalid status", field="status")
        task = await self._get_for_update(actor, task_id)
        previous = task.status
        task.change_status(status)
        await self._task_repo.update_status(task.id, task.status.value, task.updated_at)
        logger.info(
            "Task %s status %s -> %s by %s",
            task.id,
            previous.value,
            task.status.value,
            actor.id,
        )
        return task

    async def add_comment(
        self, actor: ActorContext, task_id: str, text: str
    ) -> tuple[TaskEntity, Comment]:
        """Append a sanitized comment authored by the actor (admin or assignee)."""
        cleaned = sanitize_text(text) if isinstance(text, str) else ""
        if not cleaned:
            raise ValidationException("Comment text is required", field="text")
        task = await self._get_for_update(actor, task_id)
        comment = task.add_comment(cleaned, actor.id, at=utc_now())
        await self._task_repo.append_comment(task.id, comment, task.updated_at)
        logger.info("Comment added to task %s by %s", task.id, actor.id)
        return task, comment
