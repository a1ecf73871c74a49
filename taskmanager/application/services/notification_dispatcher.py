"""Notification dispatcher: one assignment email per resolved assignee."""

from __future__ import annotations

from typing import Any

from taskmanager.application.dtos.task import ResolvedAssignee
from taskmanager.application.interfaces.services import INotificationService
from taskmanager.application.services.notification_templates import (
    TaskNotificationRenderer,
)
from taskmanager.domain.entities.task import TaskEntity
from taskmanager.domain.exceptions import NotificationException
from taskmanager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _task_context(task: TaskEntity) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "priority": task.priority.value,
        "due_date": task.due_date.isoformat() if task.due_date else None,
    }


class NotificationDispatcher:
    """Sends assignment notifications, sequentially and in assignee order.

    Each assignee gets exactly one send, even when several share identical
    content. A failed send does not stop the remaining ones; failures are
    collected and reported together once every assignee has been attempted.
    """

    def __init__(
        self,
        notifier: INotificationService,
        renderer: TaskNotificationRenderer | None = None,
        app_url: str | None = None,
    ) -> None:
        self._notifier = notifier
        self._renderer = renderer or TaskNotificationRenderer()
        self._app_url = app_url.rstrip("/") if app_url else None

    def compose(
        self,
        task: TaskEntity,
        assignee: ResolvedAssignee,
        assigned_by: str | None = None,
    ) -> tuple[str, str]:
        """Return (subject, body) for one assignee."""
        context = {
            "task": _task_context(task),
            "assignee": {"name": assignee.name, "email": assignee.email},
            "assigned_by": assigned_by or task.created_by,
            "app_url": self._app_url,
        }
        return self._renderer.render(task.priority.value, context)

    async def dispatch(
        self,
        task: TaskEntity,
        assignees: list[ResolvedAssignee],
        assigned_by: str | None = None,
    ) -> list[str]:
        """Send one notification per assignee.

        Args:
            task: The persisted task.
            assignees: Resolved assignees (already de-duplicated).
            assigned_by: Display name of the assigning actor (defaults to created_by).

        Returns:
            Provider message ids, in assignee order.

        Raises:
            NotificationException: If at least one send failed (after all were attempted).
        """
        message_ids: list[str] = []
        failed: list[str] = []
        for assignee in assignees:
            subject, body = self.compose(task, assignee, assigned_by)
            try:
                message_id = await self._notifier.send(assignee.email, subject, body)
            except NotificationException as e:
                logger.warning(
                    "Notification failed for task %s, assignee %s: %s",
                    task.id,
                    assignee.user_id,
                    e.message,
                )
                failed.append(assignee.email)
                continue
            message_ids.append(message_id)
            logger.debug(
                "Notification sent for task %s, assignee %s (message_id=%s)",
                task.id,
                assignee.user_id,
                message_id,
            )

        if failed:
            raise NotificationException(
                f"Failed to notify {len(failed)} of {len(assignees)} assignee(s)",
                recipients=failed,
                task_id=task.id,
            )
        return message_ids
