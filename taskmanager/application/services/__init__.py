"""Application services: identity, validation, assignee resolution, notification."""

from taskmanager.application.services.assignee_resolver import (
    AssigneeResolver,
    dedupe_user_ids,
)
from taskmanager.application.services.identity import resolve_actor_context
from taskmanager.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from taskmanager.application.services.notification_templates import (
    TaskNotificationRenderer,
)
from taskmanager.application.services.task_input_validator import TaskInputValidator
from taskmanager.application.services.user_service import UserService

__all__ = [
    "AssigneeResolver",
    "NotificationDispatcher",
    "TaskInputValidator",
    "TaskNotificationRenderer",
    "UserService",
    "dedupe_user_ids",
    "resolve_actor_context",
]
