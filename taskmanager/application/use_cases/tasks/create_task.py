"""Create task use case: authorize, validate, resolve assignees, persist, notify."""

from __future__ import annotations

from enum import Enum
from typing import Any

from taskmanager.application.dtos.actor import ActorContext
from taskmanager.application.dtos.task import CreateTaskResult
from taskmanager.application.interfaces.repositories import ITaskRepository
from taskmanager.application.services.assignee_resolver import AssigneeResolver
from taskmanager.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from taskmanager.application.services.task_input_validator import TaskInputValidator
from taskmanager.domain.entities.task import TaskEntity
from taskmanager.domain.enums import TaskStatus
from taskmanager.domain.exceptions import AuthorizationException, TaskManagerException
from taskmanager.shared.telemetry.logging import get_logger
from taskmanager.shared.utils.datetime import utc_now
from taskmanager.shared.utils.generators import generate_cuid

logger = get_logger(__name__)

ONLY_ADMINS_MESSAGE = "Only admins can create tasks"


class CreationStage(str, Enum):
    """Stages of one task-creation attempt. FAILED is reachable from every stage."""

    AUTHORIZING_ACTOR = "authorizing_actor"
    VALIDATING_INPUT = "validating_input"
    RESOLVING_ASSIGNEES = "resolving_assignees"
    PERSISTING = "persisting"
    NOTIFYING = "notifying"
    COMPLETED = "completed"
    FAILED = "failed"


class CreateTaskUseCase:
    """Creates a task and notifies its assignees.

    Stages run strictly in order; the first failure ends the attempt and the
    exception propagates to the presentation layer. Persisting is the
    atomicity boundary: once the task is stored it stays stored, even if
    notification then fails. Re-running the use case creates a second task
    (every attempt generates a new id).
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        validator: TaskInputValidator,
        assignee_resolver: AssigneeResolver,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._task_repo = task_repo
        self._validator = validator
        self._assignee_resolver = assignee_resolver
        self._dispatcher = dispatcher
        self.stage = CreationStage.AUTHORIZING_ACTOR

    def _enter(self, stage: CreationStage, actor: ActorContext) -> None:
        self.stage = stage
        logger.debug("Task creation by %s: stage=%s", actor.id, stage.value)

    async def execute(self, actor: ActorContext, payload: Any) -> CreateTaskResult:
        """Run one task-creation attempt.

        Args:
            actor: Authenticated actor (role must be admin).
            payload: Raw decoded request body.

        Returns:
            CreateTaskResult with the persisted task and notification message ids.

        Raises:
            AuthorizationException: Actor is not an admin (nothing else is called).
            ValidationException: Payload missing or invalid fields.
            InvalidAssigneesException: Any assignee unknown or inactive (nothing stored).
            StorageException: Task could not be stored (nobody notified).
            NotificationException: Task stored, but at least one send failed.
        """
        if self.stage is not CreationStage.AUTHORIZING_ACTOR:
            raise RuntimeError("CreateTaskUseCase instances are single-use")
        try:
            return await self._run(actor, payload)
        except TaskManagerException as e:
            logger.info(
                "Task creation by %s failed at %s: %s (%s)",
                actor.id,
                self.stage.value,
                e.error_code,
                e.message,
            )
            self.stage = CreationStage.FAILED
            raise
        except Exception:
            logger.exception("Task creation by %s failed at %s", actor.id, self.stage.value)
            self.stage = CreationStage.FAILED
            raise

    async def _run(self, actor: ActorContext, payload: Any) -> CreateTaskResult:
        self._enter(CreationStage.AUTHORIZING_ACTOR, actor)
        if not actor.is_admin:
            raise AuthorizationException(ONLY_ADMINS_MESSAGE, resource="task", action="create")

        self._enter(CreationStage.VALIDATING_INPUT, actor)
        data = self._validator.validate(payload)

        self._enter(CreationStage.RESOLVING_ASSIGNEES, actor)
        assignees = await self._assignee_resolver.resolve(data.assigned_to)

        self._enter(CreationStage.PERSISTING, actor)
        now = utc_now()
        task = TaskEntity(
            id=generate_cuid(),
            title=data.title,
            description=data.description,
            priority=data.priority,
            status=TaskStatus.TO_DO,
            assigned_to=[a.user_id for a in assignees],
            due_date=data.due_date,
            created_by=actor.id,
            created_at=now,
            updated_at=now,
        )
        await self._task_repo.put(task)
        logger.info(
            "Task %s created by %s (priority=%s, assignees=%d)",
            task.id,
            actor.id,
            task.priority.value,
            len(assignees),
        )

        self._enter(CreationStage.NOTIFYING, actor)
        message_ids = await self._dispatcher.dispatch(
            task, assignees, assigned_by=actor.email or actor.id
        )

        self._enter(CreationStage.COMPLETED, actor)
        return CreateTaskResult(task=task, message_ids=message_ids)
