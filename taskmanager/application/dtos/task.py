"""DTOs for task use cases (no dependency on storage or HTTP)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from taskmanager.domain.entities.task import TaskEntity
from taskmanager.domain.enums import TaskPriority


@dataclass(frozen=True)
class TaskCreate:
    """Validated and sanitized task-creation payload.

    assigned_to keeps the submitted order and may still contain duplicates;
    the assignee resolver collapses them before lookup.
    """

    title: str
    priority: TaskPriority
    assigned_to: list[str]
    description: str | None = None
    due_date: date | None = None


@dataclass(frozen=True)
class ResolvedAssignee:
    """An assignee id resolved to an active directory user."""

    user_id: str
    email: str
    name: str | None = None


@dataclass(frozen=True)
class CreateTaskResult:
    """Outcome of a successful task creation: the stored task and one message id per assignee."""

    task: TaskEntity
    message_ids: list[str] = field(default_factory=list)
