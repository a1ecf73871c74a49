"""Task API schemas (camelCase on the wire)."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from taskmanager.domain.entities.task import Comment, TaskEntity


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskCreateRequest(_CamelModel):
    """Documented shape of POST /tasks. The endpoint validates the raw body itself
    so that missing fields produce 400 "Missing required fields"."""

    title: str
    description: str | None = None
    priority: str | None = Field(default=None, description="low | normal | high | urgent")
    due_date: str | None = Field(default=None, description="ISO date, e.g. 2026-03-15")
    assigned_to: list[str]


class TaskStatusUpdateRequest(_CamelModel):
    """Request body for PUT /tasks/{taskId}."""

    status: str = Field(..., description="To Do | In Progress | Completed")


class CommentCreateRequest(_CamelModel):
    """Request body for POST /tasks/{taskId}/comments."""

    text: str = Field(..., max_length=4000)


class CommentResponse(_CamelModel):
    text: str
    author: str
    timestamp: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(text=comment.text, author=comment.author, timestamp=comment.timestamp)


class TaskResponse(_CamelModel):
    """Task as returned to clients."""

    task_id: str
    title: str
    description: str | None = None
    priority: str
    status: str
    assigned_to: list[str]
    due_date: date | None = None
    created_by: str
    created_at: datetime
    updated_at: datetime
    comments: list[CommentResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, task: TaskEntity) -> "TaskResponse":
        return cls(
            task_id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority.value,
            status=task.status.value,
            assigned_to=list(task.assigned_to),
            due_date=task.due_date,
            created_by=task.created_by,
            created_at=task.created_at,
            updated_at=task.updated_at,
            comments=[CommentResponse.from_comment(c) for c in task.comments],
        )


class TaskEnvelope(_CamelModel):
    """{"task": {...}}"""

    task: TaskResponse


class TaskListResponse(_CamelModel):
    """{"tasks": [...]}"""

    tasks: list[TaskResponse]


class CommentCreatedResponse(_CamelModel):
    """{"comment": {...}, "task": {...}}"""

    comment: CommentResponse
    task: TaskResponse
