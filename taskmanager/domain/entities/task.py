"""Task domain entity.

Represents the business concept of a task, independent of persistence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from taskmanager.domain.enums import TaskPriority, TaskStatus
from taskmanager.domain.exceptions import ValidationException
from taskmanager.shared.utils.datetime import utc_now


@dataclass(frozen=True)
class Comment:
    """A single comment on a task. Comments are append-only."""

    text: str
    author: str
    timestamp: datetime


@dataclass
class TaskEntity:
    """Domain entity for a task.

    Validation runs on construction. Status changes go through
    change_status(); comments are only ever appended via add_comment().
    """

    id: str
    title: str
    priority: TaskPriority
    status: TaskStatus
    assigned_to: list[str]
    created_by: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    due_date: date | None = None
    comments: list[Comment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate task business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Task ID is required", field="taskId")
        if not self.title or not self.title.strip():
            raise ValidationException("Task title is required", field="title")
        if not isinstance(self.priority, TaskPriority):
            raise ValidationException("Invalid priority", field="priority")
        if not isinstance(self.status, TaskStatus):
            raise ValidationException("Invalid status", field="status")
        if not self.assigned_to:
            raise ValidationException("Task must have at least one assignee", field="assignedTo")
        if len(set(self.assigned_to)) != len(self.assigned_to):
            raise ValidationException("Duplicate assignees", field="assignedTo")
        if not self.created_by:
            raise ValidationException("Task creator is required", field="createdBy")

    def is_assigned_to(self, user_id: str | None) -> bool:
        """Return whether the user is one of the task's assignees."""
        return bool(user_id) and user_id in self.assigned_to

    def change_status(self, new_status: str, *, at: datetime | None = None) -> None:
        """Move the task to another of the enumerated statuses.

        Any status may follow any other; the new value must be one of
        TaskStatus. Setting the current status again only refreshes updated_at.

        Raises:
            ValidationException: If new_status is not a valid status.
        """
        if new_status not in TaskStatus.values():
            raise ValidationException("Invalid status", field="status")
        self.status = TaskStatus(new_status)
        self.updated_at = at or utc_now()

    def add_comment(self, text: str, author: str, *, at: datetime | None = None) -> Comment:
        """Append a comment and return it.

        Raises:
            ValidationException: If text is empty or author missing.
        """
        if not text or not text.strip():
            raise ValidationException("Comment text is required", field="text")
        if not author:
            raise ValidationException("Comment author is required", field="author")
        timestamp = at or utc_now()
        comment = Comment(text=text.strip(), author=author, timestamp=timestamp)
        self.comments.append(comment)
        self.updated_at = timestamp
        return comment
