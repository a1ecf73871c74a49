"""Item mapping between domain objects and stored documents.

Tasks and users are stored as flat documents with camelCase attribute
names (the same shape the front end reads). Datetimes are ISO-8601 UTC
strings, due dates are 'YYYY-MM-DD'.
"""

from __future__ import annotations

from typing import Any

from taskmanager.application.dtos.user import UserResult
from taskmanager.domain.entities.task import Comment, TaskEntity
from taskmanager.domain.enums import TaskPriority, TaskStatus, UserRole, UserStatus
from taskmanager.shared.utils.datetime import parse_iso_date, parse_iso_datetime, to_iso

TASK_KEY = "taskId"
USER_KEY = "userId"


def comment_to_item(comment: Comment) -> dict[str, Any]:
    return {
        "text": comment.text,
        "author": comment.author,
        "timestamp": to_iso(comment.timestamp),
    }


def task_to_item(task: TaskEntity) -> dict[str, Any]:
    """Map TaskEntity to a stored item. Optional fields are omitted when empty."""
    item: dict[str, Any] = {
        TASK_KEY: task.id,
        "title": task.title,
        "priority": task.priority.value,
        "status": task.status.value,
        "assignedTo": list(task.assigned_to),
        "createdBy": task.created_by,
        "createdAt": to_iso(task.created_at),
        "updatedAt": to_iso(task.updated_at),
        "comments": [comment_to_item(c) for c in task.comments],
    }
    if task.description:
        item["description"] = task.description
    if task.due_date:
        item["dueDate"] = task.due_date.isoformat()
    return item


def item_to_task(item: dict[str, Any]) -> TaskEntity:
    """Map a stored item back to TaskEntity (validated on construction)."""
    created_at = parse_iso_datetime(item["createdAt"])
    return TaskEntity(
        id=item[TASK_KEY],
        title=item["title"],
        description=item.get("description") or None,
        priority=TaskPriority(item.get("priority", TaskPriority.NORMAL.value)),
        status=TaskStatus(item.get("status", TaskStatus.TO_DO.value)),
        assigned_to=list(item.get("assignedTo") or []),
        due_date=parse_iso_date(item["dueDate"]) if item.get("dueDate") else None,
        created_by=item["createdBy"],
        created_at=created_at,
        updated_at=parse_iso_datetime(item["updatedAt"]) if item.get("updatedAt") else created_at,
        comments=[
            Comment(
                text=c["text"],
                author=c["author"],
                timestamp=parse_iso_datetime(c["timestamp"]),
            )
            for c in item.get("comments") or []
        ],
    )


def item_to_user(item: dict[str, Any]) -> UserResult:
    """Map a users-table item to UserResult. Missing status means active."""
    return UserResult(
        id=item[USER_KEY],
        email=item.get("email", ""),
        role=item.get("role", UserRole.MEMBER.value),
        status=item.get("status", UserStatus.ACTIVE.value),
        name=item.get("name"),
    )


def user_to_item(user: UserResult) -> dict[str, Any]:
    item: dict[str, Any] = {
        USER_KEY: user.id,
        "email": user.email,
        "role": user.role,
        "status": user.status,
    }
    if user.name:
        item["name"] = user.name
    return item
