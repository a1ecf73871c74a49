"""In-memory task repository (local development and tests).

Stores the same item shape as the DynamoDB repository, so entities are
copied on every read and write.
"""

from __future__ import annotations

import copy
from datetime import datetime

from taskmanager.domain.entities.task import Comment, TaskEntity
from taskmanager.domain.exceptions import ResourceNotFoundException, StorageException
from taskmanager.infrastructure.persistence.items import (
    TASK_KEY,
    comment_to_item,
    item_to_task,
    task_to_item,
)
from taskmanager.shared.utils.datetime import to_iso


class InMemoryTaskRepository:
    """Task repository backed by a dict. Same contract as DynamoDBTaskRepository."""

    def __init__(self) -> None:
        self._items: dict[str, dict] = {}

    async def put(self, task: TaskEntity) -> None:
        """Store a new task. Refuses to overwrite an existing taskId."""
        item = task_to_item(task)
        if item[TASK_KEY] in self._items:
            raise StorageException("put_task", "taskId already exists")
        self._items[item[TASK_KEY]] = item

    async def get_by_id(self, task_id: str) -> TaskEntity | None:
        item = self._items.get(task_id)
        return item_to_task(copy.deepcopy(item)) if item else None

    def _sorted(self, items: list[dict]) -> list[TaskEntity]:
        tasks = [item_to_task(copy.deepcopy(i)) for i in items]
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    async def list_all(self, status: str | None = None) -> list[TaskEntity]:
        items = [i for i in self._items.values() if status is None or i["status"] == status]
        return self._sorted(items)

    async def list_for_assignee(
        self, user_id: str, status: str | None = None
    ) -> list[TaskEntity]:
        items = [
            i
            for i in self._items.values()
            if user_id in i["assignedTo"] and (status is None or i["status"] == status)
        ]
        return self._sorted(items)

    def _require(self, task_id: str) -> dict:
        item = self._items.get(task_id)
        if item is None:
            raise ResourceNotFoundException("task", task_id)
        return item

    async def update_status(
        self, task_id: str, status: str, updated_at: datetime
    ) -> None:
        item = self._require(task_id)
        item["status"] = status
        item["updatedAt"] = to_iso(updated_at)

    async def append_comment(
        self, task_id: str, comment: Comment, updated_at: datetime
    ) -> None:
        item = self._require(task_id)
        item["comments"].append(comment_to_item(comment))
        item["updatedAt"] = to_iso(updated_at)
