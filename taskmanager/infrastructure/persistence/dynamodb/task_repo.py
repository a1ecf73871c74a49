"""DynamoDB-backed task repository (implements ITaskRepository).

boto3 is synchronous; every call runs in a worker thread via
asyncio.to_thread so the event loop is never blocked.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from taskmanager.domain.entities.task import Comment, TaskEntity
from taskmanager.domain.exceptions import ResourceNotFoundException, StorageException
from taskmanager.infrastructure.persistence.items import (
    TASK_KEY,
    comment_to_item,
    item_to_task,
    task_to_item,
)
from taskmanager.shared.telemetry.logging import get_logger
from taskmanager.shared.utils.datetime import to_iso

logger = get_logger(__name__)


def _is_conditional_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class DynamoDBTaskRepository:
    """Task repository using a DynamoDB table keyed by taskId."""

    def __init__(self, table: Any) -> None:
        self._table = table

    async def _call(self, operation: str, fn: Any, **kwargs: Any) -> dict:
        try:
            return await asyncio.to_thread(fn, **kwargs)
        except ClientError as e:
            if _is_conditional_failure(e):
                raise
            logger.error("DynamoDB %s failed: %s", operation, e)
            raise StorageException(operation, str(e)) from e
        except BotoCoreError as e:
            logger.error("DynamoDB %s failed: %s", operation, e)
            raise StorageException(operation, str(e)) from e

    async def put(self, task: TaskEntity) -> None:
        """Store a new task. Refuses to overwrite an existing taskId."""
        try:
            await self._call(
                "put_task",
                self._table.put_item,
                Item=task_to_item(task),
                ConditionExpression=Attr(TASK_KEY).not_exists(),
            )
        except ClientError as e:
            raise StorageException("put_task", "taskId already exists") from e

    async def get_by_id(self, task_id: str) -> TaskEntity | None:
        resp = await self._call("get_task", self._table.get_item, Key={TASK_KEY: task_id})
        item = resp.get("Item")
        return item_to_task(item) if item else None

    async def _scan(self, operation: str, filter_expression: Any = None) -> list[TaskEntity]:
        kwargs: dict[str, Any] = {}
        if filter_expression is not None:
            kwargs["FilterExpression"] = filter_expression
        items: list[dict] = []
        while True:
            resp = await self._call(operation, self._table.scan, **kwargs)
            items.extend(resp.get("Items", []))
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        tasks = [item_to_task(i) for i in items]
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    async def list_all(self, status: str | None = None) -> list[TaskEntity]:
        expr = Attr("status").eq(status) if status else None
        return await self._scan("list_tasks", expr)

    async def list_for_assignee(
        self, user_id: str, status: str | None = None
    ) -> list[TaskEntity]:
        expr = Attr("assignedTo").contains(user_id)
        if status:
            expr = expr & Attr("status").eq(status)
        return await self._scan("list_tasks_for_assignee", expr)

    async def update_status(
        self, task_id: str, status: str, updated_at: datetime
    ) -> None:
        try:
            await self._call(
                "update_task_status",
                self._table.update_item,
                Key={TASK_KEY: task_id},
                UpdateExpression="SET #status = :status, updatedAt = :updated_at",
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues={
                    ":status": status,
                    ":updated_at": to_iso(updated_at),
                },
                ConditionExpression=Attr(TASK_KEY).exists(),
            )
        except ClientError as e:
            raise ResourceNotFoundException("task", task_id) from e

    async def append_comment(
        self, task_id: str, comment: Comment, updated_at: datetime
    ) -> None:
        try:
            await self._call(
                "append_task_comment",
                self._table.update_item,
                Key={TASK_KEY: task_id},
                UpdateExpression=(
                    "SET comments = list_append(if_not_exists(comments, :empty), :comment), "
                    "updatedAt = :updated_at"
                ),
                ExpressionAttributeValues={
                    ":comment": [comment_to_item(comment)],
                    ":empty": [],
                    ":updated_at": to_iso(updated_at),
                },
                ConditionExpression=Attr(TASK_KEY).exists(),
            )
        except ClientError as e:
            raise ResourceNotFoundException("task", task_id) from e
