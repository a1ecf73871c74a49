"""DynamoDB-backed user directory (implements IUserDirectory). Read-only."""

from __future__ import annotations

import asyncio
from typing import Any

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from taskmanager.application.dtos.user import UserResult
from taskmanager.domain.exceptions import StorageException
from taskmanager.infrastructure.persistence.items import USER_KEY, item_to_user
from taskmanager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class DynamoDBUserDirectory:
    """User directory over the users table keyed by userId."""

    def __init__(self, table: Any) -> None:
        self._table = table

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID, or None when no item exists."""
        try:
            resp = await asyncio.to_thread(self._table.get_item, Key={USER_KEY: user_id})
        except (ClientError, BotoCoreError) as e:
            logger.error("DynamoDB get_user failed for %s: %s", user_id, e)
            raise StorageException("get_user", str(e)) from e
        item = resp.get("Item")
        return item_to_user(item) if item else None

    async def list_users(self, status: str | None = None) -> list[UserResult]:
        """Scan the users table (small, admin-only listing)."""
        kwargs: dict[str, Any] = {}
        if status:
            kwargs["FilterExpression"] = Attr("status").eq(status)
        users: list[UserResult] = []
        try:
            while True:
                resp = await asyncio.to_thread(self._table.scan, **kwargs)
                users.extend(item_to_user(i) for i in resp.get("Items", []))
                last_key = resp.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            logger.error("DynamoDB list_users failed: %s", e)
            raise StorageException("list_users", str(e)) from e
        return users
