"""In-memory user directory (local development and tests)."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from taskmanager.application.dtos.user import UserResult
from taskmanager.infrastructure.persistence.items import item_to_user


def load_seed_users(path: str) -> list[UserResult]:
    """Read a JSON list of user items ({userId, email, role, status, name?}).

    Raises:
        ValueError: If the file is not a JSON list of objects with userId.
    """
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Seed users file must contain a JSON list: {path}")
    try:
        return [item_to_user(item) for item in data]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid user item in {path}: {e!s}") from e


class InMemoryUserDirectory:
    """User directory backed by a dict. Same contract as DynamoDBUserDirectory."""

    def __init__(self, users: Iterable[UserResult] = ()) -> None:
        self._users: dict[str, UserResult] = {}
        for user in users:
            self.add(user)

    def add(self, user: UserResult) -> None:
        """Insert or replace a user (seeding only; the application never writes users)."""
        self._users[user.id] = user

    async def get_by_id(self, user_id: str) -> UserResult | None:
        return self._users.get(user_id)

    async def list_users(self, status: str | None = None) -> list[UserResult]:
        return [u for u in self._users.values() if status is None or u.status == status]
