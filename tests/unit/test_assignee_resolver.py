"""AssigneeResolver: all-or-nothing resolution against the user directory."""

from unittest.mock import AsyncMock

import pytest

from taskmanager.application.dtos.user import UserResult
from taskmanager.application.services.assignee_resolver import (
    AssigneeResolver,
    dedupe_user_ids,
)
from taskmanager.domain.exceptions import InvalidAssigneesException


def _user(user_id: str, status: str = "active", email: str = "") -> UserResult:
    return UserResult(
        id=user_id,
        email=email or f"{user_id}@example.com",
        role="member",
        status=status,
        name=user_id.title(),
    )


@pytest.fixture
def directory() -> AsyncMock:
    users = {
        "alice": _user("alice"),
        "bob": _user("bob"),
        "carol": _user("carol", status="inactive"),
    }
    directory = AsyncMock()
    directory.get_by_id = AsyncMock(side_effect=lambda user_id: users.get(user_id))
    return directory


def test_dedupe_keeps_first_occurrence_order() -> None:
    assert dedupe_user_ids(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


async def test_resolves_all_active_users(directory: AsyncMock) -> None:
    resolved = await AssigneeResolver(directory).resolve(["alice", "bob"])
    assert [(a.user_id, a.email) for a in resolved] == [
        ("alice", "alice@example.com"),
        ("bob", "bob@example.com"),
    ]


async def test_duplicates_looked_up_once(directory: AsyncMock) -> None:
    resolved = await AssigneeResolver(directory).resolve(["alice", "alice", "bob"])
    assert [a.user_id for a in resolved] == ["alice", "bob"]
    assert directory.get_by_id.await_count == 2


async def test_unknown_user_fails_after_all_lookups(directory: AsyncMock) -> None:
    with pytest.raises(InvalidAssigneesException) as exc_info:
        await AssigneeResolver(directory).resolve(["ghost", "alice", "bob"])
    assert exc_info.value.details == {"invalid_assignees": ["ghost"]}
    assert directory.get_by_id.await_count == 3


async def test_inactive_user_is_invalid(directory: AsyncMock) -> None:
    with pytest.raises(InvalidAssigneesException) as exc_info:
        await AssigneeResolver(directory).resolve(["alice", "carol"])
    assert exc_info.value.details["invalid_assignees"] == ["carol"]


async def test_all_invalid_ids_are_reported(directory: AsyncMock) -> None:
    with pytest.raises(InvalidAssigneesException) as exc_info:
        await AssigneeResolver(directory).resolve(["ghost", "carol"])
    assert exc_info.value.details["invalid_assignees"] == ["ghost", "carol"]


async def test_user_without_email_is_invalid() -> None:
    directory = AsyncMock()
    directory.get_by_id = AsyncMock(
        return_value=UserResult(id="dave", email="", role="member", status="active")
    )
    with pytest.raises(InvalidAssigneesException):
        await AssigneeResolver(directory).resolve(["dave"])


async def test_empty_list_is_invalid(directory: AsyncMock) -> None:
    with pytest.raises(InvalidAssigneesException):
        await AssigneeResolver(directory).resolve([])
    directory.get_by_id.assert_not_awaited()
