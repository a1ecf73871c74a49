"""User directory queries for admins (assignee picker)."""

from __future__ import annotations

from taskmanager.application.dtos.actor import ActorContext
from taskmanager.application.dtos.user import UserResult
from taskmanager.application.interfaces.repositories import IUserDirectory
from taskmanager.domain.enums import UserStatus
from taskmanager.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ValidationException,
)


class UserService:
    """Read-only directory listing. Admin only."""

    def __init__(self, user_directory: IUserDirectory) -> None:
        self._user_directory = user_directory

    async def list_users(
        self, actor: ActorContext, status: str | None = None
    ) -> list[UserResult]:
        """Return directory users, optionally filtered by status (active/inactive)."""
        if not actor.is_authenticated:
            raise AuthenticationException("Authentication required")
        if not actor.is_admin:
            raise AuthorizationException(resource="user", action="list")
        if status and status not in UserStatus.values():
            raise ValidationException("Invalid status", field="status")
        users = await self._user_directory.list_users(status=status or None)
        return sorted(users, key=lambda u: (u.name or u.email).lower())
