"""Assignee resolver: user ids -> active directory users, all or nothing."""

from __future__ import annotations

from taskmanager.application.dtos.task import ResolvedAssignee
from taskmanager.application.interfaces.repositories import IUserDirectory
from taskmanager.domain.exceptions import InvalidAssigneesException
from taskmanager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def dedupe_user_ids(user_ids: list[str]) -> list[str]:
    """Collapse repeated ids, keeping first-occurrence order."""
    return list(dict.fromkeys(user_ids))


class AssigneeResolver:
    """Resolves assignee ids against the user directory.

    Every unique id is looked up exactly once, one at a time. The decision is
    taken only after all lookups have completed: if any id is unknown,
    inactive, or has no email address, the whole resolution fails.
    """

    def __init__(self, user_directory: IUserDirectory) -> None:
        self._user_directory = user_directory

    async def resolve(self, user_ids: list[str]) -> list[ResolvedAssignee]:
        """Resolve ids to assignees with their notification email.

        Args:
            user_ids: Assignee ids as submitted (may contain duplicates).

        Returns:
            One ResolvedAssignee per unique id, in first-occurrence order.

        Raises:
            InvalidAssigneesException: If the list is empty or any id does not
                resolve to an active user.
        """
        unique_ids = dedupe_user_ids(user_ids)
        if not unique_ids:
            raise InvalidAssigneesException([])

        resolved: list[ResolvedAssignee] = []
        invalid: list[str] = []
        for user_id in unique_ids:
            user = await self._user_directory.get_by_id(user_id)
            if user is None:
                logger.info("Assignee not found in directory: %s", user_id)
                invalid.append(user_id)
                continue
            if not user.is_active:
                logger.info("Assignee is not active: %s (status=%s)", user_id, user.status)
                invalid.append(user_id)
                continue
            if not user.email:
                logger.warning("Assignee has no email address: %s", user_id)
                invalid.append(user_id)
                continue
            resolved.append(
                ResolvedAssignee(user_id=user_id, email=user.email, name=user.name)
            )

        if invalid:
            raise InvalidAssigneesException(invalid)
        return resolved
