"""Actor context: who is making the request, as established by identity claims."""

from dataclasses import dataclass

from taskmanager.domain.enums import UserRole


@dataclass(frozen=True)
class ActorContext:
    """Immutable snapshot of the authenticated actor.

    id is None when no identity claims were presented; role is then
    UserRole.UNKNOWN.
    """

    id: str | None
    role: UserRole = UserRole.UNKNOWN
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_authenticated(self) -> bool:
        return bool(self.id)


ANONYMOUS_ACTOR = ActorContext(id=None)
