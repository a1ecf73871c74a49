"""DTOs for directory users (read-only from this application's perspective)."""

from dataclasses import dataclass

from taskmanager.domain.enums import UserStatus


@dataclass(frozen=True)
class UserResult:
    """Directory user read-model."""

    id: str
    email: str
    role: str
    status: str
    name: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE.value
