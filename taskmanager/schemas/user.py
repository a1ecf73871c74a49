"""User API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from taskmanager.application.dtos.user import UserResult


class UserResponse(BaseModel):
    """Directory user as listed for the assignee picker."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    email: str
    name: str | None = None
    role: str
    status: str

    @classmethod
    def from_result(cls, user: UserResult) -> "UserResponse":
        return cls(
            user_id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            status=user.status,
        )


class UserListResponse(BaseModel):
    users: list[UserResponse]
