"""User API: read-only directory listing for admins."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from taskmanager.api.v1.dependencies import get_actor_context, get_user_service
from taskmanager.application.dtos.actor import ActorContext
from taskmanager.application.services import UserService
from taskmanager.schemas.user import UserListResponse, UserResponse

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    status: str | None = Query(None, description="active | inactive"),
) -> UserListResponse:
    """List directory users (admins only), sorted by name."""
    users = await user_service.list_users(actor, status=status)
    return UserListResponse(users=[UserResponse.from_result(u) for u in users])
