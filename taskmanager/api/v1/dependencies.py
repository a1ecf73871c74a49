"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the actor context and the application use
cases. Collaborators (task store, user directory, notifier) are built once
in create_app and kept on app.state.backends; routes depend only on these
dependencies, never on infrastructure directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskmanager.application.dtos.actor import ActorContext
from taskmanager.application.services import (
    AssigneeResolver,
    NotificationDispatcher,
    TaskInputValidator,
    UserService,
    resolve_actor_context,
)
from taskmanager.application.use_cases.tasks import CreateTaskUseCase, TaskService
from taskmanager.core.config import Settings, get_settings
from taskmanager.domain.exceptions import AuthenticationException
from taskmanager.infrastructure.factory import Backends
from taskmanager.infrastructure.security.jwt import verify_token
from taskmanager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


def get_app_settings() -> Settings:
    return get_settings()


def get_backends(request: Request) -> Backends:
    """Collaborators created at startup (see taskmanager.main.create_app)."""
    return request.app.state.backends


def _gateway_claims(request: Request) -> Mapping[str, Any] | None:
    """Authorizer claims from the API Gateway event Mangum attaches to the scope.

    REST APIs (Cognito user pool authorizer) put them under
    requestContext.authorizer.claims; HTTP APIs (JWT authorizer) under
    requestContext.authorizer.jwt.claims.
    """
    event = request.scope.get("aws.event")
    if not isinstance(event, Mapping):
        return None
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    claims = authorizer.get("claims")
    if claims is None:
        claims = (authorizer.get("jwt") or {}).get("claims")
    return claims if isinstance(claims, Mapping) else None


async def get_actor_context(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ActorContext:
    """Resolve who is calling.

    Gateway authorizer claims win when present (already verified upstream).
    Otherwise a bearer JWT is verified locally. No credentials at all yields
    the anonymous actor; each operation decides whether that is enough.

    Raises:
        AuthenticationException: A bearer token was sent but is invalid.
    """
    claims = _gateway_claims(request)
    if claims is None and credentials is not None:
        try:
            claims = verify_token(credentials.credentials)
        except ValueError as e:
            logger.info("Rejected bearer token: %s", e)
            raise AuthenticationException("Invalid or expired token") from e
    return resolve_actor_context(claims, role_claim=settings.role_claim)


def get_create_task_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CreateTaskUseCase:
    """A fresh use case per request (instances track their own stage)."""
    return CreateTaskUseCase(
        task_repo=backends.task_repo,
        validator=TaskInputValidator(default_priority=settings.default_priority),
        assignee_resolver=AssigneeResolver(backends.user_directory),
        dispatcher=NotificationDispatcher(backends.notifier, app_url=settings.app_url),
    )


def get_task_service(
    backends: Annotated[Backends, Depends(get_backends)],
) -> TaskService:
    return TaskService(backends.task_repo)


def get_user_service(
    backends: Annotated[Backends, Depends(get_backends)],
) -> UserService:
    return UserService(backends.user_directory)
