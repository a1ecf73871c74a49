"""Pytest configuration and fixtures for taskmanager.

Tests run against the in-memory task store and user directory with a
recording email sender; no AWS access is needed. Environment is set before
any taskmanager import because taskmanager.main builds an app at import.
"""

import os

os.environ["STORAGE_BACKEND"] = "memory"
os.environ["EMAIL_BACKEND"] = "log"
os.environ["SECRET_KEY"] = "test-secret-key-for-jwt-signing-only"
os.environ.pop("MEMORY_SEED_USERS_PATH", None)

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from taskmanager.application.dtos.user import UserResult
from taskmanager.core.config import get_settings
from taskmanager.domain.exceptions import NotificationException
from taskmanager.infrastructure.factory import Backends
from taskmanager.infrastructure.persistence.memory import (
    InMemoryTaskRepository,
    InMemoryUserDirectory,
)
from taskmanager.infrastructure.security.jwt import create_access_token

get_settings.cache_clear()

ADMIN_ID = "admin-1"
MEMBER_ID = "user-123"
OTHER_MEMBER_ID = "user-456"
INACTIVE_ID = "user-inactive"


class RecordingNotifier:
    """Email sender double: records every send; fails for addresses in fail_for."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.sent: list[dict[str, str]] = []
        self.fail_for = fail_for or set()

    async def send(self, to: str, subject: str, body: str) -> str:
        if to in self.fail_for:
            raise NotificationException("SES send failed: MessageRejected", recipients=[to])
        self.sent.append({"to": to, "subject": subject, "body": body})
        return f"msg-{len(self.sent)}"


def directory_users() -> list[UserResult]:
    return [
        UserResult(id=ADMIN_ID, email="admin@example.com", role="admin", status="active", name="Ada Admin"),
        UserResult(id=MEMBER_ID, email="user123@example.com", role="member", status="active", name="Sam Member"),
        UserResult(id=OTHER_MEMBER_ID, email="user456@example.com", role="member", status="active", name="Kim Member"),
        UserResult(id=INACTIVE_ID, email="gone@example.com", role="member", status="inactive", name="Former Member"),
    ]


def bearer(sub: str, role: str | None, email: str | None = None) -> dict[str, str]:
    """Authorization header with a signed token carrying sub, email and custom:role."""
    claims: dict[str, str] = {"sub": sub}
    if email:
        claims["email"] = email
    if role is not None:
        claims["custom:role"] = role
    return {"Authorization": f"Bearer {create_access_token(claims)}"}


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def backends(notifier: RecordingNotifier) -> Backends:
    return Backends(
        task_repo=InMemoryTaskRepository(),
        user_directory=InMemoryUserDirectory(directory_users()),
        notifier=notifier,
    )


@pytest.fixture
def app(backends: Backends) -> FastAPI:
    """Fresh application per test with its own in-memory backends."""
    from taskmanager.main import create_app

    application = create_app()
    application.state.backends = backends
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer(ADMIN_ID, "admin", "admin@example.com")


@pytest.fixture
def member_headers() -> dict[str, str]:
    return bearer(MEMBER_ID, "member", "user123@example.com")


@pytest.fixture
def other_member_headers() -> dict[str, str]:
    return bearer(OTHER_MEMBER_ID, "member", "user456@example.com")


@pytest.fixture
def auth_headers_for():
    """Factory fixture: auth_headers_for(sub, role, email=None) -> headers."""
    return bearer
