"""Settings validation and BackendFactory wiring."""

import json

import pytest

from taskmanager.core.config import Settings
from taskmanager.domain.enums import TaskPriority
from taskmanager.infrastructure.factory import BackendFactory
from taskmanager.infrastructure.notifications import (
    LogOnlyNotificationService,
    SESNotificationService,
)
from taskmanager.infrastructure.persistence.memory import (
    InMemoryTaskRepository,
    InMemoryUserDirectory,
    load_seed_users,
)


def _settings(**overrides) -> Settings:
    values = {"storage_backend": "memory", "email_backend": "log", "_env_file": None}
    values.update(overrides)
    return Settings(**values)


def test_memory_and_log_need_no_aws_settings() -> None:
    settings = _settings()
    assert settings.default_priority is TaskPriority.NORMAL
    assert settings.role_claim == "custom:role"


def test_backend_names_are_normalised() -> None:
    settings = _settings(storage_backend="MEMORY", email_backend="Log")
    assert settings.storage_backend == "memory"
    assert settings.email_backend == "log"


def test_dynamodb_requires_table_names() -> None:
    with pytest.raises(ValueError, match="TASKS_TABLE"):
        _settings(storage_backend="dynamodb")


def test_ses_requires_sender() -> None:
    with pytest.raises(ValueError, match="SES_SENDER_EMAIL"):
        _settings(email_backend="ses")


@pytest.mark.parametrize(("field", "value"), [("storage_backend", "sqlite"), ("email_backend", "smtp")])
def test_unknown_backends_rejected(field: str, value: str) -> None:
    with pytest.raises(ValueError):
        _settings(**{field: value})


def test_factory_builds_memory_backends() -> None:
    backends = BackendFactory.create_backends(_settings())
    assert isinstance(backends.task_repo, InMemoryTaskRepository)
    assert isinstance(backends.user_directory, InMemoryUserDirectory)
    assert isinstance(backends.notifier, LogOnlyNotificationService)


def test_factory_builds_ses_sender() -> None:
    notifier = BackendFactory.create_notification_service(
        _settings(email_backend="ses", ses_sender_email="tasks@example.com", aws_region="us-east-1")
    )
    assert isinstance(notifier, SESNotificationService)
    assert notifier.sender == "tasks@example.com"


async def test_memory_directory_is_seeded_from_file(tmp_path) -> None:
    path = tmp_path / "users.json"
    path.write_text(
        json.dumps(
            [
                {"userId": "u1", "email": "u1@example.com", "role": "admin", "status": "active", "name": "Uno"},
                {"userId": "u2", "email": "u2@example.com", "status": "inactive"},
            ]
        ),
        encoding="utf-8",
    )
    directory = BackendFactory.create_user_directory(_settings(memory_seed_users_path=str(path)))
    assert (await directory.get_by_id("u1")).name == "Uno"
    assert [u.id for u in await directory.list_users(status="inactive")] == ["u2"]


def test_seed_file_must_be_a_list(tmp_path) -> None:
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"userId": "u1"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_users(str(path))


def test_seed_items_need_user_id(tmp_path) -> None:
    path = tmp_path / "users.json"
    path.write_text(json.dumps([{"email": "x@example.com"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_seed_users(str(path))
