"""Backend factory: builds the task store, user directory and notifier from settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from taskmanager.application.interfaces.repositories import (
    ITaskRepository,
    IUserDirectory,
)
from taskmanager.application.interfaces.services import INotificationService

if TYPE_CHECKING:
    from taskmanager.core.config import Settings


@dataclass
class Backends:
    """Collaborators injected into the use cases (one set per process)."""

    task_repo: ITaskRepository
    user_directory: IUserDirectory
    notifier: INotificationService


class BackendFactory:
    """Factory for collaborator instances based on configuration."""

    @staticmethod
    def create_task_repository(settings: "Settings") -> ITaskRepository:
        """Create the task repository for settings.storage_backend.

        Raises:
            ValueError: Unknown backend.
        """
        backend = settings.storage_backend
        if backend == "memory":
            from taskmanager.infrastructure.persistence.memory import (
                InMemoryTaskRepository,
            )

            return InMemoryTaskRepository()
        if backend == "dynamodb":
            from taskmanager.infrastructure.persistence.dynamodb import (
                DynamoDBTaskRepository,
                get_table,
            )

            return DynamoDBTaskRepository(
                get_table(
                    settings.tasks_table,
                    settings.aws_region,
                    settings.dynamodb_endpoint_url,
                )
            )
        raise ValueError(
            f"Unknown storage backend: {backend}. Supported: 'dynamodb', 'memory'"
        )

    @staticmethod
    def create_user_directory(settings: "Settings") -> IUserDirectory:
        """Create the user directory for settings.storage_backend."""
        backend = settings.storage_backend
        if backend == "memory":
            from taskmanager.infrastructure.persistence.memory import (
                InMemoryUserDirectory,
            )

            directory = InMemoryUserDirectory()
            if settings.memory_seed_users_path:
                from taskmanager.infrastructure.persistence.memory import load_seed_users

                for user in load_seed_users(settings.memory_seed_users_path):
                    directory.add(user)
            return directory
        if backend == "dynamodb":
            from taskmanager.infrastructure.persistence.dynamodb import (
                DynamoDBUserDirectory,
                get_table,
            )

            return DynamoDBUserDirectory(
                get_table(
                    settings.users_table,
                    settings.aws_region,
                    settings.dynamodb_endpoint_url,
                )
            )
        raise ValueError(
            f"Unknown storage backend: {backend}. Supported: 'dynamodb', 'memory'"
        )

    @staticmethod
    def create_notification_service(settings: "Settings") -> INotificationService:
        """Create the email sender for settings.email_backend."""
        backend = settings.email_backend
        if backend == "log":
            from taskmanager.infrastructure.notifications import (
                LogOnlyNotificationService,
            )

            return LogOnlyNotificationService()
        if backend == "ses":
            from taskmanager.infrastructure.notifications import SESNotificationService

            return SESNotificationService(
                sender=settings.ses_sender_email,
                region=settings.aws_region,
                configuration_set=settings.ses_configuration_set,
            )
        raise ValueError(f"Unknown email backend: {backend}. Supported: 'ses', 'log'")

    @classmethod
    def create_backends(cls, settings: "Settings") -> Backends:
        return Backends(
            task_repo=cls.create_task_repository(settings),
            user_directory=cls.create_user_directory(settings),
            notifier=cls.create_notification_service(settings),
        )
