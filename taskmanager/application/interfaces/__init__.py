"""Application interfaces (ports): repositories and outbound services."""

from taskmanager.application.interfaces.repositories import (
    ITaskRepository,
    IUserDirectory,
)
from taskmanager.application.interfaces.services import INotificationService

__all__ = [
    "INotificationService",
    "ITaskRepository",
    "IUserDirectory",
]
