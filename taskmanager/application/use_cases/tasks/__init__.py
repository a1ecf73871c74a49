"""Task use cases: creation workflow and post-creation operations."""

from taskmanager.application.use_cases.tasks.create_task import (
    CreateTaskUseCase,
    CreationStage,
)
from taskmanager.application.use_cases.tasks.task_operations import TaskService

__all__ = ["CreateTaskUseCase", "CreationStage", "TaskService"]
