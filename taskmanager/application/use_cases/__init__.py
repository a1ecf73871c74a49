"""Application use cases: one entry point per workflow."""

from taskmanager.application.use_cases.tasks import (
    CreateTaskUseCase,
    CreationStage,
    TaskService,
)

__all__ = ["CreateTaskUseCase", "CreationStage", "TaskService"]
