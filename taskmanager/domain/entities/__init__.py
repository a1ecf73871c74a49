"""Domain entities."""

from taskmanager.domain.entities.task import Comment, TaskEntity

__all__ = ["Comment", "TaskEntity"]
