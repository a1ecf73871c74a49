"""In-memory repositories (STORAGE_BACKEND=memory)."""

from taskmanager.infrastructure.persistence.memory.task_repo import InMemoryTaskRepository
from taskmanager.infrastructure.persistence.memory.user_repo import (
    InMemoryUserDirectory,
    load_seed_users,
)

__all__ = ["InMemoryTaskRepository", "InMemoryUserDirectory", "load_seed_users"]
