"""Application DTOs (no storage or HTTP dependency)."""

from taskmanager.application.dtos.actor import ANONYMOUS_ACTOR, ActorContext
from taskmanager.application.dtos.task import CreateTaskResult, ResolvedAssignee, TaskCreate
from taskmanager.application.dtos.user import UserResult

__all__ = [
    "ANONYMOUS_ACTOR",
    "ActorContext",
    "CreateTaskResult",
    "ResolvedAssignee",
    "TaskCreate",
    "UserResult",
]
