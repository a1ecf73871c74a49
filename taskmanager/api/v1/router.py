"""API v1 router aggregation.

All routes use dependencies from taskmanager.api.v1.dependencies (no manual
repository/service construction).
"""

from fastapi import APIRouter

from taskmanager.api.v1.endpoints import health, tasks, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
