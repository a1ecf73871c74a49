"""Health check endpoint. No identity required; used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from taskmanager.api.v1.dependencies import get_app_settings
from taskmanager.core.config import Settings
from taskmanager.schemas.health import HealthResponse
from taskmanager.shared.utils.datetime import utc_now

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Return healthy status and the configured backends."""
    authentication = "gateway+jwt" if settings.secret_key.get_secret_value() else "gateway"
    return HealthResponse(
        timestamp=utc_now(),
        services={
            "database": settings.storage_backend,
            "email": settings.email_backend,
            "authentication": authentication,
        },
    )
