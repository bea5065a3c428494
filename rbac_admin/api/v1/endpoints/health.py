"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from rbac_admin.core.config import get_settings
from rbac_admin.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status with the running version."""
    return HealthResponse(version=get_settings().app_version)
