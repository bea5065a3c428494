"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from rbac_admin.api.v1.dependencies (no manual repo/service
construction).
"""

from fastapi import APIRouter

from rbac_admin.api.v1.endpoints import health, modules, navigation, roles

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(modules.router, prefix="/modules", tags=["modules"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(
    navigation.router, prefix="/navigation", tags=["navigation"]
)
