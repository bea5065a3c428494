"""Pydantic request/response schemas for the API."""

from rbac_admin.schemas.health import HealthResponse
from rbac_admin.schemas.module import (
    ModuleCreateRequest,
    ModuleDetailResponse,
    ModuleListResponse,
    ModuleResponse,
    ModuleUpdateRequest,
)
from rbac_admin.schemas.navigation import NavigationNodeResponse, NavigationResponse
from rbac_admin.schemas.role import (
    PermissionToggle,
    RoleCreateRequest,
    RoleDetailResponse,
    RoleListResponse,
    RolePermissionsResponse,
    RolePermissionsUpdate,
    RoleResponse,
)

__all__ = [
    "HealthResponse",
    "ModuleCreateRequest",
    "ModuleDetailResponse",
    "ModuleListResponse",
    "ModuleResponse",
    "ModuleUpdateRequest",
    "NavigationNodeResponse",
    "NavigationResponse",
    "PermissionToggle",
    "RoleCreateRequest",
    "RoleDetailResponse",
    "RoleListResponse",
    "RolePermissionsResponse",
    "RolePermissionsUpdate",
    "RoleResponse",
]
