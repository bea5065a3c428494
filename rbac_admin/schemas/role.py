"""Role API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rbac_admin.core.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from rbac_admin.schemas.listing import PaginatedResponse
from rbac_admin.schemas.navigation import NavigationNodeResponse


class RoleCreateRequest(BaseModel):
    """Request body for creating a role."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    for_admin: bool = False


class RolePermissionsUpdate(BaseModel):
    """Request body for saving the manage-role form (full permission map)."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    for_admin: bool
    permissions: dict[str, list[str]] = Field(
        default_factory=dict, description="Module id -> granted action tokens"
    )


class PermissionToggle(BaseModel):
    """Request body for granting or revoking one action on one module."""

    action: str
    granted: bool


class RoleResponse(BaseModel):
    """Role list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    for_admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RoleListResponse(PaginatedResponse):
    """Paginated role list."""

    items: list[RoleResponse]


class RolePermissionsResponse(BaseModel):
    """Role with its effective permission map."""

    role: RoleResponse
    permissions: dict[str, list[str]]


class RoleDetailResponse(RolePermissionsResponse):
    """Manage-role screen: role, permissions, and the module rows of the matrix."""

    modules: list[NavigationNodeResponse]
