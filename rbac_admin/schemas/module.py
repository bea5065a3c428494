"""Module API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rbac_admin.core.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from rbac_admin.schemas.listing import PaginatedResponse


class ModuleCreateRequest(BaseModel):
    """Request body for creating a module."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    path: str | None = Field(default=None, max_length=255)
    icon: str | None = Field(default=None, max_length=64)
    order: int = 0
    parent_id: int | None = None
    available_actions: list[str] | None = Field(
        default=None, description="Action tokens; defaults to ['can_view']"
    )


class ModuleUpdateRequest(BaseModel):
    """Request body for updating a module (partial). Send parent_id: null to detach."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    path: str | None = Field(default=None, max_length=255)
    icon: str | None = Field(default=None, max_length=64)
    order: int | None = None
    parent_id: int | None = None
    available_actions: list[str] | None = None


class ModuleResponse(BaseModel):
    """Module list/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    path: str | None
    icon: str | None
    order: int
    parent_id: int | None
    parent_name: str | None = None
    available_actions: list[str]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class ModuleListResponse(PaginatedResponse):
    """Paginated module list with the unfiltered active module count."""

    items: list[ModuleResponse]
    all_modules_count: int


class RoleSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ModuleDetailResponse(BaseModel):
    """Manage-module screen: the module, roles granting it, and all roles."""

    module: ModuleResponse
    roles: list[RoleSummaryResponse]
    available_roles: list[RoleSummaryResponse]
