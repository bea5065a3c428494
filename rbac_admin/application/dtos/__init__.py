"""Application DTOs (no ORM dependency)."""

from rbac_admin.application.dtos.listing import ListQuery, PageResult
from rbac_admin.application.dtos.module import (
    ModuleCreate,
    ModuleDetail,
    ModuleResult,
    ModuleUpdate,
)
from rbac_admin.application.dtos.role import (
    RoleDetail,
    RoleResult,
    RoleSummary,
    RoleUpdate,
)

__all__ = [
    "ListQuery",
    "ModuleCreate",
    "ModuleDetail",
    "ModuleResult",
    "ModuleUpdate",
    "PageResult",
    "RoleDetail",
    "RoleResult",
    "RoleSummary",
    "RoleUpdate",
]
