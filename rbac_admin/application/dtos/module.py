"""DTOs for module use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from rbac_admin.application.dtos.role import RoleSummary


@dataclass(frozen=True)
class ModuleResult:
    """Module read-model (result of get_by_id, list_page, create_module, etc.)."""

    id: int
    name: str
    description: str | None
    path: str | None
    icon: str | None
    order: int
    parent_id: int | None
    available_actions: tuple[str, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    parent_name: str | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(frozen=True)
class ModuleCreate:
    """Input for creating a module."""

    name: str
    description: str | None = None
    path: str | None = None
    icon: str | None = None
    order: int = 0
    parent_id: int | None = None
    available_actions: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ModuleUpdate:
    """Input for updating a module. None keeps the stored value; clear_parent
    and clear_description null those columns (None alone is ambiguous)."""

    name: str | None = None
    description: str | None = None
    path: str | None = None
    icon: str | None = None
    order: int | None = None
    parent_id: int | None = None
    clear_parent: bool = False
    clear_description: bool = False
    available_actions: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ModuleDetail:
    """Module with the roles that grant it any action and every active role."""

    module: ModuleResult
    roles: list[RoleSummary] = field(default_factory=list)
    available_roles: list[RoleSummary] = field(default_factory=list)
