"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class RoleResult:
    """Role read-model (result of get_by_id, list_page, create_role, etc.)."""

    id: int
    name: str
    description: str | None
    for_admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class RoleSummary:
    """Role id and name (module detail screen)."""

    id: int
    name: str


@dataclass(frozen=True)
class RoleDetail:
    """Role with its effective permission map (empty unless for_admin)."""

    role: RoleResult
    permissions: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class RoleUpdate:
    """Full replacement submitted by the manage-role screen."""

    name: str
    description: str | None
    for_admin: bool
    permissions: dict[str, list[str]] = field(default_factory=dict)
