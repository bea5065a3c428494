"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rbac_admin.application.dtos.listing import ListQuery
    from rbac_admin.application.dtos.module import ModuleCreate, ModuleResult
    from rbac_admin.application.dtos.role import RoleResult


class IModuleRepository(Protocol):
    """Protocol for module repository."""

    async def list_page(self, query: ListQuery) -> tuple[list[ModuleResult], int]:
        """Return one page of active modules matching query, and the match count."""

    async def count_active(self) -> int:
        """Return the number of non-deleted modules."""

    async def get_by_id(
        self, module_id: int, *, include_deleted: bool = False
    ) -> ModuleResult | None:
        """Return module by id; soft-deleted rows only when include_deleted."""

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        """Return True if an active module other than exclude_id uses name."""

    async def list_for_navigation(self) -> list[ModuleResult]:
        """Return active modules ordered by order asc, then id asc."""

    async def list_deleted(self) -> list[ModuleResult]:
        """Return soft-deleted modules, most recently deleted first."""

    async def create_module(self, data: ModuleCreate) -> ModuleResult:
        """Insert a module; available_actions must already be resolved."""

    async def update_module(self, module_id: int, **changes: object) -> ModuleResult:
        """Apply column changes to an active module and return it."""

    async def soft_delete(self, module_id: int) -> bool:
        """Stamp deleted_at; return False if not found or already deleted."""

    async def restore(self, module_id: int) -> ModuleResult | None:
        """Clear deleted_at; return None if not found."""


class IRoleRepository(Protocol):
    """Protocol for role repository (role rows and role_module permission rows)."""

    async def list_page(self, query: ListQuery) -> tuple[list[RoleResult], int]:
        """Return one page of active roles matching query, and the match count."""

    async def get_by_id(self, role_id: int) -> RoleResult | None:
        """Return active role by id."""

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        """Return True if an active role other than exclude_id uses name."""

    async def create_role(
        self, name: str, description: str | None, for_admin: bool
    ) -> RoleResult:
        """Insert a role."""

    async def update_role(
        self, role_id: int, *, name: str, description: str | None, for_admin: bool
    ) -> RoleResult:
        """Update role columns and return it."""

    async def soft_delete(self, role_id: int) -> bool:
        """Stamp deleted_at; return False if not found or already deleted."""

    async def get_permission_map(self, role_id: int) -> dict[str, list[str]]:
        """Return stored moduleId -> actions for role (active modules only)."""

    async def replace_permissions(
        self, role_id: int, permissions: dict[str, list[str]]
    ) -> None:
        """Replace every stored permission row of role with permissions."""

    async def list_active_by_name(self) -> list[RoleResult]:
        """Return active roles ordered by name."""

    async def list_for_module(self, module_id: int) -> list[RoleResult]:
        """Return active roles granting at least one action on module_id."""
