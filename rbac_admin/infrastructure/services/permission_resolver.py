"""Resolves which modules a role may view (source of the navigation predicate)."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_admin.domain.enums import ModuleAction
from rbac_admin.infrastructure.persistence.models.module import Module
from rbac_admin.infrastructure.persistence.models.role import Role, RoleModule


class PermissionResolver:
    """Resolves module access by querying role and role_module rows."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_accessible_module_names(
        self, role_id: int, action: str = ModuleAction.VIEW.value
    ) -> set[str]:
        """Return names of active modules on which role is granted action.

        Empty when the role is missing, soft-deleted, or not for_admin.
        """
        query = (
            select(Module.name, RoleModule.actions)
            .select_from(RoleModule)
            .join(Role, Role.id == RoleModule.role_id)
            .join(Module, Module.id == RoleModule.module_id)
            .where(
                RoleModule.role_id == role_id,
                Role.deleted_at.is_(None),
                Role.for_admin.is_(True),
                Module.deleted_at.is_(None),
            )
        )
        result = await self.db.execute(query)
        return {name for name, actions in result.all() if action in (actions or ())}

    async def get_predicate(self, role_id: int) -> Callable[[str], bool]:
        """Return is_accessible(module_name) for role_id."""
        names = await self.get_accessible_module_names(role_id)
        return names.__contains__
