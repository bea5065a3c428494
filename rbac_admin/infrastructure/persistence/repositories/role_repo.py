"""Role repository: role rows and their role_module permission rows.

Read methods return RoleResult (DTO). The permission map is persisted as
a full replacement: existing rows for the role are deleted and the new map
inserted in the caller's transaction.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.application.dtos.role import RoleResult
from rbac_admin.domain.exceptions import ResourceNotFoundException
from rbac_admin.infrastructure.persistence.models.module import Module
from rbac_admin.infrastructure.persistence.models.role import Role, RoleModule
from rbac_admin.infrastructure.persistence.repositories.base import BaseRepository
from rbac_admin.shared.utils.datetime import ensure_utc


def _role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        name=r.name,
        description=r.description,
        for_admin=r.for_admin,
        created_at=ensure_utc(r.created_at),
        updated_at=ensure_utc(r.updated_at),
        deleted_at=ensure_utc(r.deleted_at),
    )


class RoleRepository(BaseRepository[Role]):
    """Role repository. Use get_permission_map / replace_permissions for the matrix."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    async def list_page(self, query: ListQuery) -> tuple[list[RoleResult], int]:
        rows, total = await self._page(select(Role), query)
        return [_role_to_result(r) for (r,) in rows], total

    async def get_by_id(self, role_id: int) -> RoleResult | None:
        orm = await self.get_entity(role_id)
        return _role_to_result(orm) if orm else None

    async def create_role(
        self, name: str, description: str | None, for_admin: bool
    ) -> RoleResult:
        """Create a role; return read-model DTO."""
        created = await self.create(
            Role(name=name, description=description, for_admin=for_admin)
        )
        return _role_to_result(created)

    async def update_role(
        self, role_id: int, *, name: str, description: str | None, for_admin: bool
    ) -> RoleResult:
        role = await self.get_entity(role_id)
        if role is None:
            raise ResourceNotFoundException("role", role_id)
        role.name = name
        role.description = description
        role.for_admin = for_admin
        updated = await self.update(role)
        return _role_to_result(updated)

    async def get_permission_map(self, role_id: int) -> dict[str, list[str]]:
        """Stored moduleId -> actions for role, limited to active modules."""
        result = await self.db.execute(
            select(RoleModule.module_id, RoleModule.actions)
            .join(Module, Module.id == RoleModule.module_id)
            .where(RoleModule.role_id == role_id, Module.deleted_at.is_(None))
            .order_by(RoleModule.module_id.asc())
        )
        return {str(module_id): list(actions or ()) for module_id, actions in result.all()}

    async def replace_permissions(
        self, role_id: int, permissions: dict[str, list[str]]
    ) -> None:
        """Delete every role_module row of role, then insert permissions."""
        await self.db.execute(delete(RoleModule).where(RoleModule.role_id == role_id))
        self.db.add_all(
            RoleModule(role_id=role_id, module_id=int(module_id), actions=list(actions))
            for module_id, actions in permissions.items()
        )
        await self.db.flush()

    async def list_active_by_name(self) -> list[RoleResult]:
        result = await self.db.execute(self._active(select(Role)).order_by(Role.name.asc()))
        return [_role_to_result(r) for r in result.scalars().all()]

    async def list_for_module(self, module_id: int) -> list[RoleResult]:
        """Active roles with a non-empty action list on module_id."""
        result = await self.db.execute(
            self._active(select(Role, RoleModule.actions))
            .join(RoleModule, RoleModule.role_id == Role.id)
            .where(RoleModule.module_id == module_id)
            .order_by(Role.name.asc())
        )
        return [_role_to_result(r) for r, actions in result.all() if actions]
