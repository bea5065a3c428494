"""Module repository. Read methods return ModuleResult (DTO); soft deletes only."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.application.dtos.module import ModuleCreate, ModuleResult
from rbac_admin.domain.exceptions import ResourceNotFoundException
from rbac_admin.infrastructure.persistence.models.module import Module
from rbac_admin.infrastructure.persistence.repositories.base import BaseRepository
from rbac_admin.shared.utils.datetime import ensure_utc


def _module_to_result(m: Module, parent_name: str | None = None) -> ModuleResult:
    """Map ORM Module to application ModuleResult."""
    return ModuleResult(
        id=m.id,
        name=m.name,
        description=m.description,
        path=m.path,
        icon=m.icon,
        order=m.order,
        parent_id=m.parent_id,
        available_actions=tuple(m.available_actions or ()),
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
        deleted_at=ensure_utc(m.deleted_at),
        parent_name=parent_name,
    )


class ModuleRepository(BaseRepository[Module]):
    """Module repository. Active rows exclude soft-deleted modules unless asked."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Module)

    async def list_page(self, query: ListQuery) -> tuple[list[ModuleResult], int]:
        """One page of active modules (search/sort applied) with parent names."""
        parent = aliased(Module)
        stmt = select(Module, parent.name).outerjoin(
            parent, (Module.parent_id == parent.id) & parent.deleted_at.is_(None)
        )
        rows, total = await self._page(stmt, query)
        return [_module_to_result(m, parent_name) for m, parent_name in rows], total

    async def get_by_id(
        self, module_id: int, *, include_deleted: bool = False
    ) -> ModuleResult | None:
        orm = await self.get_entity(module_id, include_deleted=include_deleted)
        return _module_to_result(orm) if orm else None

    async def list_for_navigation(self) -> list[ModuleResult]:
        """Active modules in navigation order (order asc, id asc)."""
        result = await self.db.execute(
            self._active(select(Module)).order_by(Module.order.asc(), Module.id.asc())
        )
        return [_module_to_result(m) for m in result.scalars().all()]

    async def list_deleted(self) -> list[ModuleResult]:
        result = await self.db.execute(
            select(Module)
            .where(Module.deleted_at.is_not(None))
            .order_by(Module.deleted_at.desc())
        )
        return [_module_to_result(m) for m in result.scalars().all()]

    async def get_by_name(
        self, name: str, *, include_deleted: bool = False
    ) -> ModuleResult | None:
        stmt = select(Module).where(Module.name == name)
        if not include_deleted:
            stmt = self._active(stmt)
        # Active row first: names are unique among active modules only.
        stmt = stmt.order_by(Module.deleted_at.is_not(None), Module.id.asc())
        result = await self.db.execute(stmt.limit(1))
        row = result.scalar_one_or_none()
        return _module_to_result(row) if row else None

    async def create_module(self, data: ModuleCreate) -> ModuleResult:
        """Create a module; return read-model DTO."""
        module = Module(
            name=data.name,
            description=data.description,
            path=data.path,
            icon=data.icon,
            order=data.order,
            parent_id=data.parent_id,
            available_actions=list(data.available_actions or ()),
        )
        created = await self.create(module)
        return _module_to_result(created)

    async def update_module(self, module_id: int, **changes: Any) -> ModuleResult:
        """Apply column changes to an active module."""
        module = await self.get_entity(module_id)
        if module is None:
            raise ResourceNotFoundException("module", module_id)
        for column, value in changes.items():
            setattr(module, column, value)
        updated = await self.update(module)
        return _module_to_result(updated)

    async def restore(self, module_id: int) -> ModuleResult | None:
        restored = await self._restore_entity(module_id)
        return _module_to_result(restored) if restored else None
