"""In-memory repositories implementing the application repository protocols.

Used by unit tests of services and by API tests through
app.dependency_overrides, so neither needs Postgres.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.application.dtos.module import ModuleCreate, ModuleResult
from rbac_admin.application.dtos.role import RoleResult
from rbac_admin.domain.exceptions import ResourceNotFoundException

T = TypeVar("T")

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _page(rows: list[T], query: ListQuery) -> tuple[list[T], int]:
    if query.search:
        term = query.search.lower()
        rows = [
            r
            for r in rows
            if term in getattr(r, "name").lower()
            or term in (getattr(r, "description") or "").lower()
        ]
    rows = sorted(rows, key=lambda r: getattr(r, "id"))
    rows.sort(
        key=lambda r: (getattr(r, query.sort_by) is None, getattr(r, query.sort_by)),
        reverse=query.sort_direction == "desc",
    )
    return rows[query.offset : query.offset + query.per_page], len(rows)


class _Clock:
    """Monotonic created_at stamps so created_at sorting is deterministic."""

    def __init__(self) -> None:
        self._ticks = 0

    def now(self) -> datetime:
        self._ticks += 1
        return _EPOCH + timedelta(minutes=self._ticks)


class FakeModuleRepository:
    def __init__(self, modules: list[ModuleResult] | None = None) -> None:
        self._clock = _Clock()
        self.rows: dict[int, ModuleResult] = {}
        for module in modules or []:
            self.rows[module.id] = module
        self._next_id = max(self.rows, default=0) + 1

    def add(self, name: str, **fields: Any) -> ModuleResult:
        """Insert a module directly (test setup helper)."""
        module = ModuleResult(
            id=fields.pop("id", self._next_id),
            name=name,
            description=fields.pop("description", None),
            path=fields.pop("path", None),
            icon=fields.pop("icon", None),
            order=fields.pop("order", 0),
            parent_id=fields.pop("parent_id", None),
            available_actions=tuple(fields.pop("available_actions", ("can_view",))),
            created_at=fields.pop("created_at", self._clock.now()),
            **fields,
        )
        self.rows[module.id] = module
        self._next_id = max(self._next_id, module.id + 1)
        return module

    def _active(self) -> list[ModuleResult]:
        return [m for m in self.rows.values() if not m.is_deleted]

    async def list_page(self, query: ListQuery) -> tuple[list[ModuleResult], int]:
        items, total = _page(self._active(), query)
        names = {m.id: m.name for m in self._active()}
        return [replace(m, parent_name=names.get(m.parent_id)) for m in items], total

    async def count_active(self) -> int:
        return len(self._active())

    async def get_by_id(
        self, module_id: int, *, include_deleted: bool = False
    ) -> ModuleResult | None:
        module = self.rows.get(module_id)
        if module is None or (module.is_deleted and not include_deleted):
            return None
        return module

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        return any(m.name == name and m.id != exclude_id for m in self._active())

    async def get_by_name(
        self, name: str, *, include_deleted: bool = False
    ) -> ModuleResult | None:
        rows = self.rows.values() if include_deleted else self._active()
        matches = sorted((m for m in rows if m.name == name), key=lambda m: m.id)
        return matches[0] if matches else None

    async def list_for_navigation(self) -> list[ModuleResult]:
        return sorted(self._active(), key=lambda m: (m.order, m.id))

    async def list_deleted(self) -> list[ModuleResult]:
        deleted = [m for m in self.rows.values() if m.is_deleted]
        return sorted(deleted, key=lambda m: m.deleted_at, reverse=True)

    async def create_module(self, data: ModuleCreate) -> ModuleResult:
        return self.add(
            data.name,
            description=data.description,
            path=data.path,
            icon=data.icon,
            order=data.order,
            parent_id=data.parent_id,
            available_actions=data.available_actions or (),
        )

    async def update_module(self, module_id: int, **changes: Any) -> ModuleResult:
        module = await self.get_by_id(module_id)
        if module is None:
            raise ResourceNotFoundException("module", module_id)
        if "available_actions" in changes:
            changes["available_actions"] = tuple(changes["available_actions"])
        updated = replace(module, updated_at=self._clock.now(), **changes)
        self.rows[module_id] = updated
        return updated

    async def soft_delete(self, module_id: int) -> bool:
        module = await self.get_by_id(module_id)
        if module is None:
            return False
        self.rows[module_id] = replace(module, deleted_at=self._clock.now())
        return True

    async def restore(self, module_id: int) -> ModuleResult | None:
        module = self.rows.get(module_id)
        if module is None:
            return None
        self.rows[module_id] = replace(module, deleted_at=None)
        return self.rows[module_id]


class FakeRoleRepository:
    def __init__(self, module_repo: FakeModuleRepository | None = None) -> None:
        self._clock = _Clock()
        self._module_repo = module_repo
        self.rows: dict[int, RoleResult] = {}
        self.permissions: dict[int, dict[str, list[str]]] = {}
        self.replace_calls = 0
        self._next_id = 1

    def add(
        self,
        name: str,
        *,
        for_admin: bool = True,
        description: str | None = None,
        permissions: dict[str, list[str]] | None = None,
    ) -> RoleResult:
        """Insert a role directly (test setup helper)."""
        role = RoleResult(
            id=self._next_id,
            name=name,
            description=description,
            for_admin=for_admin,
            created_at=self._clock.now(),
        )
        self.rows[role.id] = role
        self.permissions[role.id] = dict(permissions or {})
        self._next_id += 1
        return role

    def _active(self) -> list[RoleResult]:
        return [r for r in self.rows.values() if r.deleted_at is None]

    async def list_page(self, query: ListQuery) -> tuple[list[RoleResult], int]:
        return _page(self._active(), query)

    async def get_by_id(self, role_id: int) -> RoleResult | None:
        role = self.rows.get(role_id)
        if role is None or role.deleted_at is not None:
            return None
        return role

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        return any(r.name == name and r.id != exclude_id for r in self._active())

    async def create_role(
        self, name: str, description: str | None, for_admin: bool
    ) -> RoleResult:
        return self.add(name, description=description, for_admin=for_admin)

    async def update_role(
        self, role_id: int, *, name: str, description: str | None, for_admin: bool
    ) -> RoleResult:
        role = await self.get_by_id(role_id)
        if role is None:
            raise ResourceNotFoundException("role", role_id)
        updated = replace(
            role,
            name=name,
            description=description,
            for_admin=for_admin,
            updated_at=self._clock.now(),
        )
        self.rows[role_id] = updated
        return updated

    async def soft_delete(self, role_id: int) -> bool:
        role = await self.get_by_id(role_id)
        if role is None:
            return False
        self.rows[role_id] = replace(role, deleted_at=self._clock.now())
        return True

    async def get_permission_map(self, role_id: int) -> dict[str, list[str]]:
        stored = self.permissions.get(role_id, {})
        if self._module_repo is None:
            return {k: list(v) for k, v in stored.items()}
        active = {str(m.id) for m in await self._module_repo.list_for_navigation()}
        return {k: list(v) for k, v in stored.items() if k in active}

    async def replace_permissions(
        self, role_id: int, permissions: dict[str, list[str]]
    ) -> None:
        self.replace_calls += 1
        self.permissions[role_id] = {k: list(v) for k, v in permissions.items()}

    async def list_active_by_name(self) -> list[RoleResult]:
        return sorted(self._active(), key=lambda r: r.name)

    async def list_for_module(self, module_id: int) -> list[RoleResult]:
        key = str(module_id)
        return [
            r
            for r in await self.list_active_by_name()
            if self.permissions.get(r.id, {}).get(key)
        ]
