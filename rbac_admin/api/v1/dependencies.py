"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories, services, list queries and
the navigation access predicate. Routes depend only on these, never on
infrastructure directly; tests swap them via app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.application.services.list_query import normalize_list_query
from rbac_admin.application.services.module_service import ModuleService
from rbac_admin.application.services.navigation_service import NavigationService
from rbac_admin.application.services.role_service import RoleService
from rbac_admin.core.config import get_settings
from rbac_admin.core.constants import MODULE_SORT_FIELDS, ROLE_SORT_FIELDS
from rbac_admin.infrastructure.persistence.database import get_db, get_db_transactional
from rbac_admin.infrastructure.persistence.repositories import (
    ModuleRepository,
    RoleRepository,
)
from rbac_admin.infrastructure.services import PermissionResolver


def _list_query_dependency(sort_fields: tuple[str, ...]):
    """Build a dependency that reads table query params into a ListQuery."""

    def dependency(
        page: Annotated[str | None, Query()] = None,
        per_page: Annotated[str | None, Query(alias="perPage")] = None,
        search: Annotated[str | None, Query()] = None,
        sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
        sort_direction: Annotated[str | None, Query(alias="sortDirection")] = None,
    ) -> ListQuery:
        return normalize_list_query(
            page=page,
            per_page=per_page,
            search=search,
            sort_by=sort_by,
            sort_direction=sort_direction,
            sort_fields=sort_fields,
        )

    return dependency


get_module_list_query = _list_query_dependency(MODULE_SORT_FIELDS)
get_role_list_query = _list_query_dependency(ROLE_SORT_FIELDS)


async def get_module_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ModuleService:
    """Module service for read operations (list, get, detail)."""
    return ModuleService(ModuleRepository(db), RoleRepository(db))


async def get_module_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ModuleService:
    """Module service for create/update/delete/restore (transactional)."""
    return ModuleService(ModuleRepository(db), RoleRepository(db))


async def get_role_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RoleService:
    """Role service for read operations (list, manage-role screen)."""
    return RoleService(RoleRepository(db), ModuleRepository(db))


async def get_role_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> RoleService:
    """Role service for create/save/toggle/delete (transactional)."""
    return RoleService(RoleRepository(db), ModuleRepository(db))


async def get_navigation_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> NavigationService:
    """Navigation service labelled with settings.navigation_group_label."""
    settings = get_settings()
    return NavigationService(ModuleRepository(db), settings.navigation_group_label)


async def get_permission_resolver(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PermissionResolver:
    """Resolver supplying the is_accessible predicate for navigation."""
    return PermissionResolver(db)
