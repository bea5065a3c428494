"""Module application service: list, create, update, soft delete, restore."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rbac_admin.application.dtos.listing import ListQuery, PageResult
from rbac_admin.application.dtos.module import (
    ModuleCreate,
    ModuleDetail,
    ModuleResult,
    ModuleUpdate,
)
from rbac_admin.application.dtos.role import RoleSummary
from rbac_admin.application.interfaces.repositories import (
    IModuleRepository,
    IRoleRepository,
)
from rbac_admin.application.services.permission_matrix import validate_action
from rbac_admin.application.services.record_validator import (
    validate_description,
    validate_name,
)
from rbac_admin.core.constants import DEFAULT_MODULE_ACTIONS
from rbac_admin.domain.enums import ModuleAction
from rbac_admin.domain.exceptions import (
    DuplicateNameException,
    InvalidParentException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)


def resolve_available_actions(actions: Iterable[str] | None) -> tuple[str, ...]:
    """Validate action tokens; dedupe into ModuleAction order. None -> defaults."""
    if actions is None:
        return DEFAULT_MODULE_ACTIONS
    unique = {validate_action(a, field="available_actions") for a in actions}
    return tuple(sorted(unique, key=ModuleAction.ordinal))


class ModuleService:
    """Module CRUD with form validation and parent (tree) integrity checks."""

    def __init__(
        self,
        module_repo: IModuleRepository,
        role_repo: IRoleRepository,
    ) -> None:
        self._module_repo = module_repo
        self._role_repo = role_repo

    async def list_modules(self, query: ListQuery) -> PageResult[ModuleResult]:
        items, total = await self._module_repo.list_page(query)
        return PageResult(items=items, total=total, query=query)

    async def count_modules(self) -> int:
        return await self._module_repo.count_active()

    async def list_deleted_modules(self) -> list[ModuleResult]:
        return await self._module_repo.list_deleted()

    async def get_module(self, module_id: int) -> ModuleResult:
        """Return active module. Raises ResourceNotFoundException if absent or deleted."""
        module = await self._module_repo.get_by_id(module_id)
        if module is None:
            raise ResourceNotFoundException("module", module_id)
        return module

    async def get_module_detail(self, module_id: int) -> ModuleDetail:
        """Module plus roles granting it any action, and every active role by name."""
        module = await self.get_module(module_id)
        granting = await self._role_repo.list_for_module(module_id)
        available = await self._role_repo.list_active_by_name()
        return ModuleDetail(
            module=module,
            roles=[RoleSummary(id=r.id, name=r.name) for r in granting],
            available_roles=[RoleSummary(id=r.id, name=r.name) for r in available],
        )

    async def create_module(self, data: ModuleCreate) -> ModuleResult:
        """Validate and insert a module.

        Raises:
            ValidationException: name/description invalid, name taken by an
                active module, unknown action token, or unusable parent.
        """
        name = validate_name(data.name)
        description = validate_description(data.description)
        if await self._module_repo.name_taken(name):
            raise DuplicateNameException("module", name)
        if data.parent_id is not None:
            await self._validate_parent(data.parent_id, module_id=None)
        created = await self._module_repo.create_module(
            ModuleCreate(
                name=name,
                description=description,
                path=data.path,
                icon=data.icon,
                order=data.order,
                parent_id=data.parent_id,
                available_actions=resolve_available_actions(data.available_actions),
            )
        )
        logger.info("Module created: id=%s name=%r", created.id, created.name)
        return created

    async def update_module(self, module_id: int, data: ModuleUpdate) -> ModuleResult:
        """Validate and apply a partial update to an active module."""
        await self.get_module(module_id)
        changes: dict[str, object] = {}
        if data.name is not None:
            name = validate_name(data.name)
            if await self._module_repo.name_taken(name, exclude_id=module_id):
                raise DuplicateNameException("module", name)
            changes["name"] = name
        if data.clear_description:
            changes["description"] = None
        elif data.description is not None:
            changes["description"] = validate_description(data.description)
        if data.path is not None:
            changes["path"] = data.path
        if data.icon is not None:
            changes["icon"] = data.icon
        if data.order is not None:
            changes["order"] = data.order
        if data.clear_parent:
            changes["parent_id"] = None
        elif data.parent_id is not None:
            await self._validate_parent(data.parent_id, module_id=module_id)
            changes["parent_id"] = data.parent_id
        if data.available_actions is not None:
            changes["available_actions"] = list(
                resolve_available_actions(data.available_actions)
            )
        updated = await self._module_repo.update_module(module_id, **changes)
        logger.info("Module updated: id=%s fields=%s", module_id, sorted(changes))
        return updated

    async def delete_module(self, module_id: int) -> None:
        """Soft delete. Children keep their parent_id and surface as roots in navigation."""
        if not await self._module_repo.soft_delete(module_id):
            raise ResourceNotFoundException("module", module_id)
        logger.info("Module soft-deleted: id=%s", module_id)

    async def restore_module(self, module_id: int) -> ModuleResult:
        """Clear deleted_at. The name must not have been reused meanwhile."""
        module = await self._module_repo.get_by_id(module_id, include_deleted=True)
        if module is None:
            raise ResourceNotFoundException("module", module_id)
        if not module.is_deleted:
            return module
        if await self._module_repo.name_taken(module.name, exclude_id=module_id):
            raise DuplicateNameException("module", module.name)
        restored = await self._module_repo.restore(module_id)
        if restored is None:
            raise ResourceNotFoundException("module", module_id)
        logger.info("Module restored: id=%s", module_id)
        return restored

    async def _validate_parent(self, parent_id: int, module_id: int | None) -> None:
        """Parent must be active, not the module itself, and not one of its descendants."""
        if module_id is not None and parent_id == module_id:
            raise InvalidParentException("A module cannot be its own parent.")
        parent = await self._module_repo.get_by_id(parent_id)
        if parent is None:
            raise InvalidParentException("The selected parent module does not exist.")
        if module_id is None:
            return
        seen: set[int] = set()
        ancestor: ModuleResult | None = parent
        while ancestor is not None and ancestor.parent_id is not None:
            if ancestor.parent_id == module_id:
                raise InvalidParentException(
                    "A module cannot be moved under one of its own descendants."
                )
            if ancestor.parent_id in seen:
                break
            seen.add(ancestor.parent_id)
            ancestor = await self._module_repo.get_by_id(ancestor.parent_id)
