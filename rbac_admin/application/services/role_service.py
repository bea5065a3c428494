"""Role application service: role CRUD and the permission matrix save path."""

from __future__ import annotations

import logging

from rbac_admin.application.dtos.listing import ListQuery, PageResult
from rbac_admin.application.dtos.module import ModuleResult
from rbac_admin.application.dtos.role import RoleDetail, RoleResult, RoleUpdate
from rbac_admin.application.interfaces.repositories import (
    IModuleRepository,
    IRoleRepository,
)
from rbac_admin.application.services.navigation_builder import (
    NavigationNode,
    build_tree,
)
from rbac_admin.application.services.permission_matrix import (
    PermissionMatrix,
    validate_action,
)
from rbac_admin.application.services.record_validator import (
    validate_description,
    validate_name,
)
from rbac_admin.domain.exceptions import (
    DuplicateNameException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class RoleService:
    """Create, edit and soft delete roles; load and save their permission maps.

    Saves always persist the editor's full serialized map. A role that is
    not for_admin is saved with an empty map.
    """

    def __init__(
        self, role_repo: IRoleRepository, module_repo: IModuleRepository
    ) -> None:
        self._role_repo = role_repo
        self._module_repo = module_repo

    async def list_roles(self, query: ListQuery) -> PageResult[RoleResult]:
        items, total = await self._role_repo.list_page(query)
        return PageResult(items=items, total=total, query=query)

    async def _get_role_result(self, role_id: int) -> RoleResult:
        role = await self._role_repo.get_by_id(role_id)
        if role is None:
            raise ResourceNotFoundException("role", role_id)
        return role

    async def load_matrix(self, role_id: int) -> tuple[RoleResult, PermissionMatrix]:
        """Return the role and an editor seeded from its stored permissions."""
        role = await self._get_role_result(role_id)
        stored = await self._role_repo.get_permission_map(role_id)
        return role, PermissionMatrix(stored, for_admin=role.for_admin)

    async def get_role(self, role_id: int) -> RoleDetail:
        """Role and its effective permission map (empty unless for_admin)."""
        role, matrix = await self.load_matrix(role_id)
        return RoleDetail(role=role, permissions=matrix.serialize())

    async def get_matrix_rows(self) -> list[NavigationNode]:
        """Module tree (with available actions) that the matrix editor renders."""
        return build_tree(await self._module_repo.list_for_navigation())

    async def create_role(
        self, name: str, description: str | None = None, *, for_admin: bool = False
    ) -> RoleResult:
        """Validate and insert a role with no permissions."""
        clean_name = validate_name(name)
        clean_description = validate_description(description)
        if await self._role_repo.name_taken(clean_name):
            raise DuplicateNameException("role", clean_name)
        created = await self._role_repo.create_role(
            clean_name, clean_description, for_admin
        )
        logger.info("Role created: id=%s name=%r", created.id, created.name)
        return created

    async def update_role_permissions(self, role_id: int, data: RoleUpdate) -> RoleDetail:
        """Save the manage-role form: name, description, for_admin and the full map.

        Raises:
            ResourceNotFoundException: Role does not exist or is deleted.
            ValidationException: Invalid name/description, unknown action
                token, unknown module, or action the module does not offer.
        """
        await self._get_role_result(role_id)
        name = validate_name(data.name)
        description = validate_description(data.description)
        if await self._role_repo.name_taken(name, exclude_id=role_id):
            raise DuplicateNameException("role", name)

        matrix = PermissionMatrix(data.permissions, for_admin=data.for_admin)
        payload = matrix.serialize()
        await self._check_against_modules(payload)

        updated = await self._role_repo.update_role(
            role_id, name=name, description=description, for_admin=data.for_admin
        )
        await self._role_repo.replace_permissions(role_id, payload)
        logger.info(
            "Role permissions replaced: id=%s for_admin=%s modules=%d",
            role_id,
            data.for_admin,
            len(payload),
        )
        return RoleDetail(role=updated, permissions=payload)

    async def toggle_permission(
        self, role_id: int, module_id: int, action: str, granted: bool
    ) -> RoleDetail:
        """Grant or revoke one action and persist the resulting full map.

        Inert for admin-disabled roles: nothing is written and the empty
        effective map is returned.
        """
        validate_action(action)
        role, matrix = await self.load_matrix(role_id)
        module = await self._module_repo.get_by_id(module_id)
        if module is None:
            raise ResourceNotFoundException("module", module_id)
        self._check_action_offered(module, action)
        if not role.for_admin:
            logger.debug("Toggle ignored: role %s is not for_admin", role_id)
            return RoleDetail(role=role, permissions={})
        matrix.toggle(module_id, action, granted)
        payload = matrix.serialize()
        await self._role_repo.replace_permissions(role_id, payload)
        logger.info(
            "Role %s: %s %s on module %s",
            role_id,
            "granted" if granted else "revoked",
            action,
            module_id,
        )
        return RoleDetail(role=role, permissions=payload)

    async def delete_role(self, role_id: int) -> None:
        if not await self._role_repo.soft_delete(role_id):
            raise ResourceNotFoundException("role", role_id)
        logger.info("Role soft-deleted: id=%s", role_id)

    async def _check_against_modules(self, payload: dict[str, list[str]]) -> None:
        """Every key must be an active module and every action one it offers."""
        if not payload:
            return
        modules = {
            str(m.id): m for m in await self._module_repo.list_for_navigation()
        }
        for module_id, actions in payload.items():
            module = modules.get(module_id)
            if module is None:
                raise ValidationException(
                    f"Unknown module: {module_id}", field="permissions"
                )
            for action in actions:
                self._check_action_offered(module, action)

    @staticmethod
    def _check_action_offered(module: ModuleResult, action: str) -> None:
        if action not in module.available_actions:
            raise ValidationException(
                f"Module '{module.name}' does not offer action {action!r}",
                field="permissions",
            )
