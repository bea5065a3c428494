"""Application services: navigation tree, permission matrix, module and role CRUD."""

from rbac_admin.application.services.module_service import ModuleService
from rbac_admin.application.services.navigation_builder import (
    NavigationNode,
    build_tree,
    filter_accessible,
)
from rbac_admin.application.services.navigation_service import NavigationService
from rbac_admin.application.services.permission_matrix import PermissionMatrix
from rbac_admin.application.services.role_service import RoleService

__all__ = [
    "ModuleService",
    "NavigationNode",
    "NavigationService",
    "PermissionMatrix",
    "RoleService",
    "build_tree",
    "filter_accessible",
]
