"""Infrastructure implementations of application service interfaces."""

from rbac_admin.infrastructure.services.permission_resolver import PermissionResolver

__all__ = ["PermissionResolver"]
