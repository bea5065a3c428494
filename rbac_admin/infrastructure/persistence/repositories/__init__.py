"""Persistence repositories. Re-exports for dependency injection."""

from rbac_admin.infrastructure.persistence.repositories.base import BaseRepository
from rbac_admin.infrastructure.persistence.repositories.module_repo import (
    ModuleRepository,
)
from rbac_admin.infrastructure.persistence.repositories.role_repo import RoleRepository

__all__ = [
    "BaseRepository",
    "ModuleRepository",
    "RoleRepository",
]
