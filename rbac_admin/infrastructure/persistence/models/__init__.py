"""Persistence models: ORM entities and mixins."""

from rbac_admin.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    SoftDeletableModel,
    SoftDeleteMixin,
    TimestampMixin,
)
from rbac_admin.infrastructure.persistence.models.module import Module
from rbac_admin.infrastructure.persistence.models.role import Role, RoleModule

__all__ = [
    "IntegerIdMixin",
    "Module",
    "Role",
    "RoleModule",
    "SoftDeletableModel",
    "SoftDeleteMixin",
    "TimestampMixin",
]
