"""Role and RoleModule ORM models. A role grants actions per module."""

from sqlalchemy import JSON, Boolean, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from rbac_admin.infrastructure.persistence.database import Base
from rbac_admin.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    SoftDeletableModel,
)


class Role(SoftDeletableModel, Base):
    """Role. Table: role. for_admin gates access to the admin dashboard."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    for_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class RoleModule(IntegerIdMixin, Base):
    """Role-module permission row. Table: role_module. actions is a list of tokens."""

    __tablename__ = "role_module"

    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    module_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("module.id", ondelete="CASCADE"), nullable=False
    )
    actions: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint("role_id", "module_id", name="uq_role_module"),
        Index("ix_role_module_module", "module_id"),
    )
