"""Module ORM model. A navigable feature area; parent_id forms the menu tree."""

from sqlalchemy import JSON, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rbac_admin.infrastructure.persistence.database import Base
from rbac_admin.infrastructure.persistence.models.mixins import SoftDeletableModel


class Module(SoftDeletableModel, Base):
    """Module. Table: module. Name unique among non-deleted rows (checked in service)."""

    __tablename__ = "module"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(64), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("module.id", ondelete="SET NULL"), nullable=True, index=True
    )
    available_actions: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )
