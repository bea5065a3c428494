"""Base repository: generic CRUD plus soft-delete aware lookups and listing."""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.infrastructure.persistence.database import Base
from rbac_admin.shared.utils.datetime import utc_now

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository for soft-deletable models (deleted_at column).

    Provides get_entity, create, update, soft delete/restore and the
    search/sort/paginate query used by list views. Subclasses map ORM rows
    to application DTOs.
    """

    # Columns matched by list-view search (substring, case-insensitive).
    search_columns: tuple[str, ...] = ("name", "description")

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _active(self, stmt: Select[Any]) -> Select[Any]:
        model: Any = self.model
        return stmt.where(model.deleted_at.is_(None))

    async def get_entity(
        self, entity_id: int, *, include_deleted: bool = False
    ) -> ModelType | None:
        """Return ORM row by primary key; soft-deleted rows only when include_deleted."""
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id)
        if not include_deleted:
            stmt = self._active(stmt)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        """Return True if an active row other than exclude_id already uses name."""
        model: Any = self.model
        stmt = self._active(select(model.id).where(model.name == name))
        if exclude_id is not None:
            stmt = stmt.where(model.id != exclude_id)
        result = await self.db.execute(stmt.limit(1))
        return result.first() is not None

    async def count_active(self) -> int:
        result = await self.db.execute(self._active(select(func.count()).select_from(self.model)))
        return int(result.scalar_one())

    def _apply_search(self, stmt: Select[Any], query: ListQuery) -> Select[Any]:
        if not query.search:
            return stmt
        pattern = f"%{query.search}%"
        model: Any = self.model
        return stmt.where(
            or_(*(getattr(model, col).ilike(pattern) for col in self.search_columns))
        )

    def _apply_sort(self, stmt: Select[Any], query: ListQuery) -> Select[Any]:
        column = getattr(self.model, query.sort_by)
        ordering = column.asc() if query.sort_direction == "asc" else column.desc()
        model: Any = self.model
        return stmt.order_by(ordering, model.id.asc())

    async def _page(
        self, stmt: Select[Any], query: ListQuery
    ) -> tuple[list[Any], int]:
        """Run stmt filtered by search; return (rows for the page, total matches)."""
        filtered = self._apply_search(self._active(stmt), query)
        count_stmt = select(func.count()).select_from(filtered.order_by(None).subquery())
        total = int((await self.db.execute(count_stmt)).scalar_one())
        page_stmt = (
            self._apply_sort(filtered, query).offset(query.offset).limit(query.per_page)
        )
        result = await self.db.execute(page_stmt)
        return list(result.all()), total

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it refreshed (id, timestamps)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and return it refreshed."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def soft_delete(self, entity_id: int) -> bool:
        """Stamp deleted_at; return False if not found or already deleted."""
        obj: Any = await self.get_entity(entity_id)
        if obj is None:
            return False
        obj.deleted_at = utc_now()
        await self.db.flush()
        return True

    async def _restore_entity(self, entity_id: int) -> ModelType | None:
        obj: Any = await self.get_entity(entity_id, include_deleted=True)
        if obj is None:
            return None
        obj.deleted_at = None
        return await self.update(obj)
