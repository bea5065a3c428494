"""Shared pagination fields for list responses (table state echoed to the UI)."""

from typing import Any

from pydantic import BaseModel, Field

from rbac_admin.application.dtos.listing import PageResult
from rbac_admin.core.constants import PER_PAGE_OPTIONS


class PaginatedResponse(BaseModel):
    """Page metadata plus the table state the list was built from."""

    total: int
    page: int
    per_page: int
    last_page: int
    per_page_options: list[int] = Field(default_factory=lambda: list(PER_PAGE_OPTIONS))
    search: str | None = None
    sort: str | None = None
    direction: str | None = None


def page_fields(result: PageResult[Any]) -> dict[str, Any]:
    """PaginatedResponse keyword arguments for result."""
    query = result.query
    return {
        "total": result.total,
        "page": query.page,
        "per_page": query.per_page,
        "last_page": result.last_page,
        "search": query.requested_search,
        "sort": query.requested_sort,
        "direction": query.requested_direction,
    }
