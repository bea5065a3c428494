"""DTOs for paginated, searchable, sortable list views."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ListQuery:
    """Normalized list request. Build with normalize_list_query, not directly."""

    page: int
    per_page: int
    search: str | None
    sort_by: str
    sort_direction: str
    # Raw values echoed back to the table UI (None when not supplied).
    requested_search: str | None = None
    requested_sort: str | None = None
    requested_direction: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of items plus the totals needed for pagination controls."""

    items: list[T]
    total: int
    query: ListQuery

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.query.per_page))

    @property
    def is_stale(self) -> bool:
        """True when the requested page is beyond the last page."""
        return self.query.page > self.last_page
