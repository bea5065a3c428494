"""Normalization of list-view query parameters (page, size, search, sort).

Invalid input never fails the request: non-numeric or unknown page sizes,
non-numeric pages, unknown sort fields and directions fall back to
defaults, matching what the table UI expects.
"""

from collections.abc import Sequence

from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.core.constants import (
    DEFAULT_PER_PAGE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    PER_PAGE_OPTIONS,
    SEARCH_STRIP_CHARS,
)
from rbac_admin.domain.enums import SortDirection


def _to_int(value: int | str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_page(page: int | str | None) -> int:
    """Return page as a positive int; missing, non-numeric or < 1 -> 1."""
    number = _to_int(page)
    if number is None or number < 1:
        return 1
    return number


def normalize_per_page(per_page: int | str | None) -> int:
    """Return per_page when it is an offered page size, else the default."""
    size = _to_int(per_page)
    if size in PER_PAGE_OPTIONS:
        return size
    return DEFAULT_PER_PAGE


def normalize_search(search: str | None) -> str | None:
    """Strip leading '!' characters and surrounding whitespace; blank -> None."""
    if search is None:
        return None
    term = search.lstrip(SEARCH_STRIP_CHARS).strip()
    return term or None


def normalize_sort(
    sort_by: str | None, sort_direction: str | None, sort_fields: Sequence[str]
) -> tuple[str, str]:
    """Return (field, direction) if both are valid, else created_at desc."""
    if sort_by in sort_fields and sort_direction in SortDirection.values():
        return sort_by, sort_direction
    return DEFAULT_SORT_FIELD, DEFAULT_SORT_DIRECTION


def normalize_list_query(
    *,
    page: int | str | None,
    per_page: int | str | None,
    search: str | None,
    sort_by: str | None,
    sort_direction: str | None,
    sort_fields: Sequence[str],
) -> ListQuery:
    """Build a ListQuery from raw request parameters."""
    field, direction = normalize_sort(sort_by, sort_direction, sort_fields)
    return ListQuery(
        page=normalize_page(page),
        per_page=normalize_per_page(per_page),
        search=normalize_search(search),
        sort_by=field,
        sort_direction=direction,
        requested_search=search,
        requested_sort=sort_by,
        requested_direction=sort_direction,
    )
