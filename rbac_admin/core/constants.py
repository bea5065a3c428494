"""Core constants: list-view limits and form field limits.

Single source of truth for values shared by schemas, services and
repositories.
"""

# Page sizes offered by list views; anything else falls back to the first.
PER_PAGE_OPTIONS: tuple[int, ...] = (5, 10, 25, 50, 100)
DEFAULT_PER_PAGE = PER_PAGE_OPTIONS[0]

# Fallback ordering when the requested sort field/direction pair is invalid.
DEFAULT_SORT_FIELD = "created_at"
DEFAULT_SORT_DIRECTION = "desc"

MODULE_SORT_FIELDS: tuple[str, ...] = ("id", "order", "name", "description", "created_at")
ROLE_SORT_FIELDS: tuple[str, ...] = ("id", "name", "description", "created_at")

# Leading characters stripped from search terms before matching.
SEARCH_STRIP_CHARS = "!"

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 255

# Actions a new module offers when the caller does not list any.
DEFAULT_MODULE_ACTIONS: tuple[str, ...] = ("can_view",)
