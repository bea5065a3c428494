"""Domain enumerations for the RBAC admin panel.

Enums represent fixed sets of domain values (action tokens, sort direction).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ModuleAction(_ValuesMixin, str, Enum):
    """Action a role may be granted on a module.

    The set is closed: permission maps containing any other token are
    rejected at the boundary instead of being stored.
    """

    VIEW = "can_view"
    CREATE = "can_create"
    EDIT = "can_edit"
    DELETE = "can_delete"

    @classmethod
    def ordinal(cls, value: str) -> int:
        """Return the declaration index of value (canonical serialization order)."""
        return cls.values().index(value)


class SortDirection(_ValuesMixin, str, Enum):
    """Sort direction accepted by list endpoints."""

    ASC = "asc"
    DESC = "desc"
