"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from rbac_admin.domain.enums import ModuleAction, SortDirection
from rbac_admin.domain.exceptions import (
    DuplicateNameException,
    InvalidParentException,
    RbacAdminException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UnknownActionException,
    ValidationException,
)

__all__ = [
    # Enums
    "ModuleAction",
    "SortDirection",
    # Exceptions
    "DuplicateNameException",
    "InvalidParentException",
    "RbacAdminException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "UnknownActionException",
    "ValidationException",
]
