"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations.
No runtime imports from rbac_admin.infrastructure.
"""

from rbac_admin.application.interfaces.repositories import (
    IModuleRepository,
    IRoleRepository,
)

__all__ = [
    "IModuleRepository",
    "IRoleRepository",
]
