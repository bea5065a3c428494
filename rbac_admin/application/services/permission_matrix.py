"""Permission matrix editor: moduleId -> granted actions for one role.

In-memory edit model seeded from a role's stored permissions, mutated by
toggles, and serialized as a full replacement map on save (never a diff).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from rbac_admin.domain.enums import ModuleAction
from rbac_admin.domain.exceptions import UnknownActionException

logger = logging.getLogger(__name__)

PermissionMap = Mapping[str | int, Iterable[str]]


def validate_action(action: str, field: str = "permissions") -> str:
    """Return action if it is a recognized ModuleAction token; raise otherwise."""
    if action not in ModuleAction.values():
        raise UnknownActionException(action, field=field)
    return action


def _normalize(permissions: PermissionMap | None) -> dict[str, set[str]]:
    """Copy permissions into str keys and validated action sets."""
    normalized: dict[str, set[str]] = {}
    for module_id, actions in (permissions or {}).items():
        normalized[str(module_id)] = {validate_action(a) for a in actions}
    return normalized


class PermissionMatrix:
    """Editable moduleId -> set of actions map with two states.

    admin-enabled (for_admin=True): toggles change the map.
    admin-disabled (for_admin=False): toggles are inert and serialize()
    returns an empty map. The stored grants are kept so re-enabling
    shows them again; only set_for_admin moves between the states.
    """

    def __init__(
        self, permissions: PermissionMap | None = None, *, for_admin: bool = True
    ) -> None:
        self._grants = _normalize(permissions)
        self._for_admin = for_admin

    @property
    def for_admin(self) -> bool:
        return self._for_admin

    def set_for_admin(self, enabled: bool) -> None:
        self._for_admin = enabled

    def toggle(self, module_id: str | int, action: str, granted: bool) -> None:
        """Grant or revoke action on module_id. Both directions are idempotent.

        Raises:
            UnknownActionException: If action is not a ModuleAction token.
        """
        validate_action(action)
        if not self._for_admin:
            logger.debug(
                "Ignoring toggle of %s on module %s: role is admin-disabled",
                action,
                module_id,
            )
            return
        actions = self._grants.setdefault(str(module_id), set())
        if granted:
            actions.add(action)
        else:
            actions.discard(action)

    def replace_all(self, permissions: PermissionMap | None) -> None:
        """Replace the whole map. Validation runs first; on error nothing changes."""
        self._grants = _normalize(permissions)

    def granted(self, module_id: str | int) -> frozenset[str]:
        """Actions currently granted on module_id (empty when admin-disabled)."""
        if not self._for_admin:
            return frozenset()
        return frozenset(self._grants.get(str(module_id), ()))

    def is_granted(self, module_id: str | int, action: str) -> bool:
        return action in self.granted(module_id)

    def serialize(self) -> dict[str, list[str]]:
        """Full moduleId -> actions map for submission.

        Every module present in the map is included, with an empty list when
        all its actions were revoked, so "explicitly revoked" stays
        distinguishable from "never touched". Actions are listed in
        ModuleAction declaration order.
        """
        if not self._for_admin:
            return {}
        return {
            module_id: sorted(actions, key=ModuleAction.ordinal)
            for module_id, actions in self._grants.items()
        }
