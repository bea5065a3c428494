"""Navigation service: permission-gated menu groups for the renderer."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rbac_admin.application.interfaces.repositories import IModuleRepository
from rbac_admin.application.services.navigation_builder import (
    NavigationNode,
    build_tree,
    filter_accessible,
)

logger = logging.getLogger(__name__)


class NavigationService:
    """Load active modules, build the tree, and prune it for one user.

    The accessibility decision is injected (is_accessible), never looked up
    from ambient request state.
    """

    def __init__(self, module_repo: IModuleRepository, group_label: str) -> None:
        self._module_repo = module_repo
        self._group_label = group_label

    async def build_navigation(
        self, is_accessible: Callable[[str], bool]
    ) -> dict[str, list[NavigationNode]]:
        """Return {group label: accessible roots}; empty groups are omitted."""
        modules = await self._module_repo.list_for_navigation()
        tree = filter_accessible(build_tree(modules), is_accessible)
        logger.debug(
            "Navigation built: %d modules, %d accessible roots", len(modules), len(tree)
        )
        if not tree:
            return {}
        return {self._group_label: tree}
