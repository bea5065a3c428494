"""Navigation API: the permission-gated menu tree for one role."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from rbac_admin.api.v1.dependencies import (
    get_navigation_service,
    get_permission_resolver,
)
from rbac_admin.application.services.navigation_service import NavigationService
from rbac_admin.infrastructure.services import PermissionResolver
from rbac_admin.schemas.navigation import NavigationNodeResponse, NavigationResponse

router = APIRouter()


@router.get("", response_model=NavigationResponse)
async def get_navigation(
    role_id: Annotated[int, Query(description="Role whose can_view grants gate the menu")],
    service: NavigationService = Depends(get_navigation_service),
    resolver: PermissionResolver = Depends(get_permission_resolver),
):
    """Return {group label: accessible root nodes}; groups with nothing visible are omitted."""
    is_accessible = await resolver.get_predicate(role_id)
    groups = await service.build_navigation(is_accessible)
    return NavigationResponse(
        navigations={
            label: [NavigationNodeResponse.model_validate(n) for n in nodes]
            for label, nodes in groups.items()
        }
    )
