"""Roles API: list, create, manage-role screen, permission matrix save and toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from rbac_admin.api.v1.dependencies import (
    get_role_list_query,
    get_role_service,
    get_role_service_for_write,
)
from rbac_admin.api.v1.pagination import stale_page_redirect
from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.application.dtos.role import RoleDetail, RoleUpdate
from rbac_admin.application.services.role_service import RoleService
from rbac_admin.core.limiter import limit_writes
from rbac_admin.schemas.listing import page_fields
from rbac_admin.schemas.navigation import NavigationNodeResponse
from rbac_admin.schemas.role import (
    PermissionToggle,
    RoleCreateRequest,
    RoleDetailResponse,
    RoleListResponse,
    RolePermissionsResponse,
    RolePermissionsUpdate,
    RoleResponse,
)

router = APIRouter()


def _permissions_response(detail: RoleDetail) -> RolePermissionsResponse:
    return RolePermissionsResponse(
        role=RoleResponse.model_validate(detail.role),
        permissions=detail.permissions,
    )


@router.get("", response_model=RoleListResponse)
async def list_roles(
    request: Request,
    query: Annotated[ListQuery, Depends(get_role_list_query)],
    service: RoleService = Depends(get_role_service),
) -> RoleListResponse | RedirectResponse:
    """List active roles (search on name/description, sortable, paginated)."""
    result = await service.list_roles(query)
    redirect = stale_page_redirect(request, result)
    if redirect is not None:
        return redirect
    return RoleListResponse(
        items=[RoleResponse.model_validate(r) for r in result.items],
        **page_fields(result),
    )


@router.post("", response_model=RoleResponse, status_code=201)
@limit_writes
async def create_role(
    request: Request,
    body: RoleCreateRequest,
    service: RoleService = Depends(get_role_service_for_write),
):
    """Create a role with an empty permission map."""
    created = await service.create_role(
        body.name, body.description, for_admin=body.for_admin
    )
    return RoleResponse.model_validate(created)


@router.get("/{role_id}", response_model=RoleDetailResponse)
async def get_role(
    role_id: int,
    service: RoleService = Depends(get_role_service),
):
    """Role, its effective permissions, and the module rows of the matrix editor."""
    detail = await service.get_role(role_id)
    rows = await service.get_matrix_rows()
    return RoleDetailResponse(
        role=RoleResponse.model_validate(detail.role),
        permissions=detail.permissions,
        modules=[NavigationNodeResponse.model_validate(n) for n in rows],
    )


@router.put("/{role_id}/permissions", response_model=RolePermissionsResponse)
@limit_writes
async def save_role_permissions(
    request: Request,
    role_id: int,
    body: RolePermissionsUpdate,
    service: RoleService = Depends(get_role_service_for_write),
):
    """Save the manage-role form; the permission map replaces the stored one in full."""
    detail = await service.update_role_permissions(
        role_id,
        RoleUpdate(
            name=body.name,
            description=body.description,
            for_admin=body.for_admin,
            permissions=body.permissions,
        ),
    )
    return _permissions_response(detail)


@router.patch(
    "/{role_id}/permissions/{module_id}", response_model=RolePermissionsResponse
)
@limit_writes
async def toggle_role_permission(
    request: Request,
    role_id: int,
    module_id: int,
    body: PermissionToggle,
    service: RoleService = Depends(get_role_service_for_write),
):
    """Grant or revoke one action on one module. No-op for admin-disabled roles."""
    detail = await service.toggle_permission(
        role_id, module_id, body.action, body.granted
    )
    return _permissions_response(detail)


@router.delete("/{role_id}", status_code=204)
@limit_writes
async def delete_role(
    request: Request,
    role_id: int,
    service: RoleService = Depends(get_role_service_for_write),
):
    """Soft delete a role."""
    await service.delete_role(role_id)
