"""Modules API: paginated list, detail, create, update, soft delete, restore."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from rbac_admin.api.v1.dependencies import (
    get_module_list_query,
    get_module_service,
    get_module_service_for_write,
)
from rbac_admin.api.v1.pagination import stale_page_redirect
from rbac_admin.application.dtos.listing import ListQuery
from rbac_admin.application.dtos.module import ModuleCreate, ModuleUpdate
from rbac_admin.application.services.module_service import ModuleService
from rbac_admin.core.limiter import limit_writes
from rbac_admin.schemas.listing import page_fields
from rbac_admin.schemas.module import (
    ModuleCreateRequest,
    ModuleDetailResponse,
    ModuleListResponse,
    ModuleResponse,
    ModuleUpdateRequest,
    RoleSummaryResponse,
)

router = APIRouter()


@router.get("", response_model=ModuleListResponse)
async def list_modules(
    request: Request,
    query: Annotated[ListQuery, Depends(get_module_list_query)],
    service: ModuleService = Depends(get_module_service),
) -> ModuleListResponse | RedirectResponse:
    """List active modules (search on name/description, sortable, paginated).

    A page past the last page redirects to page 1 with the other params kept.
    """
    result = await service.list_modules(query)
    redirect = stale_page_redirect(request, result)
    if redirect is not None:
        return redirect
    return ModuleListResponse(
        items=[ModuleResponse.model_validate(m) for m in result.items],
        all_modules_count=await service.count_modules(),
        **page_fields(result),
    )


@router.get("/deleted", response_model=list[ModuleResponse])
async def list_deleted_modules(
    service: ModuleService = Depends(get_module_service),
):
    """List soft-deleted modules, most recently deleted first."""
    modules = await service.list_deleted_modules()
    return [ModuleResponse.model_validate(m) for m in modules]


@router.get("/{module_id}", response_model=ModuleDetailResponse)
async def get_module(
    module_id: int,
    service: ModuleService = Depends(get_module_service),
):
    """Module with the roles granting it and every active role (manage screen)."""
    detail = await service.get_module_detail(module_id)
    return ModuleDetailResponse(
        module=ModuleResponse.model_validate(detail.module),
        roles=[RoleSummaryResponse.model_validate(r) for r in detail.roles],
        available_roles=[
            RoleSummaryResponse.model_validate(r) for r in detail.available_roles
        ],
    )


@router.post("", response_model=ModuleResponse, status_code=201)
@limit_writes
async def create_module(
    request: Request,
    body: ModuleCreateRequest,
    service: ModuleService = Depends(get_module_service_for_write),
):
    """Create a module. available_actions defaults to ['can_view']."""
    created = await service.create_module(
        ModuleCreate(
            name=body.name,
            description=body.description,
            path=body.path,
            icon=body.icon,
            order=body.order,
            parent_id=body.parent_id,
            available_actions=body.available_actions,
        )
    )
    return ModuleResponse.model_validate(created)


@router.put("/{module_id}", response_model=ModuleResponse)
@limit_writes
async def update_module(
    request: Request,
    module_id: int,
    body: ModuleUpdateRequest,
    service: ModuleService = Depends(get_module_service_for_write),
):
    """Update a module. Only fields present in the body change."""
    # An explicit null clears the column; omitting the field leaves it as is.
    explicit = body.model_fields_set
    clear_parent = "parent_id" in explicit and body.parent_id is None
    clear_description = "description" in explicit and body.description is None
    updated = await service.update_module(
        module_id,
        ModuleUpdate(
            name=body.name,
            description=body.description,
            path=body.path,
            icon=body.icon,
            order=body.order,
            parent_id=body.parent_id,
            available_actions=body.available_actions,
            clear_parent=clear_parent,
            clear_description=clear_description,
        ),
    )
    return ModuleResponse.model_validate(updated)


@router.delete("/{module_id}", status_code=204)
@limit_writes
async def delete_module(
    request: Request,
    module_id: int,
    service: ModuleService = Depends(get_module_service_for_write),
):
    """Soft delete a module. Its children surface as navigation roots."""
    await service.delete_module(module_id)


@router.post("/{module_id}/restore", response_model=ModuleResponse)
@limit_writes
async def restore_module(
    request: Request,
    module_id: int,
    service: ModuleService = Depends(get_module_service_for_write),
):
    """Restore a soft-deleted module if its name is still free."""
    restored = await service.restore_module(module_id)
    return ModuleResponse.model_validate(restored)
