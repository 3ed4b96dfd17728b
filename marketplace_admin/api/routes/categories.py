"""Category Routes — main list, drill-down, CRUD, leaf toggle, and delete policy.

Invariants:
    - DELETE without ?cascade falls back to settings.category_delete_cascade
    - Listing responses carry per-row affordances (child_count, can_view_children,
      can_add_subcategory) so clients never recompute hierarchy rules
"""

from fastapi import APIRouter, Depends, Query, status

from marketplace_admin.api.deps import get_blob_store, get_current_actor, get_store
from marketplace_admin.config import get_settings
from marketplace_admin.schemas.catalog import CategoryCreate, CategoryUpdate
from marketplace_admin.services.category_service import CategoryService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


def get_category_service(
    store=Depends(get_store),
    actor=Depends(get_current_actor),
    blobs=Depends(get_blob_store),
) -> CategoryService:
    return CategoryService(store, actor, blobs)


@router.get("")
async def list_main_categories(
    service: CategoryService = Depends(get_category_service),
):
    return await service.list_main()


@router.get("/{category_id}/children")
async def list_subcategories(
    category_id: str, service: CategoryService = Depends(get_category_service),
):
    return await service.list_children(category_id)


@router.get("/{category_id}")
async def get_category(
    category_id: str, service: CategoryService = Depends(get_category_service),
):
    return await service.get(category_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    return await service.create(body)


@router.patch("/{category_id}")
async def update_category(
    category_id: str, body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return await service.update(category_id, body)


@router.post("/{category_id}/toggle-last")
async def toggle_leaf(
    category_id: str, service: CategoryService = Depends(get_category_service),
):
    return await service.toggle_last(category_id)


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    cascade: bool | None = Query(None),
    service: CategoryService = Depends(get_category_service),
):
    if cascade is None:
        cascade = get_settings().category_delete_cascade
    deleted = await service.delete_category(category_id, cascade)
    return {"deleted": deleted}
