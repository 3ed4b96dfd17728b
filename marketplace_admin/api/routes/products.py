"""Product Routes — per-vendor catalogue with an admin owner filter.

Invariants:
    - ?owner= narrows admin listings to one owner ("all" or absent keeps every owner);
      vendors are always scoped to their own products regardless of the parameter
"""

from fastapi import APIRouter, Depends, Query, status

from marketplace_admin.api.deps import get_blob_store, get_current_actor, get_store
from marketplace_admin.schemas.catalog import ProductCreate, ProductUpdate
from marketplace_admin.schemas.common import StatusUpdate
from marketplace_admin.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_product_service(
    store=Depends(get_store),
    actor=Depends(get_current_actor),
    blobs=Depends(get_blob_store),
) -> ProductService:
    return ProductService(store, actor, blobs)


@router.get("")
async def list_products(
    owner: str | None = Query(None),
    service: ProductService = Depends(get_product_service),
):
    return await service.list_products(owner)


@router.get("/owners")
async def list_product_owners(
    service: ProductService = Depends(get_product_service),
):
    return await service.owner_facets()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate, service: ProductService = Depends(get_product_service),
):
    return await service.create(body)


@router.patch("/{product_id}")
async def update_product(
    product_id: str, body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return await service.update(product_id, body)


@router.put("/{product_id}/status")
async def set_product_status(
    product_id: str, body: StatusUpdate,
    service: ProductService = Depends(get_product_service),
):
    return await service.set_status(product_id, body.status)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str, service: ProductService = Depends(get_product_service),
):
    await service.delete(product_id)
