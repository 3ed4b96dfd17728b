"""Vendor Routes — admin vendor directory and moderation, vendor's own account."""

from fastapi import APIRouter, Depends, Query

from marketplace_admin.api.deps import get_current_actor, get_store
from marketplace_admin.schemas.vendor import VendorAccountUpdate, VendorStatusUpdate
from marketplace_admin.services.vendor_service import VendorService

router = APIRouter(prefix="/api/v1/vendors", tags=["vendors"])


def get_vendor_service(
    store=Depends(get_store), actor=Depends(get_current_actor),
) -> VendorService:
    return VendorService(store, actor)


@router.get("")
async def list_vendors(
    approved: bool | None = Query(None),
    service: VendorService = Depends(get_vendor_service),
):
    return await service.list_vendors(approved)


@router.get("/names")
async def vendor_names(service: VendorService = Depends(get_vendor_service)):
    return await service.display_names()


@router.get("/me")
async def get_my_account(service: VendorService = Depends(get_vendor_service)):
    return await service.get_own_account()


@router.patch("/me")
async def update_my_account(
    body: VendorAccountUpdate,
    service: VendorService = Depends(get_vendor_service),
):
    return await service.update_own_account(body)


@router.put("/{vendor_id}/status")
async def moderate_vendor(
    vendor_id: str, body: VendorStatusUpdate,
    service: VendorService = Depends(get_vendor_service),
):
    return await service.set_status(vendor_id, body.action)
