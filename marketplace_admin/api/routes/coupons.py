"""Coupon Routes — coupons with read-time activity flags."""

from fastapi import APIRouter, Depends, status

from marketplace_admin.api.deps import get_current_actor, get_store
from marketplace_admin.schemas.coupon import CouponCreate, CouponUpdate
from marketplace_admin.services.coupon_service import CouponService

router = APIRouter(prefix="/api/v1/coupons", tags=["coupons"])


def get_coupon_service(
    store=Depends(get_store), actor=Depends(get_current_actor),
) -> CouponService:
    return CouponService(store, actor)


@router.get("")
async def list_coupons(service: CouponService = Depends(get_coupon_service)):
    return await service.list_coupons()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_coupon(
    body: CouponCreate, service: CouponService = Depends(get_coupon_service),
):
    return await service.create(body)


@router.patch("/{coupon_id}")
async def update_coupon(
    coupon_id: str, body: CouponUpdate,
    service: CouponService = Depends(get_coupon_service),
):
    return await service.update(coupon_id, body)


@router.delete("/{coupon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_coupon(
    coupon_id: str, service: CouponService = Depends(get_coupon_service),
):
    await service.delete(coupon_id)
