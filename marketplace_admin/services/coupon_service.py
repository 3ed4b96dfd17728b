"""Coupon Service — coupon list, create, edit, delete.

Invariants:
    - Codes are stored normalised (stripped, uppercased) and unique across all coupons
    - New coupons start with used_count = 0 and is_active = True
    - Listing is newest first; is_currently_active is computed at read time, never stored
"""

import logging
from datetime import datetime, timezone

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.coupons import (
    coupon_usage_remaining, is_coupon_active, normalize_coupon_code,
)
from marketplace_admin.core.domain_types import Collection
from marketplace_admin.core.errors import RecordValidationError
from marketplace_admin.core.ordering import sort_by_recency
from marketplace_admin.core.repository_protocols import DocumentStore
from marketplace_admin.core.visibility import visible_records
from marketplace_admin.schemas.coupon import CouponCreate, CouponUpdate
from marketplace_admin.services.service_helpers import (
    get_or_404, log_extra, owner_for, require_actor, require_modify,
)

logger = logging.getLogger(__name__)

_COLLECTION = Collection.COUPONS.value


class CouponService:
    def __init__(self, store: DocumentStore, actor: Actor | None):
        self.store = store
        self.actor = actor

    async def list_coupons(self, now: datetime | None = None) -> list[dict]:
        if self.actor is None:
            return []
        moment = now or datetime.now(timezone.utc)
        records = await self.store.find(_COLLECTION)
        coupons = sort_by_recency(visible_records(self.actor, records, _COLLECTION))
        return [
            {
                **c,
                "is_currently_active": is_coupon_active(c, moment),
                "usage_remaining": coupon_usage_remaining(c),
            }
            for c in coupons
        ]

    async def _check_code_free(self, code: str, exclude_id: str | None = None) -> None:
        taken = await self.store.find(_COLLECTION, {"code": code})
        if any(c["id"] != exclude_id for c in taken):
            raise RecordValidationError(f"Coupon code '{code}' already exists", "code")

    async def create(self, body: CouponCreate) -> dict:
        actor = require_actor(self.actor, "create coupons")
        code = normalize_coupon_code(body.code)
        await self._check_code_free(code)
        data = body.model_dump()
        data.update(
            code=code, used_count=0, is_active=True, owner_id=owner_for(actor),
        )
        coupon_id = await self.store.create(_COLLECTION, data)
        logger.info(
            f"Coupon {code} created",
            extra=log_extra(actor, _COLLECTION, coupon_id),
        )
        return await self.store.get(_COLLECTION, coupon_id)

    async def update(self, coupon_id: str, body: CouponUpdate) -> dict:
        coupon = await get_or_404(self.store, self.actor, _COLLECTION, coupon_id)
        actor = require_modify(self.actor, coupon, "edit", _COLLECTION)
        patch = body.model_dump(exclude_unset=True)
        if "code" in patch:
            patch["code"] = normalize_coupon_code(patch["code"])
            await self._check_code_free(patch["code"], exclude_id=coupon_id)
        await self.store.update(_COLLECTION, coupon_id, patch)
        logger.info(
            f"Coupon {coupon_id} updated",
            extra=log_extra(actor, _COLLECTION, coupon_id),
        )
        return await self.store.get(_COLLECTION, coupon_id)

    async def delete(self, coupon_id: str) -> None:
        coupon = await get_or_404(self.store, self.actor, _COLLECTION, coupon_id)
        actor = require_modify(self.actor, coupon, "delete", _COLLECTION)
        await self.store.delete(_COLLECTION, coupon_id)
        logger.info(
            f"Coupon {coupon_id} deleted",
            extra=log_extra(actor, _COLLECTION, coupon_id),
        )
