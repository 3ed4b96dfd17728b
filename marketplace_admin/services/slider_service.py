"""Category Slider Service — promotional sliders pointing at main categories.

Invariants:
    - Listing is ordered by priority (desc, default 5) then created_at (desc)
    - A slider targets a main category visible to the actor; its name is denormalised
    - Status is one of SliderStatus; anything else is a validation error
"""

import logging

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import Collection, SliderStatus
from marketplace_admin.core.errors import RecordValidationError
from marketplace_admin.core.ordering import sort_by_priority_then_recency
from marketplace_admin.core.record_fields import parent_of
from marketplace_admin.core.repository_protocols import BlobStore, DocumentStore
from marketplace_admin.core.visibility import visible_records
from marketplace_admin.schemas.catalog import SliderCreate, SliderUpdate
from marketplace_admin.services.service_helpers import (
    get_or_404, log_extra, owner_for, require_actor, require_modify, upload_image,
)

logger = logging.getLogger(__name__)

_COLLECTION = Collection.CATEGORY_SLIDERS.value


class CategorySliderService:
    def __init__(
        self, store: DocumentStore, actor: Actor | None,
        blobs: BlobStore | None = None,
    ):
        self.store = store
        self.actor = actor
        self.blobs = blobs

    async def list_sliders(self) -> list[dict]:
        if self.actor is None:
            return []
        records = await self.store.find(_COLLECTION)
        return sort_by_priority_then_recency(
            visible_records(self.actor, records, _COLLECTION),
        )

    async def _main_category(self, category_id: str) -> dict:
        category = await get_or_404(
            self.store, self.actor, Collection.CATEGORIES.value, category_id,
        )
        if parent_of(category) is not None:
            raise RecordValidationError(
                "Sliders can only point at main categories", "category_id",
            )
        return category

    async def create(self, body: SliderCreate) -> dict:
        actor = require_actor(self.actor, "create sliders")
        category = await self._main_category(body.category_id)
        image_url = await upload_image(
            self.blobs, "category_sliders", "slider", body.image,
        )
        data = {
            "name": body.name,
            "category_id": category["id"],
            "category_name": category.get("name"),
            "priority": body.priority,
            "status": body.status,
            "image_url": image_url,
            "owner_id": owner_for(actor),
        }
        slider_id = await self.store.create(_COLLECTION, data)
        logger.info(
            f"Slider '{body.name}' created",
            extra=log_extra(actor, _COLLECTION, slider_id),
        )
        return await self.store.get(_COLLECTION, slider_id)

    async def update(self, slider_id: str, body: SliderUpdate) -> dict:
        slider = await get_or_404(self.store, self.actor, _COLLECTION, slider_id)
        actor = require_modify(self.actor, slider, "edit", _COLLECTION)
        patch = body.model_dump(exclude_unset=True, exclude={"image"})
        if patch.get("category_id"):
            category = await self._main_category(patch["category_id"])
            patch["category_name"] = category.get("name")
        image_url = await upload_image(
            self.blobs, "category_sliders", "slider", body.image,
        )
        if image_url:
            patch["image_url"] = image_url
        await self.store.update(_COLLECTION, slider_id, patch)
        logger.info(
            f"Slider {slider_id} updated",
            extra=log_extra(actor, _COLLECTION, slider_id),
        )
        return await self.store.get(_COLLECTION, slider_id)

    async def set_status(self, slider_id: str, status: str) -> dict:
        try:
            SliderStatus(status)
        except ValueError:
            raise RecordValidationError(f"Unknown slider status '{status}'", "status")
        slider = await get_or_404(self.store, self.actor, _COLLECTION, slider_id)
        actor = require_modify(self.actor, slider, "edit", _COLLECTION)
        await self.store.update(_COLLECTION, slider_id, {"status": status})
        logger.info(
            f"Slider {slider_id} status → {status}",
            extra=log_extra(actor, _COLLECTION, slider_id),
        )
        return await self.store.get(_COLLECTION, slider_id)

    async def delete(self, slider_id: str) -> None:
        slider = await get_or_404(self.store, self.actor, _COLLECTION, slider_id)
        actor = require_modify(self.actor, slider, "delete", _COLLECTION)
        await self.store.delete(_COLLECTION, slider_id)
        logger.info(
            f"Slider {slider_id} deleted",
            extra=log_extra(actor, _COLLECTION, slider_id),
        )
