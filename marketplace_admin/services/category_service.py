"""Category Service — main categories, subcategories, and their lifecycle.

Invariants:
    - Listing is one level per call: roots (list_main) or direct children (list_children)
    - Children of a missing, invisible, or childless leaf parent are always empty
    - New children inherit the parent's food type and are refused under leaf parents
    - Deletes go through plan_category_delete: cascade removes the subtree
      deepest-first; without cascade a parent with children is refused
    - Every mutation passes require_modify first; vendors never touch others' records

Design Decisions:
    - Row annotations (child_count, can_view_children, can_add_subcategory) are
      computed over the actor's visible categories, so vendors never learn about
      records they cannot see
"""

import logging

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import CategoryStatus, Collection
from marketplace_admin.core.errors import PermissionDeniedError, ErrorContext, RecordValidationError
from marketplace_admin.core.hierarchy import (
    can_add_subcategory, can_view_children, check_can_mark_leaf,
    check_parent_accepts_children, child_count, inherit_food_type,
    plan_category_delete,
)
from marketplace_admin.core.record_fields import parent_of
from marketplace_admin.core.repository_protocols import BlobStore, DocumentStore
from marketplace_admin.core.visibility import can_modify, visible_records
from marketplace_admin.schemas.catalog import CategoryCreate, CategoryUpdate
from marketplace_admin.services.service_helpers import (
    get_or_404, log_extra, owner_for, require_actor, require_modify, upload_image,
)

logger = logging.getLogger(__name__)

_COLLECTION = Collection.CATEGORIES.value


def _annotate(rows: list[dict], scope: list[dict]) -> list[dict]:
    return [
        {
            **row,
            "child_count": child_count(scope, row["id"]),
            "can_view_children": can_view_children(row, scope),
            "can_add_subcategory": can_add_subcategory(row),
        }
        for row in rows
    ]


class CategoryService:
    """Category screens: main list, drill-down, create, edit, leaf toggle, delete."""

    def __init__(
        self, store: DocumentStore, actor: Actor | None,
        blobs: BlobStore | None = None,
    ):
        self.store = store
        self.actor = actor
        self.blobs = blobs

    async def _visible(self) -> list[dict]:
        if self.actor is None:
            return []
        records = await self.store.find(_COLLECTION)
        return visible_records(self.actor, records, _COLLECTION)

    async def list_main(self) -> list[dict]:
        scope = await self._visible()
        roots = visible_records(self.actor, scope, _COLLECTION, roots_only=True)
        return _annotate(roots, scope)

    async def list_children(self, parent_id: str) -> list[dict]:
        scope = await self._visible()
        parent = next((c for c in scope if c["id"] == parent_id), None)
        if parent is None or not can_view_children(parent, scope):
            return []
        children = visible_records(
            self.actor, scope, _COLLECTION, parent_id=parent_id,
        )
        return _annotate(children, scope)

    async def get(self, category_id: str) -> dict:
        return await get_or_404(self.store, self.actor, _COLLECTION, category_id)

    async def create(self, body: CategoryCreate) -> dict:
        actor = require_actor(self.actor, "create categories")
        parent = None
        if body.parent_id:
            parent = await get_or_404(
                self.store, actor, _COLLECTION, body.parent_id,
            )
            check_parent_accepts_children(parent)
        image_url = await upload_image(
            self.blobs, "categories", "category", body.image,
        )
        data = {
            "name": body.name,
            "parent_id": parent["id"] if parent else None,
            "is_main_category": parent is None,
            "is_last": body.is_last,
            "food_type": inherit_food_type(parent, body.food_type),
            "image_url": image_url,
            "status": CategoryStatus.ACTIVE.value,
            "is_active": True,
            "owner_id": owner_for(actor),
            "created_by": actor.id,
        }
        category_id = await self.store.create(_COLLECTION, data)
        logger.info(
            f"Category '{body.name}' created",
            extra=log_extra(actor, _COLLECTION, category_id),
        )
        return await self.store.get(_COLLECTION, category_id)

    async def update(self, category_id: str, body: CategoryUpdate) -> dict:
        category = await self.get(category_id)
        actor = require_modify(self.actor, category, "edit", _COLLECTION)
        patch = body.model_dump(exclude_unset=True, exclude={"image"})
        if "food_type" in patch and parent_of(category) is not None:
            raise RecordValidationError(
                "Subcategories inherit their food type from the parent",
                "food_type",
            )
        image_url = await upload_image(
            self.blobs, "categories", "category", body.image,
        )
        if image_url:
            patch["image_url"] = image_url
        await self.store.update(_COLLECTION, category_id, patch)
        logger.info(
            f"Category {category_id} updated",
            extra=log_extra(actor, _COLLECTION, category_id),
        )
        return await self.store.get(_COLLECTION, category_id)

    async def toggle_last(self, category_id: str) -> dict:
        """Flip is_last. Marking a node with children as leaf is refused."""
        category = await self.get(category_id)
        actor = require_modify(self.actor, category, "edit", _COLLECTION)
        make_leaf = not category.get("is_last")
        if make_leaf:
            check_can_mark_leaf(category, await self.store.find(_COLLECTION))
        await self.store.update(_COLLECTION, category_id, {"is_last": make_leaf})
        logger.info(
            f"Category {category_id} is_last={make_leaf}",
            extra=log_extra(actor, _COLLECTION, category_id),
        )
        return await self.store.get(_COLLECTION, category_id)

    async def delete_category(self, category_id: str, cascade: bool) -> list[str]:
        """Delete a category; returns the deleted ids, deepest first."""
        category = await self.get(category_id)
        actor = require_modify(self.actor, category, "delete", _COLLECTION)
        records = await self.store.find(_COLLECTION)
        doomed = plan_category_delete(records, category_id, cascade)

        by_id = {r["id"]: r for r in records}
        foreign = [i for i in doomed if not can_modify(actor, by_id[i])]
        if foreign:
            logger.warning(
                f"Cascade from {category_id} reaches {len(foreign)} foreign records",
                extra=log_extra(actor, _COLLECTION, category_id),
            )
            raise PermissionDeniedError(
                "delete",
                ErrorContext(
                    actor_id=actor.id, collection=_COLLECTION,
                    record_id=foreign[0],
                ),
            )

        for record_id in doomed:
            await self.store.delete(_COLLECTION, record_id)
        logger.info(
            f"Deleted category {category_id} ({len(doomed) - 1} descendants)",
            extra=log_extra(actor, _COLLECTION, category_id),
        )
        return doomed
