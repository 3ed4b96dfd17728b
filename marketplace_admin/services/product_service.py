"""Product Service — product catalogue per vendor, with pricing and offer rules.

Invariants:
    - Category path is root-first, at most 3 levels, without gaps, and each level
      is a direct child of the previous one
    - A product's food type matches its root category (roots without a food type accept both)
    - selling_price <= original_price; discounted_amount = original - selling, never negative
    - Offer-dependent fields are present for the chosen offer; a free product must exist
    - offer_description falls back to the generated offer text
    - Listing: visible → owner filter (admin only) → priority/recency order → owner names

Design Decisions:
    - Vendor names are joined in memory after the fetch (the store has no joins)
    - Path checks run against all categories: vendors file products under
      admin-managed categories they cannot edit
"""

import logging

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import Collection, ProductStatus
from marketplace_admin.core.errors import RecordValidationError
from marketplace_admin.core.hierarchy import check_path_links, validate_category_path
from marketplace_admin.core.offers import resolve_offer_text, validate_offer_fields
from marketplace_admin.core.ordering import sort_by_priority_then_recency
from marketplace_admin.core.pricing import discounted_amount, resolve_selling_price
from marketplace_admin.core.repository_protocols import BlobStore, DocumentStore
from marketplace_admin.core.visibility import (
    attach_owner_names, distinct_owners, filter_by_owner, is_admin,
    vendor_display_names, visible_records,
)
from marketplace_admin.schemas.catalog import ProductCreate, ProductUpdate
from marketplace_admin.services.service_helpers import (
    get_or_404, log_extra, owner_for, require_actor, require_modify, upload_image,
)

logger = logging.getLogger(__name__)

_COLLECTION = Collection.PRODUCTS.value
_PATH_NAMES = ("category_name", "sub_category_name", "nested_sub_category_name")
_PATH_IDS = ("category_id", "sub_category_id", "nested_sub_category_id")
_OFFER_FIELDS = ("offer_type", "buy_x", "get_y", "free_product_id")


def _price_fields(original: float, selling: float | None) -> dict:
    effective = resolve_selling_price(original, selling)
    return {
        "original_price": float(original),
        "selling_price": effective,
        "discounted_amount": discounted_amount(original, effective),
    }


class ProductService:
    def __init__(
        self, store: DocumentStore, actor: Actor | None,
        blobs: BlobStore | None = None,
    ):
        self.store = store
        self.actor = actor
        self.blobs = blobs

    async def _vendor_names(self) -> dict[str, str]:
        return vendor_display_names(await self.store.find(Collection.VENDORS.value))

    async def list_products(self, owner_filter: str | None = None) -> list[dict]:
        if self.actor is None:
            return []
        records = visible_records(
            self.actor, await self.store.find(_COLLECTION), _COLLECTION,
        )
        if is_admin(self.actor):
            records = filter_by_owner(records, owner_filter)
        ordered = sort_by_priority_then_recency(records)
        return attach_owner_names(ordered, await self._vendor_names())

    async def owner_facets(self) -> list[dict]:
        """Distinct owners of the visible products, with display names."""
        if self.actor is None:
            return []
        records = visible_records(
            self.actor, await self.store.find(_COLLECTION), _COLLECTION,
        )
        owners = distinct_owners(records)
        named = attach_owner_names(
            [{"owner_id": o} for o in owners], await self._vendor_names(),
        )
        return [{"owner_id": r["owner_id"], "name": r["owner_name"]} for r in named]

    async def _resolve_path(self, path: list[str | None], food_type: str) -> dict:
        ids = validate_category_path(path)
        categories = await self.store.find(Collection.CATEGORIES.value)
        check_path_links(ids, categories)
        by_id = {c["id"]: c for c in categories}
        root_food_type = by_id[ids[0]].get("food_type")
        if root_food_type and root_food_type != food_type:
            raise RecordValidationError(
                f"Category '{ids[0]}' only holds {root_food_type} products",
                "food_type",
            )
        fields = dict.fromkeys(_PATH_IDS + _PATH_NAMES)
        for depth, category_id in enumerate(ids):
            fields[_PATH_IDS[depth]] = category_id
            fields[_PATH_NAMES[depth]] = by_id[category_id].get("name")
        return fields

    async def _check_offer(self, offer: dict) -> None:
        validate_offer_fields(
            offer.get("offer_type"), offer.get("buy_x"), offer.get("get_y"),
            offer.get("free_product_id"),
        )
        free_id = offer.get("free_product_id")
        if free_id and await self.store.get(_COLLECTION, free_id) is None:
            raise RecordValidationError(
                f"Free product '{free_id}' does not exist", "free_product_id",
            )

    async def create(self, body: ProductCreate) -> dict:
        actor = require_actor(self.actor, "create products")
        path = await self._resolve_path(
            [body.category_id, body.sub_category_id, body.nested_sub_category_id],
            body.food_type,
        )
        offer = body.model_dump(include=set(_OFFER_FIELDS))
        await self._check_offer(offer)
        prices = _price_fields(body.original_price, body.selling_price)
        image_url = await upload_image(self.blobs, "products", "product", body.image)

        owner = owner_for(actor)
        if is_admin(actor) and body.owner_id:
            owner = body.owner_id
        data = {
            **path,
            **prices,
            **offer,
            "title": body.title,
            "description": body.description,
            "food_type": body.food_type,
            "size": body.size,
            "unit": body.custom_unit.strip() if body.unit == "any" else body.unit,
            "quantity": body.quantity,
            "priority": body.priority,
            "status": body.status,
            "max_quantity": body.max_quantity,
            "offer_description": body.offer_description or resolve_offer_text(
                body.offer_type, body.buy_x, body.get_y,
            ),
            "image_url": image_url,
            "owner_id": owner,
        }
        product_id = await self.store.create(_COLLECTION, data)
        logger.info(
            f"Product '{body.title}' created",
            extra=log_extra(actor, _COLLECTION, product_id),
        )
        return await self.store.get(_COLLECTION, product_id)

    async def update(self, product_id: str, body: ProductUpdate) -> dict:
        product = await get_or_404(self.store, self.actor, _COLLECTION, product_id)
        actor = require_modify(self.actor, product, "edit", _COLLECTION)
        patch = body.model_dump(exclude_unset=True, exclude={"image"})

        merged = {**product, **patch}
        if {"original_price", "selling_price"} & patch.keys():
            patch.update(_price_fields(
                merged.get("original_price"), merged.get("selling_price"),
            ))
        if set(_OFFER_FIELDS) & patch.keys():
            offer = {k: merged.get(k) for k in _OFFER_FIELDS}
            await self._check_offer(offer)
            if "offer_description" not in patch:
                patch["offer_description"] = resolve_offer_text(
                    offer["offer_type"], offer["buy_x"], offer["get_y"],
                )

        image_url = await upload_image(self.blobs, "products", "product", body.image)
        if image_url:
            patch["image_url"] = image_url
        await self.store.update(_COLLECTION, product_id, patch)
        logger.info(
            f"Product {product_id} updated",
            extra=log_extra(actor, _COLLECTION, product_id),
        )
        return await self.store.get(_COLLECTION, product_id)

    async def set_status(self, product_id: str, status: str) -> dict:
        try:
            ProductStatus(status)
        except ValueError:
            raise RecordValidationError(f"Unknown product status '{status}'", "status")
        product = await get_or_404(self.store, self.actor, _COLLECTION, product_id)
        actor = require_modify(self.actor, product, "edit", _COLLECTION)
        await self.store.update(_COLLECTION, product_id, {"status": status})
        logger.info(
            f"Product {product_id} status → {status}",
            extra=log_extra(actor, _COLLECTION, product_id),
        )
        return await self.store.get(_COLLECTION, product_id)

    async def delete(self, product_id: str) -> None:
        product = await get_or_404(self.store, self.actor, _COLLECTION, product_id)
        actor = require_modify(self.actor, product, "delete", _COLLECTION)
        await self.store.delete(_COLLECTION, product_id)
        logger.info(
            f"Product {product_id} deleted",
            extra=log_extra(actor, _COLLECTION, product_id),
        )
