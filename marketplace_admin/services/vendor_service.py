"""Vendor Service — vendor directory, account moderation, and the vendor's own profile.

Invariants:
    - Only admins list or moderate vendors; vendors get PermissionDeniedError
    - Moderation never removes a vendor document: delete is a status marker
    - Each action stamps its own <action>_at timestamp next to the new status
    - A vendor edits only the vendor document whose id is their own actor id
    - Vendors resolve only their own display name; admins resolve every vendor
"""

import logging
from datetime import datetime, timezone

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import Collection, VendorStatus
from marketplace_admin.core.errors import ErrorContext, ResourceNotFoundError
from marketplace_admin.core.ordering import sort_by_recency
from marketplace_admin.core.repository_protocols import DocumentStore
from marketplace_admin.core.visibility import is_admin, vendor_display_names
from marketplace_admin.schemas.vendor import VendorAccountUpdate
from marketplace_admin.services.service_helpers import (
    log_extra, require_actor, require_admin,
)

logger = logging.getLogger(__name__)

_COLLECTION = Collection.VENDORS.value

# action → (status, approved flag or None to leave as is, timestamp field)
_ACTIONS: dict[str, tuple[VendorStatus, bool | None, str]] = {
    "approve": (VendorStatus.ACTIVE, True, "approved_at"),
    "activate": (VendorStatus.ACTIVE, None, "activated_at"),
    "suspend": (VendorStatus.SUSPENDED, None, "suspended_at"),
    "reject": (VendorStatus.REJECTED, None, "rejected_at"),
    "delete": (VendorStatus.DELETED, None, "deleted_at"),
}


class VendorService:
    def __init__(self, store: DocumentStore, actor: Actor | None):
        self.store = store
        self.actor = actor

    def _not_found(self, actor: Actor, vendor_id: str) -> ResourceNotFoundError:
        return ResourceNotFoundError(
            _COLLECTION, vendor_id,
            ErrorContext(actor_id=actor.id, collection=_COLLECTION, record_id=vendor_id),
        )

    async def list_vendors(self, approved: bool | None = None) -> list[dict]:
        """All vendors, newest first; approved narrows to one moderation tab."""
        require_admin(self.actor, "list vendors", _COLLECTION)
        vendors = await self.store.find(_COLLECTION)
        if approved is not None:
            vendors = [v for v in vendors if bool(v.get("approved")) == approved]
        return sort_by_recency(vendors)

    async def display_names(self) -> dict[str, str]:
        if self.actor is None:
            return {}
        if is_admin(self.actor):
            return vendor_display_names(await self.store.find(_COLLECTION))
        own = await self.store.get(_COLLECTION, self.actor.id)
        return vendor_display_names([own]) if own else {}

    async def set_status(self, vendor_id: str, action: str) -> dict:
        actor = require_admin(self.actor, f"{action} vendors", _COLLECTION)
        if await self.store.get(_COLLECTION, vendor_id) is None:
            raise self._not_found(actor, vendor_id)
        status, approved, stamp_field = _ACTIONS[action]
        patch: dict = {
            "status": status.value,
            stamp_field: datetime.now(timezone.utc).isoformat(),
        }
        if approved is not None:
            patch["approved"] = approved
        await self.store.update(_COLLECTION, vendor_id, patch)
        logger.info(
            f"Vendor {vendor_id}: {action} → {status.value}",
            extra=log_extra(actor, _COLLECTION, vendor_id),
        )
        return await self.store.get(_COLLECTION, vendor_id)

    async def get_own_account(self) -> dict:
        actor = require_actor(self.actor, "view vendor account")
        vendor = await self.store.get(_COLLECTION, actor.id)
        if vendor is None:
            raise self._not_found(actor, actor.id)
        return vendor

    async def update_own_account(self, body: VendorAccountUpdate) -> dict:
        """Profile edits from the vendor's account screen; the store stamps updated_at."""
        vendor = await self.get_own_account()
        patch = body.model_dump(exclude_unset=True)
        await self.store.update(_COLLECTION, vendor["id"], patch)
        logger.info(
            f"Vendor {vendor['id']} updated own account ({', '.join(sorted(patch))})",
            extra=log_extra(self.actor, _COLLECTION, vendor["id"]),
        )
        return await self.store.get(_COLLECTION, vendor["id"])
