"""Notification Service — broadcast notifications and per-reader read tracking.

Invariants:
    - Listing is newest first, filtered by visible_notifications
    - Only the admin tier sends notifications; vendors only read them
    - vendors_only notifications snapshot the ids of active vendors at send time
    - read_by gains the reader at most once (mark_read is idempotent)
"""

import logging
from datetime import datetime, timezone

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import (
    ACTIVE_VENDOR_STATUSES, ADMIN_DISPLAY_NAME, Collection, NotificationAudience,
)
from marketplace_admin.core.errors import ErrorContext, ResourceNotFoundError
from marketplace_admin.core.notifications import (
    is_notification_expired, is_notification_read, mark_read, visible_notifications,
)
from marketplace_admin.core.ordering import sort_by_recency
from marketplace_admin.core.repository_protocols import BlobStore, DocumentStore
from marketplace_admin.schemas.notification import NotificationCreate
from marketplace_admin.services.service_helpers import (
    log_extra, require_actor, require_admin, upload_image,
)

logger = logging.getLogger(__name__)

_COLLECTION = Collection.NOTIFICATIONS.value


class NotificationService:
    def __init__(
        self, store: DocumentStore, actor: Actor | None,
        blobs: BlobStore | None = None,
    ):
        self.store = store
        self.actor = actor
        self.blobs = blobs

    async def list_notifications(self, now: datetime | None = None) -> list[dict]:
        if self.actor is None:
            return []
        moment = now or datetime.now(timezone.utc)
        visible = visible_notifications(
            self.actor, await self.store.find(_COLLECTION),
        )
        return [
            {
                **n,
                "is_read": is_notification_read(n, self.actor.id),
                "is_expired": is_notification_expired(n, moment),
            }
            for n in sort_by_recency(visible)
        ]

    async def _active_vendor_ids(self) -> list[str]:
        vendors = await self.store.find(Collection.VENDORS.value)
        return [v["id"] for v in vendors if v.get("status") in ACTIVE_VENDOR_STATUSES]

    async def create(self, body: NotificationCreate) -> dict:
        actor = require_admin(self.actor, "send notifications", _COLLECTION)
        vendor_ids = []
        if body.target_audience == NotificationAudience.VENDORS_ONLY:
            vendor_ids = await self._active_vendor_ids()
        image_url = await upload_image(
            self.blobs, "notifications", "notification", body.image,
        )
        data = {
            **body.model_dump(exclude={"image"}),
            "vendor_ids": vendor_ids,
            "image_url": image_url,
            "created_by": actor.id,
            "created_by_name": ADMIN_DISPLAY_NAME,
            "created_by_role": actor.role.value,
            "read_by": [],
        }
        notification_id = await self.store.create(_COLLECTION, data)
        logger.info(
            f"Notification '{body.title}' sent to {body.target_audience}"
            f" ({len(vendor_ids)} vendors)",
            extra=log_extra(actor, _COLLECTION, notification_id),
        )
        return await self.store.get(_COLLECTION, notification_id)

    async def mark_read(self, notification_id: str) -> dict:
        actor = require_actor(self.actor, "read notifications")
        notification = await self.store.get(_COLLECTION, notification_id)
        if notification is None or not visible_notifications(actor, [notification]):
            raise ResourceNotFoundError(
                _COLLECTION, notification_id,
                ErrorContext(
                    actor_id=actor.id, collection=_COLLECTION,
                    record_id=notification_id,
                ),
            )
        if not is_notification_read(notification, actor.id):
            await self.store.update(
                _COLLECTION, notification_id,
                {"read_by": mark_read(notification.get("read_by"), actor.id)},
            )
        return await self.store.get(_COLLECTION, notification_id)
