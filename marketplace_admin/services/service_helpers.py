"""Service Helpers — actor guards, record lookup, and image upload shared by screen services.

Invariants:
    - require_actor raises AuthenticationRequiredError for anonymous callers
    - require_modify raises PermissionDeniedError when can_modify is false
    - get_or_404 hides records the actor may not see (vendors get 404, not 403)
    - Image paths are <folder>/<prefix>_<millis>_<filename>
"""

import logging
import time

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import ADMIN_OWNER
from marketplace_admin.core.errors import (
    AuthenticationRequiredError, ErrorContext, PermissionDeniedError,
    ResourceNotFoundError,
)
from marketplace_admin.core.repository_protocols import BlobStore, DocumentStore
from marketplace_admin.core.visibility import can_modify, is_admin, visible_records
from marketplace_admin.schemas.common import ImageUpload

logger = logging.getLogger(__name__)


def log_extra(actor: Actor | None, collection: str, record_id: str | None = None) -> dict:
    return {
        "actor_id": actor.id if actor else None,
        "actor_role": actor.role.value if actor else None,
        "collection": collection,
        "record_id": record_id,
    }


def require_actor(actor: Actor | None, action: str) -> Actor:
    if actor is None:
        logger.warning(f"Anonymous caller refused: {action}")
        raise AuthenticationRequiredError()
    return actor


def require_admin(actor: Actor | None, action: str, collection: str) -> Actor:
    actor = require_actor(actor, action)
    if not is_admin(actor):
        logger.warning(
            f"Refused {action}: admin only",
            extra=log_extra(actor, collection),
        )
        raise PermissionDeniedError(
            action, ErrorContext(actor_id=actor.id, collection=collection),
        )
    return actor


def require_modify(
    actor: Actor | None, record: dict, action: str, collection: str,
) -> Actor:
    actor = require_actor(actor, action)
    if not can_modify(actor, record):
        logger.warning(
            f"Refused {action} on {record.get('id')}",
            extra=log_extra(actor, collection, record.get("id")),
        )
        raise PermissionDeniedError(
            action,
            ErrorContext(
                actor_id=actor.id, collection=collection,
                record_id=record.get("id"),
            ),
        )
    return actor


def owner_for(actor: Actor) -> str:
    """Owner stamped on records the actor creates."""
    return ADMIN_OWNER if is_admin(actor) else actor.id


async def get_or_404(
    store: DocumentStore, actor: Actor | None, collection: str, record_id: str,
) -> dict:
    """Fetch a record the actor may see, or raise ResourceNotFoundError."""
    record = await store.get(collection, record_id)
    if record is None or not visible_records(actor, [record], collection):
        raise ResourceNotFoundError(
            collection, record_id,
            ErrorContext(
                actor_id=actor.id if actor else None,
                collection=collection, record_id=record_id,
            ),
        )
    return record


async def upload_image(
    blobs: BlobStore | None, folder: str, prefix: str, image: ImageUpload | None,
) -> str | None:
    """Upload an inline image and return its URL (None when no image was sent)."""
    if image is None:
        return None
    if blobs is None:
        raise RuntimeError("Blob store not configured")
    path = f"{folder}/{prefix}_{int(time.time() * 1000)}_{image.filename}"
    return await blobs.upload(path, image.content)
