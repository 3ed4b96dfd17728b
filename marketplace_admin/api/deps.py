"""Request Dependencies — session accessor, document store, blob store.

Invariants:
    - get_current_actor never raises: missing or unknown identity is anonymous (None)
    - One SqlDocumentStore per request, bound to that request's session
    - Identity arrives in X-Actor-Id / X-Actor-Role, set by the upstream auth proxy
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace_admin.config import get_settings
from marketplace_admin.core.actor import Actor, parse_actor
from marketplace_admin.infrastructure.blob_store import LocalBlobStore
from marketplace_admin.infrastructure.database import get_db
from marketplace_admin.infrastructure.document_store import SqlDocumentStore


def get_current_actor(
    x_actor_id: str | None = Header(None),
    x_actor_role: str | None = Header(None),
) -> Actor | None:
    return parse_actor(x_actor_id, x_actor_role)


def get_store(db: AsyncSession = Depends(get_db)) -> SqlDocumentStore:
    return SqlDocumentStore(db)


def get_blob_store() -> LocalBlobStore:
    settings = get_settings()
    return LocalBlobStore(settings.blob_root, settings.blob_public_base_url)
