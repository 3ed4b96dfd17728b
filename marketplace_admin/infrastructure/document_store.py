"""SQL Document Store — DocumentStore protocol over the documents table.

Invariants:
    - Every returned record carries "id" and "kind" (its collection) plus its JSON body
    - create stamps created_at into the body when the caller did not set one
    - update merges the patch into the stored body; concurrent writers are last-write-wins
    - delete is immediate (no soft delete); unknown ids raise ResourceNotFoundError
    - Each call commits on its own; there are no multi-call transactions

Design Decisions:
    - Equality predicates are applied in memory after a per-collection fetch:
      JSON path equality differs between PostgreSQL and SQLite, and the admin
      screens read whole collections anyway
    - pydantic_core.to_jsonable_python turns datetimes and enums into JSON values
"""

import logging
from datetime import datetime, timezone

from pydantic_core import to_jsonable_python
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace_admin.core.errors import ErrorContext, ResourceNotFoundError
from marketplace_admin.models.document import Document

logger = logging.getLogger(__name__)

_RESERVED_KEYS = ("id", "kind")


def _body(data: dict) -> dict:
    clean = {k: v for k, v in data.items() if k not in _RESERVED_KEYS}
    return to_jsonable_python(clean)


def _to_record(row: Document) -> dict:
    record = dict(row.data or {})
    record.setdefault("created_at", row.created_at.isoformat())
    record["updated_at"] = row.updated_at.isoformat() if row.updated_at else None
    record["id"] = row.id
    record["kind"] = row.collection
    return record


def _matches(record: dict, predicates: dict) -> bool:
    return all(record.get(key) == value for key, value in predicates.items())


class SqlDocumentStore:
    """Document store backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(
        self, collection: str, predicates: dict | None = None,
    ) -> list[dict]:
        result = await self.db.execute(
            select(Document)
            .where(Document.collection == collection)
            .order_by(Document.created_at.asc()),
        )
        records = [_to_record(row) for row in result.scalars().all()]
        if not predicates:
            return records
        wanted = to_jsonable_python(predicates)
        return [r for r in records if _matches(r, wanted)]

    async def get(self, collection: str, record_id: str) -> dict | None:
        row = await self._row(collection, record_id)
        return _to_record(row) if row else None

    async def create(self, collection: str, data: dict) -> str:
        body = _body(data)
        body.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        row = Document(collection=collection, data=body)
        self.db.add(row)
        await self.db.commit()
        logger.info(
            f"Created {collection} record {row.id}",
            extra={"collection": collection, "record_id": row.id},
        )
        return row.id

    async def update(self, collection: str, record_id: str, patch: dict) -> None:
        row = await self._require(collection, record_id)
        # Reassign so SQLAlchemy sees the JSON column change
        row.data = {**(row.data or {}), **_body(patch)}
        row.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        logger.info(
            f"Updated {collection} record {record_id}",
            extra={"collection": collection, "record_id": record_id},
        )

    async def delete(self, collection: str, record_id: str) -> None:
        row = await self._require(collection, record_id)
        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"Deleted {collection} record {record_id}",
            extra={"collection": collection, "record_id": record_id},
        )

    async def _row(self, collection: str, record_id: str) -> Document | None:
        result = await self.db.execute(
            select(Document).where(
                Document.id == record_id, Document.collection == collection,
            ),
        )
        return result.scalar_one_or_none()

    async def _require(self, collection: str, record_id: str) -> Document:
        row = await self._row(collection, record_id)
        if row is None:
            raise ResourceNotFoundError(
                collection, record_id,
                ErrorContext(collection=collection, record_id=record_id),
            )
        return row
