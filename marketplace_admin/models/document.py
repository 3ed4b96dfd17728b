"""Document ORM — one row per stored record, across every collection.

Invariants:
    - id is a generated UUID string, immutable after insert
    - collection names the record kind (categories, products, ...)
    - data holds the record body as JSON; it never contains "id" or "kind"
    - created_at is set once on insert; updated_at moves on every patch

Design Decisions:
    - Single JSON table instead of one table per kind: records are untyped
      documents queried by equality predicates, filtered in memory
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from marketplace_admin.db.base import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Document(Base):
    __tablename__ = "documents"
    __table_args__ = (
        Index("ix_documents_collection_created_at", "collection", "created_at"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    collection: Mapped[str] = mapped_column(String(50), nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
