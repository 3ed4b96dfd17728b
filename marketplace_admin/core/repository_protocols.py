"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Predicates are equality filters only; there are no joins

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the pure resolver functions that consume their results are never async —
      the shell orchestrates the async calls around the pure logic
"""

from typing import Protocol


class DocumentStore(Protocol):
    """Collection-oriented document store — implemented by shell.

    Returned records always carry "id" and "kind" (the collection name).
    """
    async def find(
        self, collection: str, predicates: dict | None = None,
    ) -> list[dict]: ...
    async def get(self, collection: str, record_id: str) -> dict | None: ...
    async def create(self, collection: str, data: dict) -> str: ...
    async def update(self, collection: str, record_id: str, patch: dict) -> None: ...
    async def delete(self, collection: str, record_id: str) -> None: ...


class BlobStore(Protocol):
    """Object storage for images — returns a public URL for the stored bytes."""
    async def upload(self, path: str, data: bytes) -> str: ...
