"""Service test fixtures — async DB, document store, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - get_blob_store overridden to write under tmp_path
    - Actors are sent as X-Actor-Id / X-Actor-Role headers, like the upstream proxy does

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - seed() and lookup() open a fresh session per call, so they never read a stale
      identity map after the API has written
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from marketplace_admin.api.deps import get_blob_store
from marketplace_admin.db.base import Base
from marketplace_admin.infrastructure.blob_store import LocalBlobStore
from marketplace_admin.infrastructure.database import get_db
from marketplace_admin.infrastructure.document_store import SqlDocumentStore
from marketplace_admin.main import app
import marketplace_admin.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def seed(test_session_factory):
    """Insert a record directly; returns the stored record with its id."""
    async def _seed(collection: str, **data) -> dict:
        async with test_session_factory() as session:
            store = SqlDocumentStore(session)
            record_id = await store.create(collection, data)
            return await store.get(collection, record_id)
    return _seed


@pytest.fixture
def lookup(test_session_factory):
    """Read a record through a fresh session (never a stale identity map)."""
    async def _lookup(collection: str, record_id: str) -> dict | None:
        async with test_session_factory() as session:
            return await SqlDocumentStore(session).get(collection, record_id)
    return _lookup


@pytest.fixture
def blob_root(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
async def client(test_session_factory, blob_root):
    """FastAPI test client with DB and blob store dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: LocalBlobStore(
        blob_root, "http://test/uploads",
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
