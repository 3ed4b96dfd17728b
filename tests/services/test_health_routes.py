"""Health & Readiness — liveness always up; readiness follows the database."""

import marketplace_admin.infrastructure.database as db_module
from marketplace_admin.infrastructure.database import DatabaseSessionManager


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_is_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503


async def test_readiness_with_database(client, monkeypatch):
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(db_module, "db_manager", manager)
    res = await client.get("/api/v1/health/ready")
    await manager.dispose()
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
