"""Service Checks — liveness always answers, readiness follows database and schema.

Invariants:
    - /api/health/ is 200 regardless of database state
    - /api/health/ready is 503 database_unavailable when no gateway is attached
    - /api/health/ready is 503 schema_missing on a reachable, unmigrated database
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api import __version__
from todo_api.config import Settings
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.main import create_app


@pytest.fixture
def bare_app():
    """App with no database gateway attached (lifespan not run)."""
    return create_app(Settings())


async def _get(app, path):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        return await c.get(path)


async def test_liveness_reports_service_and_version(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "todo-api", "version": __version__,
    }


async def test_liveness_ok_without_database(bare_app):
    res = await _get(bare_app, "/api/health/")
    assert res.status_code == 200


async def test_readiness_ok_with_migrated_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy", "schema": "migrated"}


async def test_readiness_503_without_database(bare_app):
    res = await _get(bare_app, "/api/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}


async def test_readiness_503_when_schema_missing(bare_app, tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    bare_app.state.db_manager = manager
    try:
        res = await _get(bare_app, "/api/health/ready")
    finally:
        await manager.dispose()
    assert res.status_code == 503
    assert res.json()["reason"] == "schema_missing"
