"""API test fixtures — FastAPI test clients wired to the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine (readiness check uses it)
    - Lifespan is not run: ASGITransport does not send lifespan events

Design Decisions:
    - Fake DatabaseSessionManager built with __new__: reuses the test engine
      instead of opening a second one
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from todo_api.config import Settings
from todo_api.infrastructure.database import get_db, DatabaseSessionManager
from todo_api.main import app, create_app


def _wire_test_database(target: FastAPI, test_engine, test_session_factory) -> None:
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    target.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    target.state.db_manager = fake_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """Test client for the module-level app with the DB dependency overridden."""
    _wire_test_database(app, test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
async def strict_client(test_engine, test_session_factory):
    """Test client for an app that only accepts known status values."""
    strict_app = create_app(Settings(strict_status=True))
    _wire_test_database(strict_app, test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=strict_app), base_url="http://test",
    ) as c:
        yield c
