"""API test fixtures — FastAPI app over httpx with the DB dependency overridden.

Invariants:
    - get_db overridden to yield sessions bound to the per-test SQLite engine
    - db_manager patched so the readiness check sees the test engine

Design Decisions:
    - ASGITransport does not run the lifespan, so nothing touches DATABASE_URL
"""

from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

import contentdesk.infrastructure.database as db_module
from contentdesk.core.clock import utcnow
from contentdesk.infrastructure.database import DatabaseSessionManager, get_db
from contentdesk.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def event_body():
    """Factory for a camelCase event create body."""

    def make(title="Community Workshop", days_ahead=7, **overrides):
        start = utcnow() + timedelta(days=days_ahead)
        body = {
            "title": title,
            "description": "A hands-on session for local partners.",
            "type": "workshop",
            "startDate": start.isoformat(),
            "endDate": (start + timedelta(hours=3)).isoformat(),
        }
        body.update(overrides)
        return body

    return make
