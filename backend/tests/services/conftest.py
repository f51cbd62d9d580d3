"""Service test fixtures — explicit settings and payload factories.

Invariants:
    - Settings are built explicitly (no .env, no lru_cache leakage between tests)
    - Payloads are snake_case, the shape services receive from schemas
"""

from datetime import timedelta

import pytest

from contentdesk.config import Settings
from contentdesk.core.clock import utcnow


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        default_page_limit=10,
        max_page_limit=50,
        slug_write_retries=3,
        _env_file=None,
    )


@pytest.fixture
def event_payload():
    """Factory for a valid event create payload."""

    def make(title="Community Workshop", days_ahead=7, **overrides):
        start = utcnow() + timedelta(days=days_ahead)
        data = {
            "title": title,
            "description": "A hands-on session for local partners.",
            "type": "workshop",
            "status": "upcoming",
            "start_date": start,
            "end_date": start + timedelta(hours=3),
        }
        data.update(overrides)
        return data

    return make
