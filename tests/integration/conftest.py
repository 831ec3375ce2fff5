"""Integration-test fixtures.

Pre-condition: PostgreSQL + Redis from config.settings, `alembic upgrade head`,
and FT_INTEGRATION=1 in the environment. Otherwise every test here is skipped.

All integration tests share a single event-loop so that the module-level
SQLAlchemy async engine pool and Redis pool remain valid across the session.
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("FT_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set FT_INTEGRATION=1 with PostgreSQL and Redis running")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def live_client() -> AsyncClient:
    """Session-scoped async HTTP client — keeps the engine pool alive."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
