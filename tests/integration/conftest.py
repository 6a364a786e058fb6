"""Fixtures for tests against a real Postgres.

The database named by ``DATABASE__URL`` gets the schema on first use and
is truncated after every test. When it cannot be reached the tests are
skipped rather than failed.
"""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from citadel.config import Settings
from citadel.persistence.database import create_engine
from citadel.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def postgres() -> AsyncIterator[AsyncEngine]:
    """Engine on the test database, with a clean schema for each test."""
    engine = create_engine(Settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as exc:
        await engine.dispose()
        pytest.skip(f"Postgres not reachable: {exc}")

    yield engine

    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE votes, comments, posts, users CASCADE"))
    await engine.dispose()
