"""
Tests for database connection helpers and sample data
"""

import pytest

from jobboard.database.connection import (
    check_database_connection,
    get_async_session,
    reset_database,
    to_async_url,
)
from jobboard.database.seed_data import SAMPLE_JOBS, seed_sample_data
from jobboard.repository.jobs import get_jobs


@pytest.mark.unit
@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgresql://u:p@db/jobs", "postgresql+asyncpg://u:p@db/jobs"),
        ("sqlite:///./jobboard.db", "sqlite+aiosqlite:///./jobboard.db"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected


@pytest.mark.asyncio
async def test_check_connection(sqlite_db):
    assert await check_database_connection() == (True, None)


@pytest.mark.asyncio
async def test_check_connection_without_engine():
    reset_database()

    ok, error = await check_database_connection()

    assert ok is False
    assert error == "Database engine not initialized"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_seed_sample_data(sqlite_db):
    async with get_async_session() as db:
        first = await seed_sample_data(db)
    async with get_async_session() as db:
        second = await seed_sample_data(db)
    async with get_async_session() as db:
        jobs = await get_jobs(db)

    assert first == {"companies": 2, "users": 2, "jobs": len(SAMPLE_JOBS)}
    assert second == {"companies": 0, "users": 0, "jobs": 0}
    assert sorted(job.title for job in jobs) == sorted(job["title"] for job in SAMPLE_JOBS)
