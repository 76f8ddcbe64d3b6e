"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path
from typing import Any

import jwt
import pytest
import pytest_asyncio

from jobboard.auth.context import AuthContext, ContextUser

JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"

COMPANY_A = "C1"
COMPANY_B = "C2"
USER_A = "userA"
USER_B = "userB"


@pytest_asyncio.fixture
async def sqlite_db(tmp_path: Path) -> AsyncGenerator[str, None]:
    """Point the shared connection pool at a fresh SQLite file with all tables created."""
    from jobboard.database.connection import (
        create_tables,
        drop_tables,
        get_async_engine,
        init_database,
        reset_database,
    )

    dsn = f"sqlite:///{tmp_path / 'jobboard.db'}"

    reset_database()
    init_database(dsn, force_reinit=True)
    await create_tables()

    yield dsn

    await drop_tables()
    await get_async_engine().dispose()
    reset_database()


@pytest_asyncio.fixture
async def seeded(sqlite_db: str) -> dict[str, Any]:
    """Two companies, one user each, and no jobs."""
    from jobboard.database.connection import get_async_session
    from jobboard.repository.companies import create_company
    from jobboard.repository.users import create_user

    async with get_async_session() as session:
        await create_company(session, id=COMPANY_A, name="Company One", description="First")
        await create_company(session, id=COMPANY_B, name="Company Two", description="Second")
        await create_user(session, id=USER_A, company_id=COMPANY_A, email="a@one.example")
        await create_user(session, id=USER_B, company_id=COMPANY_B, email="b@two.example")

    return {
        "companies": [COMPANY_A, COMPANY_B],
        "users": {USER_A: COMPANY_A, USER_B: COMPANY_B},
    }


@pytest.fixture
def auth_context_for() -> Callable[[str, str], AuthContext]:
    """Build an authenticated context for a user of a company."""

    def build(user_id: str, company_id: str) -> AuthContext:
        return AuthContext(user=ContextUser(id=user_id, company_id=company_id))

    return build


@pytest.fixture
def anonymous() -> AuthContext:
    return AuthContext.anonymous()


@pytest.fixture
def jwt_env() -> Callable[[str], str]:
    """Switch the auth provider to JWT and return a token factory for a subject."""
    os.environ["JOBBOARD_AUTH_PROVIDER"] = "jwt"
    os.environ["JOBBOARD_JWT_SECRET"] = JWT_SECRET
    os.environ.pop("JOBBOARD_AUTH_CONFIG", None)

    def make_token(subject: str, **claims: Any) -> str:
        return jwt.encode({"sub": subject, **claims}, JWT_SECRET, algorithm="HS256")

    return make_token


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


async def stored_created_at(job_id: str) -> str:
    """The raw ``created_at`` string persisted for a job."""
    from jobboard.database.connection import get_async_session
    from jobboard.repository.jobs import get_job

    async with get_async_session() as session:
        row = await get_job(session, job_id)
        assert row is not None
        return row.created_at
