"""
End-to-end tests for the /graphql endpoint over HTTP
"""

import os
from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from jobboard.api.app import create_app
from jobboard.auth.adapters.none import NoAuthAdapter
from jobboard.database.connection import get_async_session
from jobboard.repository.users import create_user

from ..conftest import COMPANY_A, USER_A, USER_B

CREATE_JOB = """
mutation CreateJob($input: CreateJobInput!) {
  job: createJob(input: $input) { id title company { id } }
}
"""

DELETE_JOB = """
mutation DeleteJob($id: ID!) {
  job: deleteJob(id: $id) { id }
}
"""

JOBS = "query Jobs { jobs { id title date } }"


@pytest_asyncio.fixture
async def http(seeded) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_health(http):
    response = await http.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_anonymous_query(http, jwt_env):
    response = await http.post("/graphql", json={"query": JOBS})

    assert response.status_code == 200
    assert response.json() == {"data": {"jobs": []}}


@pytest.mark.asyncio
async def test_create_job_without_token(http, jwt_env):
    response = await http.post(
        "/graphql",
        json={"query": CREATE_JOB, "variables": {"input": {"title": "T"}}},
    )

    body = response.json()
    assert body["data"] == {"job": None}
    assert body["errors"][0]["extensions"]["code"] == "NOT_AUTHORIZED"


@pytest.mark.asyncio
async def test_invalid_token_is_treated_as_anonymous(http, jwt_env):
    response = await http.post(
        "/graphql",
        json={"query": CREATE_JOB, "variables": {"input": {"title": "T"}}},
        headers=bearer("not-a-jwt"),
    )

    body = response.json()
    assert response.status_code == 200
    assert body["errors"][0]["extensions"]["code"] == "NOT_AUTHORIZED"


@pytest.mark.asyncio
async def test_job_lifecycle_with_tokens(http, jwt_env):
    token_a = jwt_env(USER_A)
    token_b = jwt_env(USER_B)

    created = await http.post(
        "/graphql",
        json={"query": CREATE_JOB, "variables": {"input": {"title": "T", "description": "D"}}},
        headers=bearer(token_a),
    )
    job = created.json()["data"]["job"]
    assert job["company"] == {"id": COMPANY_A}

    not_owned = await http.post(
        "/graphql",
        json={"query": DELETE_JOB, "variables": {"id": job["id"]}},
        headers=bearer(token_b),
    )
    assert not_owned.json()["errors"][0]["extensions"]["code"] == "NOT_FOUND"

    deleted = await http.post(
        "/graphql",
        json={"query": DELETE_JOB, "variables": {"id": job["id"]}},
        headers=bearer(token_a),
    )
    assert deleted.json() == {"data": {"job": {"id": job["id"]}}}

    listing = await http.post("/graphql", json={"query": JOBS})
    assert listing.json() == {"data": {"jobs": []}}


@pytest.mark.asyncio
async def test_default_settings_do_not_authenticate_missing_header(http):
    os.environ.pop("JOBBOARD_AUTH_PROVIDER", None)
    os.environ.pop("JOBBOARD_AUTH_CONFIG", None)

    # The development user exists, so only the missing header can stop the mutation
    async with get_async_session() as session:
        await create_user(
            session,
            id=NoAuthAdapter().default_user_id,
            company_id=COMPANY_A,
            email="dev@one.example",
        )

    response = await http.post(
        "/graphql",
        json={"query": CREATE_JOB, "variables": {"input": {"title": "T"}}},
    )

    body = response.json()
    assert body["data"] == {"job": None}
    assert body["errors"][0]["extensions"]["code"] == "NOT_AUTHORIZED"

    listing = await http.post("/graphql", json={"query": JOBS})
    assert listing.json() == {"data": {"jobs": []}}
