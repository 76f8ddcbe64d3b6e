"""
GraphQL request helper for the job board API.

Sends each operation as a POST to the GraphQL endpoint, with a bearer
token when one is available.

Usage:
    async with JobBoardClient(access_token=lambda: token) as client:
        job = await client.create_job(title="T", description="D")
        same = await client.get_job(job["id"])
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

JOB_DETAIL_FRAGMENT = """
fragment JobDetail on Job {
  id
  date
  title
  company {
    id
    name
  }
  description
}
"""

JOB_BY_ID_QUERY = (
    """
query JobById($id: ID!) {
  job(id: $id) {
    ...JobDetail
  }
}
"""
    + JOB_DETAIL_FRAGMENT
)

JOBS_QUERY = """
query Jobs {
  jobs {
    id
    date
    title
    company {
      id
      name
    }
  }
}
"""

COMPANY_BY_ID_QUERY = """
query CompanyById($id: ID!) {
  company(id: $id) {
    id
    name
    description
    jobs {
      id
      date
      title
    }
  }
}
"""

CREATE_JOB_MUTATION = (
    """
mutation CreateJob($input: CreateJobInput!) {
  job: createJob(input: $input) {
    ...JobDetail
  }
}
"""
    + JOB_DETAIL_FRAGMENT
)

UPDATE_JOB_MUTATION = (
    """
mutation UpdateJob($input: UpdateJobInput!) {
  job: updateJob(input: $input) {
    ...JobDetail
  }
}
"""
    + JOB_DETAIL_FRAGMENT
)

DELETE_JOB_MUTATION = """
mutation DeleteJob($id: ID!) {
  job: deleteJob(id: $id) {
    id
  }
}
"""


class GraphQLRequestError(Exception):
    """The server answered with a GraphQL ``errors`` list."""

    def __init__(self, errors: list[dict[str, Any]]):
        self.errors = errors
        super().__init__("; ".join(str(e.get("message", e)) for e in errors))

    @property
    def codes(self) -> list[str | None]:
        """Machine-readable ``extensions.code`` of every error, in order."""
        return [(e.get("extensions") or {}).get("code") for e in self.errors]


class JobBoardClient:
    """
    Async GraphQL client for the job board.

    Args:
        url: GraphQL endpoint (defaults to settings.graphql_url)
        access_token: Called before each request; its result, when truthy,
            is sent as ``Authorization: Bearer <token>``
        http_client: Pre-built httpx client (the caller keeps ownership)
        timeout: HTTP timeout in seconds for the client built here
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        access_token: Callable[[], str | None] | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.url = url or settings.graphql_url
        self.access_token = access_token
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> JobBoardClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        token = self.access_token() if self.access_token else None
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def request(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Send one GraphQL operation and return its ``data``.

        Raises:
            GraphQLRequestError: If the response carries GraphQL errors
            httpx.HTTPStatusError: On a non-2xx transport response
        """
        response = await self._client.post(
            self.url,
            json={"query": query, "variables": variables or {}},
            headers=self._headers(),
        )
        response.raise_for_status()

        payload = response.json()
        if payload.get("errors"):
            logger.debug("GraphQL request returned errors", errors=payload["errors"])
            raise GraphQLRequestError(payload["errors"])
        return payload["data"]

    async def get_jobs(self) -> list[dict[str, Any]]:
        data = await self.request(JOBS_QUERY)
        return data["jobs"]

    async def get_job(self, id: str) -> dict[str, Any]:
        data = await self.request(JOB_BY_ID_QUERY, {"id": id})
        return data["job"]

    async def get_company(self, id: str) -> dict[str, Any]:
        data = await self.request(COMPANY_BY_ID_QUERY, {"id": id})
        return data["company"]

    async def create_job(self, *, title: str, description: str | None = None) -> dict[str, Any]:
        data = await self.request(
            CREATE_JOB_MUTATION, {"input": {"title": title, "description": description}}
        )
        return data["job"]

    async def update_job(
        self, *, id: str, title: str, description: str | None = None
    ) -> dict[str, Any]:
        data = await self.request(
            UPDATE_JOB_MUTATION,
            {"input": {"id": id, "title": title, "description": description}},
        )
        return data["job"]

    async def delete_job(self, id: str) -> dict[str, Any]:
        data = await self.request(DELETE_JOB_MUTATION, {"id": id})
        return data["job"]
