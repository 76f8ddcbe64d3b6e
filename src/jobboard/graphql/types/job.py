"""
Job GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .company import Company


@strawberry.type
class Job:
    """Job type for GraphQL API."""

    id: strawberry.ID
    title: str
    description: str | None
    company_id: strawberry.Private[str]
    created_at: strawberry.Private[str]

    @strawberry.field
    def date(self) -> str:
        """Calendar date (yyyy-mm-dd) the job was posted."""
        from ..resolvers.job import resolve_job_date

        return resolve_job_date(self)

    @strawberry.field
    async def company(self) -> Annotated["Company", strawberry.lazy(".company")] | None:
        """Get the company offering this job."""
        from ..resolvers.job import resolve_job_company

        return await resolve_job_company(self)
