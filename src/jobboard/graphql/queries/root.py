"""
Root GraphQL query definitions
"""

import strawberry

from ..access_control import get_auth_context_from_info
from ..types.company import Company
from ..types.job import Job


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def company(self, info: strawberry.Info, id: strawberry.ID) -> Company | None:
        """Get a company by ID."""
        from ..resolvers.company import resolve_company_by_id

        return await resolve_company_by_id(get_auth_context_from_info(info), id)

    @strawberry.field
    async def job(self, info: strawberry.Info, id: strawberry.ID) -> Job | None:
        """Get a job by ID."""
        from ..resolvers.job import resolve_job_by_id

        return await resolve_job_by_id(get_auth_context_from_info(info), id)

    @strawberry.field
    async def jobs(self, info: strawberry.Info) -> list[Job]:
        """Get all jobs, newest first."""
        from ..resolvers.job import resolve_jobs

        return await resolve_jobs(get_auth_context_from_info(info))
