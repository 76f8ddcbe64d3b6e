"""
Company GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .job import Job


@strawberry.type
class Company:
    """Company type for GraphQL API."""

    id: strawberry.ID
    name: str
    description: str | None

    @strawberry.field
    async def jobs(self) -> list[Annotated["Job", strawberry.lazy(".job")]]:
        """Get jobs posted by this company."""
        from ..resolvers.company import resolve_company_jobs

        return await resolve_company_jobs(self)
