"""
Root GraphQL mutation definitions
"""

import strawberry

from ..access_control import get_auth_context_from_info
from ..types.job import Job


# Input types for mutations
@strawberry.input
class CreateJobInput:
    """Input for creating a new job. The company comes from the caller."""

    title: str
    description: str | None = None


@strawberry.input
class UpdateJobInput:
    """Input for updating a job."""

    id: strawberry.ID
    title: str
    description: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createJob")
    async def create_job(self, info: strawberry.Info, input: CreateJobInput) -> Job | None:
        """Create a new job for the authenticated user's company."""
        from ..resolvers.job import create_job

        return await create_job(
            get_auth_context_from_info(info),
            title=input.title,
            description=input.description,
        )

    @strawberry.mutation(name="deleteJob")
    async def delete_job(self, info: strawberry.Info, id: strawberry.ID) -> Job | None:
        """Delete a job owned by the authenticated user's company."""
        from ..resolvers.job import delete_job

        return await delete_job(get_auth_context_from_info(info), id)

    @strawberry.mutation(name="updateJob")
    async def update_job(self, info: strawberry.Info, input: UpdateJobInput) -> Job | None:
        """Update a job owned by the authenticated user's company."""
        from ..resolvers.job import update_job

        return await update_job(
            get_auth_context_from_info(info),
            id=input.id,
            title=input.title,
            description=input.description,
        )
