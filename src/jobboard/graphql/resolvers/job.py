from __future__ import annotations

from ...auth.context import AuthContext
from ...database.connection import get_async_session
from ...dates import to_iso_date
from ...dbmodels import Jobs
from ...logging import get_logger
from ...repository import companies as companies_repo
from ...repository import jobs as jobs_repo
from ..access_control import require_user
from ..errors import NotFoundError
from ..types.company import Company
from ..types.job import Job
from .company import company_from_row

logger = get_logger(__name__)


def job_from_row(row: Jobs) -> Job:
    return Job(
        id=row.id,
        title=row.title,
        description=row.description,
        company_id=row.company_id,
        created_at=row.created_at,
    )


# Query resolvers
async def resolve_job_by_id(auth_context: AuthContext, id: str) -> Job:
    """
    Resolve a job by its ID. Public: no authentication required.

    Raises:
        NotFoundError: If no job has this ID
    """
    async with get_async_session() as session:
        row = await jobs_repo.get_job(session, id)

        if row is None:
            logger.info("Job not found", job_id=id)
            raise NotFoundError(f"No Job found with id {id}")

        return job_from_row(row)


async def resolve_jobs(auth_context: AuthContext) -> list[Job]:
    """Resolve every job, newest first."""
    async with get_async_session() as session:
        rows = await jobs_repo.get_jobs(session)
        return [job_from_row(row) for row in rows]


# Job field resolvers
def resolve_job_date(job: Job) -> str:
    return to_iso_date(job.created_at)


async def resolve_job_company(job: Job) -> Company | None:
    """
    Resolve the company of a job on demand.

    A dangling ``company_id`` resolves to None rather than failing the
    enclosing job query.
    """
    async with get_async_session() as session:
        row = await companies_repo.get_company(session, job.company_id)

        if row is None:
            logger.warning(
                "Job references a missing company", job_id=job.id, company_id=job.company_id
            )
            return None

        return company_from_row(row)


# Mutation resolvers
async def create_job(auth_context: AuthContext, *, title: str, description: str | None) -> Job:
    """
    Create a new job for the caller's own company.

    The company is always taken from the auth context, never from input.
    """
    user = require_user(auth_context, "createJob")

    async with get_async_session() as session:
        row = await jobs_repo.create_job(
            session,
            company_id=user.company_id,
            title=title,
            description=description,
        )

        logger.info(
            "Job created",
            job_id=row.id,
            company_id=row.company_id,
            user_id=user.id,
            title=row.title,
        )

        return job_from_row(row)


async def delete_job(auth_context: AuthContext, id: str) -> Job:
    """
    Delete a job owned by the caller's company.

    A job that is missing and a job owned by another company produce the
    same NotFoundError.
    """
    user = require_user(auth_context, "deleteJob")

    async with get_async_session() as session:
        row = await jobs_repo.delete_job(session, id, user.company_id)

        if row is None:
            logger.info("Job not found for delete", job_id=id, company_id=user.company_id)
            raise NotFoundError(f"No Job found with id {id}")

        logger.info("Job deleted", job_id=id, company_id=user.company_id, user_id=user.id)

        return job_from_row(row)


async def update_job(
    auth_context: AuthContext, *, id: str, title: str, description: str | None
) -> Job:
    """
    Update the title and description of a job owned by the caller's company.

    Ownership is checked the same way as for delete_job.
    """
    user = require_user(auth_context, "updateJob")

    async with get_async_session() as session:
        row = await jobs_repo.update_job(
            session,
            id=id,
            company_id=user.company_id,
            title=title,
            description=description,
        )

        if row is None:
            logger.info("Job not found for update", job_id=id, company_id=user.company_id)
            raise NotFoundError(f"No Job found with id {id}")

        logger.info("Job updated", job_id=id, company_id=user.company_id, user_id=user.id)

        return job_from_row(row)
