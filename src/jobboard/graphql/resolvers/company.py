from __future__ import annotations

from typing import TYPE_CHECKING

from ...auth.context import AuthContext
from ...database.connection import get_async_session
from ...dbmodels import Companies
from ...logging import get_logger
from ...repository import companies as companies_repo
from ...repository import jobs as jobs_repo
from ..errors import NotFoundError
from ..types.company import Company

if TYPE_CHECKING:
    from ..types.job import Job

logger = get_logger(__name__)


def company_from_row(row: Companies) -> Company:
    return Company(id=row.id, name=row.name, description=row.description)


# Query resolvers
async def resolve_company_by_id(auth_context: AuthContext, id: str) -> Company:
    """
    Resolve a company by its ID. Public: no authentication required.

    Raises:
        NotFoundError: If no company has this ID
    """
    async with get_async_session() as session:
        row = await companies_repo.get_company(session, id)

        if row is None:
            logger.info("Company not found", company_id=id)
            raise NotFoundError(f"No Company found with id {id}")

        return company_from_row(row)


# Company field resolvers
async def resolve_company_jobs(company: Company) -> list[Job]:
    """Resolve the jobs posted by a company; an empty list when it has none."""
    from .job import job_from_row

    async with get_async_session() as session:
        rows = await jobs_repo.get_jobs_by_company(session, company.id)
        return [job_from_row(row) for row in rows]
