"""Repository helpers for Jobs.

Mutations that touch an existing job are scoped by ``company_id``: a job
owned by another company behaves exactly like a missing one and the
function returns None.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Jobs, generate_id, utc_timestamp


async def get_job(session: AsyncSession, job_id: str) -> Jobs | None:
    stmt = select(Jobs).where(Jobs.id == job_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def get_jobs(session: AsyncSession) -> Sequence[Jobs]:
    stmt = select(Jobs).order_by(Jobs.created_at.desc())
    res = await session.execute(stmt)
    return res.scalars().all()


async def get_jobs_by_company(session: AsyncSession, company_id: str) -> Sequence[Jobs]:
    stmt = select(Jobs).where(Jobs.company_id == company_id).order_by(Jobs.created_at.desc())
    res = await session.execute(stmt)
    return res.scalars().all()


async def find_company_job(session: AsyncSession, *, company_id: str, title: str) -> Jobs | None:
    stmt = select(Jobs).where(Jobs.company_id == company_id, Jobs.title == title).limit(1)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def create_job(
    session: AsyncSession,
    *,
    company_id: str,
    title: str,
    description: str | None,
) -> Jobs:
    job = Jobs()
    job.id = generate_id()
    job.company_id = company_id
    job.title = title
    job.description = description
    job.created_at = utc_timestamp()
    session.add(job)
    await session.flush()
    return job


async def _get_owned_job(session: AsyncSession, job_id: str, company_id: str) -> Jobs | None:
    stmt = select(Jobs).where(Jobs.id == job_id, Jobs.company_id == company_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def delete_job(session: AsyncSession, job_id: str, company_id: str) -> Jobs | None:
    job = await _get_owned_job(session, job_id, company_id)
    if job is None:
        return None
    await session.delete(job)
    await session.flush()
    return job


async def update_job(
    session: AsyncSession,
    *,
    id: str,
    company_id: str,
    title: str,
    description: str | None,
) -> Jobs | None:
    job = await _get_owned_job(session, id, company_id)
    if job is None:
        return None
    job.title = title
    job.description = description
    await session.flush()
    return job
