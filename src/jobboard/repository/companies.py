"""Repository helpers for Companies."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Companies, generate_id


async def get_company(session: AsyncSession, company_id: str) -> Companies | None:
    stmt = select(Companies).where(Companies.id == company_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def create_company(
    session: AsyncSession,
    *,
    name: str,
    description: str | None = None,
    id: str | None = None,
) -> Companies:
    company = Companies()
    company.id = id or generate_id()
    company.name = name
    company.description = description
    session.add(company)
    await session.flush()
    return company
