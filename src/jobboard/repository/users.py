"""Repository helpers for Users (identity lookup for the auth context)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Users, generate_id


async def get_user(session: AsyncSession, user_id: str) -> Users | None:
    stmt = select(Users).where(Users.id == user_id)
    res = await session.execute(stmt)
    return res.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    *,
    company_id: str,
    email: str,
    id: str | None = None,
) -> Users:
    user = Users()
    user.id = id or generate_id()
    user.company_id = company_id
    user.email = email
    session.add(user)
    await session.flush()
    return user
