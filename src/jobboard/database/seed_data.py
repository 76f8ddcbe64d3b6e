"""
Reusable seed data functions for database initialization.

Loads a small fixed set of companies, users and jobs so a fresh database
has something to query.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..repository import companies as companies_repo
from ..repository import jobs as jobs_repo
from ..repository import users as users_repo

logger = get_logger(__name__)

SAMPLE_COMPANIES = [
    {
        "id": "FjcJCHJALA4i",
        "name": "Facebook",
        "description": "We are a social media company.",
    },
    {
        "id": "Gu7QW9LcnF5d",
        "name": "Google",
        "description": "We are a search engine company.",
    },
]

SAMPLE_USERS = [
    {"id": "AcMJpL7b413Z", "company_id": "FjcJCHJALA4i", "email": "alice@facebook.com"},
    {"id": "BvBNW636Z89L", "company_id": "Gu7QW9LcnF5d", "email": "bob@google.com"},
]

SAMPLE_JOBS = [
    {
        "company_id": "FjcJCHJALA4i",
        "title": "Frontend Developer",
        "description": "We are looking for a Frontend Developer familiar with React.",
    },
    {
        "company_id": "FjcJCHJALA4i",
        "title": "Backend Developer",
        "description": "We are looking for a Backend Developer familiar with Python.",
    },
    {
        "company_id": "Gu7QW9LcnF5d",
        "title": "Full-Stack Developer",
        "description": "We are looking for a Full-Stack Developer familiar with GraphQL.",
    },
]


async def seed_sample_data(db: AsyncSession) -> dict[str, int]:
    """
    Insert the sample companies, users and jobs.

    Rows that already exist are left alone: companies and users are matched
    by id, jobs by company and title. Running it twice inserts nothing new.

    Returns:
        Count of rows inserted per table
    """
    counts = {"companies": 0, "users": 0, "jobs": 0}

    for company in SAMPLE_COMPANIES:
        if await companies_repo.get_company(db, company["id"]) is None:
            await companies_repo.create_company(db, **company)
            counts["companies"] += 1

    for user in SAMPLE_USERS:
        if await users_repo.get_user(db, user["id"]) is None:
            await users_repo.create_user(db, **user)
            counts["users"] += 1

    for job in SAMPLE_JOBS:
        existing = await jobs_repo.find_company_job(
            db, company_id=job["company_id"], title=job["title"]
        )
        if existing is None:
            await jobs_repo.create_job(db, **job)
            counts["jobs"] += 1

    logger.info("Sample data seeded", **counts)
    return counts
