"""
Database models for the job board (authoritative ORM definitions).

Defines the SQLAlchemy Base with a naming convention for stable constraint
names, plus the three tables: companies, jobs and users.
"""

import secrets
import string
from datetime import UTC, datetime

from sqlalchemy import ForeignKeyConstraint, Index, MetaData, PrimaryKeyConstraint, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

ID_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
ID_LENGTH = 12

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def generate_id() -> str:
    """Generate an opaque 12-character alphanumeric identifier."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string, e.g. 2024-03-01T10:00:00.000Z"""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Base(DeclarativeBase):
    """Base class for all database models."""

    metadata = MetaData(naming_convention=naming_convention)


class Companies(Base):
    __tablename__ = "companies"
    __table_args__ = (PrimaryKeyConstraint("id", name="companies_pkey"),)

    id: Mapped[str] = mapped_column(String(ID_LENGTH), default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    jobs: Mapped[list["Jobs"]] = relationship("Jobs", uselist=True, back_populates="company")
    users: Mapped[list["Users"]] = relationship("Users", uselist=True, back_populates="company")


class Jobs(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        ForeignKeyConstraint(
            ["company_id"],
            ["companies.id"],
            ondelete="CASCADE",
            name="jobs_company_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="jobs_pkey"),
        Index("idx_jobs_company", "company_id"),
        Index("idx_jobs_created_at", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(ID_LENGTH), default=generate_id)
    company_id: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    # ISO 8601 string; the public `date` field is its first 10 characters
    created_at: Mapped[str] = mapped_column(String(32), nullable=False, default=utc_timestamp)

    company: Mapped["Companies"] = relationship("Companies", back_populates="jobs")


class Users(Base):
    __tablename__ = "users"
    __table_args__ = (
        ForeignKeyConstraint(
            ["company_id"],
            ["companies.id"],
            ondelete="CASCADE",
            name="users_company_id_fkey",
        ),
        PrimaryKeyConstraint("id", name="users_pkey"),
        Index("idx_users_email", "email", unique=True),
    )

    id: Mapped[str] = mapped_column(String(ID_LENGTH), default=generate_id)
    company_id: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    company: Mapped["Companies"] = relationship("Companies", back_populates="users")


target_metadata = Base.metadata
