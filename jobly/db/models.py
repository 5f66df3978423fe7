"""SQLAlchemy table definitions for Jobly.

The ORM classes only define the schema (used by ``init_db`` and the test
fixtures); repositories talk to these tables with parameterized SQL text.

Entity Hierarchy:
    Company -> Job
    User
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    false,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Company(Base):
    """Company that posts jobs."""

    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    num_employees = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    logo_url = Column(Text, nullable=True)

    __table_args__ = (CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),)

    def __repr__(self) -> str:
        return f"<Company(handle={self.handle}, name={self.name})>"


class Job(Base):
    """Job posting owned by a company."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Numeric, nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
        Index("idx_jobs_company_handle", "company_handle"),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title={self.title})>"


class User(Base):
    """User account. ``password`` holds the bcrypt hash."""

    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    password = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())

    __table_args__ = (CheckConstraint("email LIKE '%@%'", name="ck_users_email"),)

    def __repr__(self) -> str:
        return f"<User(username={self.username})>"
