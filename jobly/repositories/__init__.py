"""Repository layer for database access.

Repositories assemble fixed SQL text around the fragments built by
``jobly.utils.sql`` and map "no row returned" to ``NotFoundError``.

Usage:
    from jobly.repositories import company_repository, job_repository

    company = company_repository.get_with_jobs(db, "acme")
    job = job_repository.update(db, job_id, {"salary": 120000})
"""

from jobly.repositories.base import BaseRepository
from jobly.repositories.company import (
    COMPANY_COLUMNS,
    COMPANY_FILTER_BOUNDS,
    COMPANY_FILTER_RULES,
    CompanyRepository,
    company_repository,
)
from jobly.repositories.job import JOB_COLUMNS, JOB_FILTER_RULES, JobRepository, job_repository
from jobly.repositories.user import USER_COLUMNS, UserRepository, user_repository

__all__ = [
    "BaseRepository",
    "COMPANY_COLUMNS",
    "COMPANY_FILTER_BOUNDS",
    "COMPANY_FILTER_RULES",
    "CompanyRepository",
    "company_repository",
    "JOB_COLUMNS",
    "JOB_FILTER_RULES",
    "JobRepository",
    "job_repository",
    "USER_COLUMNS",
    "UserRepository",
    "user_repository",
]
