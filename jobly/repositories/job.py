"""Job repository for database operations."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from jobly.db.session import run_statement
from jobly.errors import BadRequestError
from jobly.repositories.base import BaseRepository
from jobly.repositories.company import company_repository
from jobly.utils import FilterRule, build_where_fragment, contains_pattern, is_true

# title, salary and equity map to columns of the same name
JOB_COLUMNS: dict[str, str] = {}

JOB_FILTER_RULES = (
    FilterRule("title", "title ILIKE {param}", contains_pattern),
    FilterRule("minSalary", "salary >= {param}"),
    FilterRule("hasEquity", "equity > 0.0", predicate=is_true),
)

_SELECT = 'id, title, salary, equity, company_handle AS "companyHandle"'


class JobRepository(BaseRepository):
    """Repository for Job entity operations."""

    table = "jobs"
    key_column = "id"
    label = "job id"
    select_columns = _SELECT
    translation = JOB_COLUMNS

    def create(self, db: Session, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create a job.

        Args:
            db: Database session
            data: {title, salary, equity, companyHandle}

        Returns:
            Created job with its generated id

        Raises:
            BadRequestError: If companyHandle names no company
        """
        if not company_repository.exists(db, data["companyHandle"]):
            raise BadRequestError(f"Invalid company handle: {data['companyHandle']}")

        row = (
            run_statement(
                db,
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES ($1, $2, $3, $4)
                    RETURNING {_SELECT}""",
                [data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]],
            )
            .mappings()
            .one()
        )
        job = dict(row)
        db.commit()
        return job

    def find_all(self, db: Session, filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List jobs ordered by id, optionally filtered.

        Args:
            db: Database session
            filters: Any of title (case-insensitive substring), minSalary,
                hasEquity ("true"/"false", bool or TriState; only true
                restricts to equity > 0)
        """
        where = build_where_fragment(filters or {}, JOB_FILTER_RULES)
        rows = run_statement(
            db,
            f"SELECT {_SELECT} FROM jobs WHERE {where.sql} ORDER BY id",
            where.values,
        ).mappings()
        return [dict(row) for row in rows]


# Singleton instance
job_repository = JobRepository()
