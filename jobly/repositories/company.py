"""Company repository for database operations."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from jobly.db.session import run_statement
from jobly.errors import BadRequestError
from jobly.repositories.base import BaseRepository
from jobly.utils import FilterRule, build_where_fragment, contains_pattern

COMPANY_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_FILTER_RULES = (
    FilterRule("name", "name ILIKE {param}", contains_pattern),
    FilterRule("minEmployees", "num_employees >= {param}"),
    FilterRule("maxEmployees", "num_employees <= {param}"),
)

COMPANY_FILTER_BOUNDS = (("minEmployees", "maxEmployees"),)

_SELECT = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


class CompanyRepository(BaseRepository):
    """Repository for Company entity operations."""

    table = "companies"
    key_column = "handle"
    label = "company"
    select_columns = _SELECT
    translation = COMPANY_COLUMNS

    def create(self, db: Session, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create a company.

        Args:
            db: Database session
            data: {handle, name, description, numEmployees, logoUrl}

        Returns:
            Created company

        Raises:
            BadRequestError: If the handle is already taken
        """
        if self.exists(db, data["handle"]):
            raise BadRequestError(f"Duplicate company: {data['handle']}")

        row = (
            run_statement(
                db,
                f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                    VALUES ($1, $2, $3, $4, $5)
                    RETURNING {_SELECT}""",
                [
                    data["handle"],
                    data["name"],
                    data["description"],
                    data.get("numEmployees"),
                    data.get("logoUrl"),
                ],
            )
            .mappings()
            .one()
        )
        company = dict(row)
        db.commit()
        return company

    def find_all(self, db: Session, filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List companies ordered by name, optionally filtered.

        Args:
            db: Database session
            filters: Any of name (case-insensitive substring),
                minEmployees, maxEmployees

        Raises:
            RangeConflictError: If minEmployees > maxEmployees
        """
        where = build_where_fragment(filters or {}, COMPANY_FILTER_RULES, COMPANY_FILTER_BOUNDS)
        rows = run_statement(
            db,
            f"SELECT {_SELECT} FROM companies WHERE {where.sql} ORDER BY name",
            where.values,
        ).mappings()
        return [dict(row) for row in rows]

    def get_with_jobs(self, db: Session, handle: str) -> dict[str, Any]:
        """Get a company and the jobs it posts.

        Returns:
            {handle, name, description, numEmployees, logoUrl, jobs}
            where jobs is [{id, title, salary, equity}, ...]

        Raises:
            NotFoundError: If the company does not exist
        """
        company = self.get(db, handle)
        rows = run_statement(
            db,
            "SELECT id, title, salary, equity FROM jobs WHERE company_handle = $1 ORDER BY id",
            [handle],
        ).mappings()
        company["jobs"] = [dict(row) for row in rows]
        return company


# Singleton instance
company_repository = CompanyRepository()
