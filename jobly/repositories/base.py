"""Base repository class with common CRUD operations.

Each resource repository declares its table, key column, selected columns
and field-name translation table; the partial update, lookup and delete
statements are then shared.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from jobly.db.session import run_statement
from jobly.errors import NotFoundError
from jobly.utils import build_set_fragment


class BaseRepository:
    """Base repository over a single table addressed by one key column."""

    # Overridden by subclasses
    table: str = ""
    key_column: str = ""
    label: str = ""
    select_columns: str = ""
    translation: Mapping[str, str] = {}

    def not_found(self, key: Any) -> NotFoundError:
        return NotFoundError(f"No {self.label}: {key}")

    def get(self, db: Session, key: Any) -> dict[str, Any]:
        """Get one row by key.

        Args:
            db: Database session
            key: Key column value

        Returns:
            Row as dict

        Raises:
            NotFoundError: If no row has that key
        """
        row = (
            run_statement(
                db,
                f"SELECT {self.select_columns} FROM {self.table} WHERE {self.key_column} = $1",
                [key],
            )
            .mappings()
            .first()
        )
        if row is None:
            raise self.not_found(key)
        return self.to_record(row)

    def exists(self, db: Session, key: Any) -> bool:
        """Check if a row with this key exists."""
        row = run_statement(
            db,
            f"SELECT {self.key_column} FROM {self.table} WHERE {self.key_column} = $1",
            [key],
        ).first()
        return row is not None

    def update(self, db: Session, key: Any, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partial update: only the fields present in ``data`` change.

        Args:
            db: Database session
            key: Key column value
            data: Logical field name -> new value

        Returns:
            Updated row as dict

        Raises:
            EmptyInputError: If data is empty
            NotFoundError: If no row has that key
        """
        fragment = build_set_fragment(data, self.translation)
        sql = (
            f"UPDATE {self.table} SET {fragment.sql} "
            f"WHERE {self.key_column} = ${fragment.next_index} "
            f"RETURNING {self.select_columns}"
        )
        row = run_statement(db, sql, [*fragment.values, key]).mappings().first()
        if row is None:
            db.rollback()
            raise self.not_found(key)
        record = self.to_record(row)
        db.commit()
        return record

    def remove(self, db: Session, key: Any) -> None:
        """Delete a row by key.

        Raises:
            NotFoundError: If no row has that key
        """
        row = run_statement(
            db,
            f"DELETE FROM {self.table} WHERE {self.key_column} = $1 RETURNING {self.key_column}",
            [key],
        ).first()
        if row is None:
            db.rollback()
            raise self.not_found(key)
        db.commit()

    def to_record(self, row: Mapping[str, Any]) -> dict[str, Any]:
        """Convert a result row to a plain dict. Subclasses normalize types here."""
        return dict(row)
