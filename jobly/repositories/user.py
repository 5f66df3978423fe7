"""User repository for database operations."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from jobly.db.session import run_statement
from jobly.errors import BadRequestError, UnauthorizedError
from jobly.repositories.base import BaseRepository
from jobly.services.auth_service import get_password_hash, verify_password

USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

_SELECT = 'username, first_name AS "firstName", last_name AS "lastName", email, is_admin AS "isAdmin"'


class UserRepository(BaseRepository):
    """Repository for User entity operations.

    Rows returned never include the password hash.
    """

    table = "users"
    key_column = "username"
    label = "user"
    select_columns = _SELECT
    translation = USER_COLUMNS

    def to_record(self, row: Mapping[str, Any]) -> dict[str, Any]:
        record = dict(row)
        # SQLite hands booleans back as 0/1
        record["isAdmin"] = bool(record["isAdmin"])
        return record

    def authenticate(self, db: Session, username: str, password: str) -> dict[str, Any]:
        """Check a username/password pair.

        Returns:
            The user

        Raises:
            UnauthorizedError: If the user is missing or the password is wrong
        """
        row = (
            run_statement(
                db,
                f"SELECT {_SELECT}, password FROM users WHERE username = $1",
                [username],
            )
            .mappings()
            .first()
        )
        if row is None or not verify_password(password, row["password"]):
            raise UnauthorizedError("Invalid username/password")

        user = self.to_record(row)
        del user["password"]
        return user

    def register(self, db: Session, data: Mapping[str, Any]) -> dict[str, Any]:
        """Create a user with a hashed password.

        Args:
            db: Database session
            data: {username, password, firstName, lastName, email, isAdmin}

        Returns:
            Created user

        Raises:
            BadRequestError: If the username is taken
        """
        if self.exists(db, data["username"]):
            raise BadRequestError(f"Duplicate username: {data['username']}")

        row = (
            run_statement(
                db,
                f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                    VALUES ($1, $2, $3, $4, $5, $6)
                    RETURNING {_SELECT}""",
                [
                    data["username"],
                    get_password_hash(data["password"]),
                    data["firstName"],
                    data["lastName"],
                    data["email"],
                    bool(data.get("isAdmin", False)),
                ],
            )
            .mappings()
            .one()
        )
        user = self.to_record(row)
        db.commit()
        return user

    def find_all(self, db: Session) -> list[dict[str, Any]]:
        """List users ordered by username."""
        rows = run_statement(db, f"SELECT {_SELECT} FROM users ORDER BY username").mappings()
        return [self.to_record(row) for row in rows]

    def update(self, db: Session, key: Any, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partial update; a new password is hashed before it is stored."""
        data = dict(data)
        if data.get("password") is not None:
            data["password"] = get_password_hash(data["password"])
        return super().update(db, key, data)


# Singleton instance
user_repository = UserRepository()
