"""Error taxonomy shared by every layer.

Each error carries an ``ErrorKind``; the HTTP status is looked up from the
kind only when the error reaches the application boundary (``jobly.main``).
"""

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    EMPTY_INPUT = "empty_input"
    RANGE_CONFLICT = "range_conflict"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.EMPTY_INPUT: 400,
    ErrorKind.RANGE_CONFLICT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
}


class JoblyError(Exception):
    """Base exception for Jobly errors."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST
    default_message: str = "Bad Request"

    def __init__(self, message: str | list[str] | None = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class BadRequestError(JoblyError):
    """Input was rejected by a business rule."""


class EmptyInputError(BadRequestError):
    """A partial update carried no fields."""

    kind = ErrorKind.EMPTY_INPUT
    default_message = "No data"


class RangeConflictError(BadRequestError):
    """A lower bound filter exceeds its upper bound."""

    kind = ErrorKind.RANGE_CONFLICT


class UnauthorizedError(JoblyError):
    """An access policy denied the caller."""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(JoblyError):
    """The addressed resource does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Not Found"


__all__ = [
    "ErrorKind",
    "STATUS_BY_KIND",
    "JoblyError",
    "BadRequestError",
    "EmptyInputError",
    "RangeConflictError",
    "UnauthorizedError",
    "NotFoundError",
]
