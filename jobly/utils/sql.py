"""Helpers that build parameterized SQL fragments.

Fragments use positional ``$n`` placeholders (1-based, in the order the
fields were supplied) and are returned together with the matching value
list. Values are only ever bound; the only text interpolated into a
fragment is a column identifier taken from a translation table owned by
application code, or a fixed clause template from a filter rule.

Example:
    >>> build_set_fragment({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
    QueryFragment(sql='"first_name"=$1, "age"=$2', values=['Aliya', 32])
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from jobly.errors import BadRequestError, EmptyInputError, RangeConflictError

# Substituted into a WHERE fragment when no filter produced a clause
TAUTOLOGY = "1=1"


class QueryFragment(NamedTuple):
    """SQL text plus the values bound to its placeholders."""

    sql: str
    values: list[Any]

    @property
    def next_index(self) -> int:
        """Placeholder number the caller should use for its next parameter."""
        return len(self.values) + 1


class TriState(str, Enum):
    """Explicit boolean filter value; only TRUE narrows a query."""

    TRUE = "true"
    FALSE = "false"
    UNSET = "unset"

    def __bool__(self) -> bool:
        return self is TriState.TRUE

    @classmethod
    def coerce(cls, value: Any) -> "TriState":
        """Normalize a raw boolean filter value.

        None is UNSET; booleans and the strings ``"true"``/``"false"`` map to
        TRUE/FALSE. Anything else is rejected.

        Raises:
            BadRequestError: If value is not a recognized boolean
        """
        if value is None:
            return cls.UNSET
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        if value in (cls.TRUE.value, cls.FALSE.value):
            return cls(value)
        raise BadRequestError(f"Expected 'true' or 'false', got {value!r}")


def is_true(value: Any) -> bool:
    """Predicate for boolean filters: only an explicit true applies."""
    return TriState.coerce(value) is TriState.TRUE


@dataclass(frozen=True)
class FilterRule:
    """One recognized filter key and the clause it contributes.

    ``clause`` contains ``{param}`` where the bound value goes. A clause
    without ``{param}`` is a fixed comparison and consumes no placeholder.
    ``predicate`` decides whether a present value applies; without one any
    truthy value does.
    """

    key: str
    clause: str
    transform: Callable[[Any], Any] | None = None
    predicate: Callable[[Any], bool] | None = None

    @property
    def binds_value(self) -> bool:
        return "{param}" in self.clause

    def applies(self, value: Any) -> bool:
        if self.predicate is not None:
            return self.predicate(value)
        return bool(value)


def contains_pattern(value: str) -> str:
    """Wrap a search term for a substring (I)LIKE match."""
    return f"%{value}%"


def quote_identifier(name: str) -> str:
    """Quote a column name as an SQL identifier."""
    return '"' + name.replace('"', '""') + '"'


def build_set_fragment(
    update_map: Mapping[str, Any],
    translation_table: Mapping[str, str] | None = None,
) -> QueryFragment:
    """Build the ``SET`` part of a partial UPDATE.

    Args:
        update_map: Logical field name -> new value, in the order the
            assignments should appear. Values may be None.
        translation_table: Logical field name -> column name. Fields absent
            from the table are used verbatim as the column name.

    Returns:
        QueryFragment whose sql is ``"col1"=$1, "col2"=$2, ...``

    Raises:
        EmptyInputError: If update_map has no entries
    """
    if not update_map:
        raise EmptyInputError()

    columns = translation_table or {}
    clauses: list[str] = []
    values: list[Any] = []

    for field_name, value in update_map.items():
        values.append(value)
        column = columns.get(field_name, field_name)
        clauses.append(f"{quote_identifier(column)}=${len(values)}")

    return QueryFragment(", ".join(clauses), values)


def build_where_fragment(
    filter_map: Mapping[str, Any],
    rules: Sequence[FilterRule],
    bounds: Sequence[tuple[str, str]] = (),
) -> QueryFragment:
    """Build the body of a WHERE clause from sparse filter terms.

    Rules are applied in their own order. A rule contributes its clause when
    its value applies (see ``FilterRule.applies``); boolean rules use
    ``is_true``, so ``"false"`` and an unset value never restrict the result.

    Args:
        filter_map: Filter key -> value, already validated upstream.
        rules: Ordered rules recognized for this resource.
        bounds: (low_key, high_key) pairs that must not be inverted.

    Returns:
        QueryFragment whose clauses are joined by ``AND``; ``1=1`` when no
        rule applied, so the fragment is never empty.

    Raises:
        RangeConflictError: If both keys of a bound pair are present and
            the low value is greater than the high value.
        BadRequestError: If a boolean filter value is not true or false.
    """
    for low_key, high_key in bounds:
        low = filter_map.get(low_key)
        high = filter_map.get(high_key)
        if low is not None and high is not None and low > high:
            raise RangeConflictError(f"{low_key} cannot be greater than {high_key}")

    clauses: list[str] = []
    values: list[Any] = []

    for rule in rules:
        value = filter_map.get(rule.key)
        if not rule.applies(value):
            continue
        if rule.binds_value:
            values.append(rule.transform(value) if rule.transform else value)
            clauses.append(rule.clause.format(param=f"${len(values)}"))
        else:
            clauses.append(rule.clause)

    if not clauses:
        clauses.append(TAUTOLOGY)

    return QueryFragment(" AND ".join(clauses), values)
