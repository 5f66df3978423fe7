from .logging import get_logger, setup_logging
from .sql import (
    TAUTOLOGY,
    FilterRule,
    QueryFragment,
    TriState,
    build_set_fragment,
    build_where_fragment,
    contains_pattern,
    is_true,
    quote_identifier,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "TAUTOLOGY",
    "FilterRule",
    "QueryFragment",
    "TriState",
    "is_true",
    "build_set_fragment",
    "build_where_fragment",
    "contains_pattern",
    "quote_identifier",
]
