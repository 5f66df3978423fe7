"""Database module for the Jobly API.

Components:
- models: table definitions (companies, jobs, users)
- session: engine, sessions and ``run_statement`` for ``$n``-style SQL
"""

from jobly.db.models import Base, Company, Job, User
from jobly.db.session import (
    SessionLocal,
    check_connection,
    close_db,
    configure_engine,
    engine,
    get_db,
    init_db,
    run_statement,
    to_bind_params,
)

__all__ = [
    # Connection
    "engine",
    "SessionLocal",
    "configure_engine",
    "get_db",
    "init_db",
    "close_db",
    "check_connection",
    "run_statement",
    "to_bind_params",
    # Models
    "Base",
    "Company",
    "Job",
    "User",
]
