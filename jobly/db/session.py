"""Database connection, session management and statement execution.

This module provides the SQLAlchemy engine, session factories, and
``run_statement``, which executes SQL written with positional ``$n``
placeholders (the format produced by ``jobly.utils.sql``).

Usage:
    from jobly.db.session import get_db, run_statement

    async def my_endpoint(db: Session = Depends(get_db)):
        rows = run_statement(db, "SELECT * FROM jobs WHERE id = $1", [job_id]).mappings().all()
"""

import re
from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, make_url, text
from sqlalchemy.engine import Engine, Result
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.settings import settings
from jobly.utils import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")
_ILIKE = re.compile(r"\bILIKE\b")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_engine(engine: Engine) -> Engine:
    """Install per-dialect connection hooks on an engine."""
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    database = make_url(url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def _build_engine() -> Engine:
    url = settings.get_database_url_auto()
    engine_kwargs: dict[str, Any] = {
        "echo": settings.debug and settings.environment == "local-dev",
    }

    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url == "sqlite:///:memory:":
            # one shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        else:
            ensure_sqlite_directory(url)
        logger.info(f"Using SQLite database: {url}")
    else:
        engine_kwargs.update(
            {
                "pool_size": settings.postgres_pool_size,
                "max_overflow": settings.postgres_max_overflow,
                "pool_pre_ping": settings.postgres_pool_pre_ping,
                "pool_recycle": 3600,
            }
        )
        logger.info(f"Using PostgreSQL database: {url.split('@')[1] if '@' in url else 'unknown'}")

    return configure_engine(create_engine(url, **engine_kwargs))


engine: Engine = _build_engine()

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """Get database session for dependency injection.

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def to_bind_params(sql: str, values: Sequence[Any] = ()) -> tuple[str, dict[str, Any]]:
    """Rewrite ``$n`` placeholders as SQLAlchemy named binds ``:pn``.

    Returns:
        (statement text, {"p1": values[0], ...})
    """
    params = {f"p{index}": value for index, value in enumerate(values, start=1)}
    return _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", sql), params


def run_statement(db: Session, sql: str, values: Sequence[Any] = ()) -> Result:
    """Execute one parameterized statement written with ``$n`` placeholders.

    SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII, so
    the operator is rewritten there.

    Args:
        db: Database session
        sql: Statement text
        values: Positional values for $1..$N

    Returns:
        SQLAlchemy Result
    """
    statement, params = to_bind_params(sql, values)
    if db.get_bind().dialect.name == "sqlite":
        statement = _ILIKE.sub("LIKE", statement)
    return db.execute(text(statement), params)


def check_connection() -> bool:
    """Check if database connection is working.

    Returns:
        True if connection is successful, False otherwise
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False


def init_db() -> None:
    """Create tables that do not exist yet. Called on application startup."""
    from jobly.db.models import Base

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def close_db() -> None:
    """Dispose of pooled connections. Called on application shutdown."""
    engine.dispose()
    logger.info("Database connections closed")
