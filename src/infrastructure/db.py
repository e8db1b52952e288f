"""Database infrastructure for the bakery back-office.

The bakery's orders, expenses and bills live in the shop's PostgreSQL
database, next to the ``ledger_days`` table written when a day is closed.
The connection string comes from ``BAKERY_DB_URL``, or from
``DATABASE_URL`` as exported by the hosted shop, whose ``postgres://``
URLs are rewritten to the psycopg2 dialect SQLAlchemy expects.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger

DB_URL_VARIABLES = ("BAKERY_DB_URL", "DATABASE_URL")
POSTGRES_SCHEMES = ("postgres://", "postgresql://")
PSYCOPG2_SCHEME = "postgresql+psycopg2://"
CONNECT_TIMEOUT_SECONDS = 10
APPLICATION_NAME = "bakery-daybook"


def _resolve_db_url() -> str:
    """Return the first configured database URL.

    Returns:
        str: Raw URL from ``BAKERY_DB_URL`` or, failing that, ``DATABASE_URL``.

    Raises:
        RuntimeError: If neither variable is set.
    """
    dotenv.load_dotenv()
    for name in DB_URL_VARIABLES:
        value = os.getenv(name, "").strip()
        if value:
            return value
    raise RuntimeError(
        "Missing environment variable: " + " or ".join(DB_URL_VARIABLES)
    )


def _normalize_db_url(db_url: str) -> str:
    """Pin bare PostgreSQL URLs to the psycopg2 driver."""
    for scheme in POSTGRES_SCHEMES:
        if db_url.startswith(scheme):
            return PSYCOPG2_SCHEME + db_url[len(scheme):]
    return db_url


def _create_engine(db_url: str) -> Engine:
    """Create the engine serving the day book.

    The pool holds at most ten connections. PostgreSQL connections give up
    after ``CONNECT_TIMEOUT_SECONDS`` and show up as ``bakery-daybook`` in
    ``pg_stat_activity``.

    Args:
        db_url: Database URL, possibly with a bare ``postgres://`` scheme.

    Returns:
        Engine: A SQLAlchemy engine with pre-ping health checks.
    """
    url = _normalize_db_url(db_url)
    connect_args = {}
    if url.startswith(PSYCOPG2_SCHEME):
        connect_args = {
            "connect_timeout": CONNECT_TIMEOUT_SECONDS,
            "application_name": APPLICATION_NAME,
        }
    get_app_logger().info(
        "Connecting to "
        f"{make_url(url).render_as_string(hide_password=True)}"
    )
    return create_engine(
        url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        connect_args=connect_args,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = _create_engine(_resolve_db_url())
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared bakery engine."""

    def get_engine(self) -> Engine:
        return get_engine()


__all__ = [
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
