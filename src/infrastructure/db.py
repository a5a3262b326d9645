"""SQLAlchemy engine management for the ledger database.

Engines are created lazily from ``LEDGER_DB_URL`` and cached per URL, so
the Streamlit reruns and CLI calls of one process share a pool. SQLite
URLs keep SQLAlchemy's default pool since file-backed exports are used
for local checks.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger

LEDGER_DB_URL_ENV = "LEDGER_DB_URL"

_engines: dict[str, Engine] = {}


def _read_db_url() -> str:
    """Return the configured ledger database URL.

    Raises:
        RuntimeError: If ``LEDGER_DB_URL`` is missing or empty.
    """
    dotenv.load_dotenv()
    value = (os.getenv(LEDGER_DB_URL_ENV) or "").strip()
    if not value:
        raise RuntimeError(
            f"Missing environment variable: {LEDGER_DB_URL_ENV}. "
            "Set it, or set LEDGER_BACKEND=json to read a JSON export."
        )
    return value


def describe_db_url(db_url: str | URL) -> str:
    """Render a database URL with its password masked for logs."""
    return make_url(db_url).render_as_string(hide_password=True)


def _create_engine(db_url: str) -> Engine:
    """Create an engine for the ledger tables.

    Server databases get a small pre-pinged QueuePool; SQLite files keep
    the dialect's own pool.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        return create_engine(url, future=True)
    return create_engine(
        url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def get_ledger_engine(db_url: Optional[str] = None) -> Engine:
    """Return the cached engine for ``db_url`` (``LEDGER_DB_URL`` if None).

    Args:
        db_url: Explicit SQLAlchemy URL, mainly for scripts and tests.

    Returns:
        Engine: Lazily created engine connected to the ledger tables.
    """
    resolved = db_url or _read_db_url()
    engine = _engines.get(resolved)
    if engine is None:
        get_app_logger().info(
            f"Creating ledger engine for {describe_db_url(resolved)}"
        )
        engine = _create_engine(resolved)
        _engines[resolved] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the cached ledger engines."""

    def __init__(self, db_url: Optional[str] = None) -> None:
        self._db_url = db_url

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the configured ledger database."""
        return get_ledger_engine(self._db_url)


__all__ = [
    "describe_db_url",
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
