"""Composition root for wiring infrastructure adapters."""

from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.clock import SystemClock
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_settings() -> LedgerSettings:
    """Return ledger settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return create_ledger_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings or build_settings(),
    )


def build_clock(settings: LedgerSettings | None = None) -> ClockPort:
    """Return a wall clock bound to the configured time zone."""
    resolved = settings or build_settings()
    return SystemClock(resolved.tz)


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_ledger_repository",
    "build_clock",
]
