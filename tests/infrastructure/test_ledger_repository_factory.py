"""Tests for ledger repository backend selection."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import ledger_repository_factory as factory
from src.infrastructure.json_ledger_repository import JsonLedgerRepository
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import LedgerSettings


def test_factory_defaults_to_sqlalchemy() -> None:
    """Factory should return the SQLAlchemy repository by default."""
    repository = factory.create_ledger_repository(
        MagicMock(),
        logger=MagicMock(),
        settings=LedgerSettings(),
    )

    assert isinstance(repository, SqlAlchemyLedgerRepository)


def test_factory_uses_json_backend(tmp_path: Path) -> None:
    settings = LedgerSettings(
        backend="json",
        json_file=tmp_path / "ledger.json",
    )

    repository = factory.create_ledger_repository(
        MagicMock(),
        logger=MagicMock(),
        settings=settings,
    )

    assert isinstance(repository, JsonLedgerRepository)


def test_factory_requires_json_file() -> None:
    with pytest.raises(RuntimeError, match="LEDGER_JSON_FILE"):
        factory.create_ledger_repository(
            MagicMock(),
            logger=MagicMock(),
            settings=LedgerSettings(backend="json"),
        )


def test_factory_rejects_unknown_backend() -> None:
    with pytest.raises(ValueError, match="csv"):
        factory.create_ledger_repository(
            MagicMock(),
            logger=MagicMock(),
            settings=LedgerSettings(backend="csv"),
        )
