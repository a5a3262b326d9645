"""Tests for the SQLAlchemy ledger repository."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.application.errors import DataUnavailableError
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository


class _FakeResult:
    def __init__(self, rows: list[dict]) -> None:
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)

    def first(self):
        return self._rows[0] if self._rows else None


class _FakeConnection:
    def __init__(self, tables: dict[str, list[dict]]) -> None:
        self._tables = tables
        self.params: list[dict] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def execute(self, query, params):
        self.params.append(params)
        sql = str(query)
        for name, rows in self._tables.items():
            if f"FROM {name}\n" in sql:
                return _FakeResult(rows)
        return _FakeResult([])


def _build_db_port(
    tables: dict[str, list[dict]],
) -> tuple[MagicMock, _FakeConnection]:
    connection = _FakeConnection(tables)
    engine = MagicMock()
    engine.connect.return_value = connection
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return db_port, connection


def test_fetch_snapshot_maps_every_table() -> None:
    db_port, connection = _build_db_port(
        {
            "incomes": [
                {"id": 1, "amount": Decimal("100"), "payment_method": "cash"}
            ],
            "expenses": [
                {"id": 2, "amount": Decimal("40"), "category": "Hosting"}
            ],
            "invoices": [
                {"id": 3, "invoice_number": "INV-3", "total": Decimal("90")}
            ],
            "transfers": [
                {
                    "id": 4,
                    "from_account": "cash",
                    "to_account": "bank",
                    "amount": 10,
                }
            ],
            "assets": [{"id": 5, "name": "Laptop", "amount": 800}],
            "loans": [{"id": 6, "name": "Loan", "amount": 300}],
            "settings": [{"currency": "USD", "tax_rate": 15}],
        }
    )
    repository = SqlAlchemyLedgerRepository(db_port, logger=MagicMock())

    snapshot = repository.fetch_snapshot("tenant-1")

    assert snapshot.tenant_id == "tenant-1"
    assert snapshot.incomes[0].amount == Decimal("100")
    assert snapshot.expenses[0].category == "Hosting"
    assert snapshot.invoices[0].invoice_number == "INV-3"
    assert snapshot.transfers[0].to_account == "bank"
    assert snapshot.assets[0].amount == Decimal("800")
    assert snapshot.loans[0].amount == Decimal("300")
    assert snapshot.settings.currency == "USD"
    assert snapshot.settings.tax_rate == Decimal("15")
    assert all(
        params == {"tenant_id": "tenant-1"} for params in connection.params
    )
    assert len(connection.params) == 7


def test_fetch_snapshot_without_settings_uses_defaults() -> None:
    db_port, _ = _build_db_port({})
    logger = MagicMock()
    repository = SqlAlchemyLedgerRepository(db_port, logger=logger)

    snapshot = repository.fetch_snapshot("tenant-1")

    assert snapshot.is_empty is True
    assert snapshot.settings.tax_rate == Decimal("10")
    logger.info.assert_called_once()


def test_fetch_snapshot_wraps_database_errors() -> None:
    """Driver failures become DataUnavailableError."""
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value.connect.side_effect = (
        OperationalError("SELECT 1", {}, Exception("down"))
    )
    repository = SqlAlchemyLedgerRepository(db_port, logger=MagicMock())

    with pytest.raises(DataUnavailableError) as excinfo:
        repository.fetch_snapshot("tenant-1")

    assert excinfo.value.tenant_id == "tenant-1"
