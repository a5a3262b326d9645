"""SQLAlchemy-backed repository for tenant ledger records."""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import DataUnavailableError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import LedgerSnapshot
from src.infrastructure.ledger_rows import (
    row_to_asset,
    row_to_expense,
    row_to_income,
    row_to_invoice,
    row_to_loan,
    row_to_settings,
    row_to_transfer,
)
from src.infrastructure.logging.logger import get_app_logger

T = TypeVar("T")


_RECORD_QUERIES = {
    "incomes": """
        SELECT id, client_id, client_name, service_type, payment_method,
               amount, date, notes, is_recurring, recurring_frequency,
               recurring_end_date
        FROM incomes
        WHERE user_id = :tenant_id
        ORDER BY date DESC
    """,
    "expenses": """
        SELECT id, category, amount, date, payment_method, notes,
               is_recurring, recurring_frequency, recurring_end_date
        FROM expenses
        WHERE user_id = :tenant_id
        ORDER BY date DESC
    """,
    "invoices": """
        SELECT id, invoice_number, client_id, client_name, items, subtotal,
               tax_rate, tax_amount, total, payment_method, status,
               due_date, created_at, notes
        FROM invoices
        WHERE user_id = :tenant_id
        ORDER BY created_at DESC
    """,
    "transfers": """
        SELECT id, from_account, to_account, amount, date
        FROM transfers
        WHERE user_id = :tenant_id
        ORDER BY date DESC
    """,
    "assets": """
        SELECT id, name, amount, date
        FROM assets
        WHERE user_id = :tenant_id
        ORDER BY created_at DESC
    """,
    "loans": """
        SELECT id, name, amount, date
        FROM loans
        WHERE user_id = :tenant_id
        ORDER BY created_at DESC
    """,
}

_SETTINGS_QUERY = """
    SELECT currency, tax_rate, tax_enabled, opening_cash, owner_capital,
           payables, business_name, expense_categories
    FROM settings
    WHERE user_id = :tenant_id
    LIMIT 1
"""


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for tenant ledger reads."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_snapshot(self, tenant_id: str) -> LedgerSnapshot:
        """Return every ledger record and the settings of a tenant.

        Args:
            tenant_id: Tenant (user) identifier.

        Returns:
            LedgerSnapshot: Records and settings of the tenant.

        Raises:
            DataUnavailableError: When the database cannot be queried.
        """
        params = {"tenant_id": tenant_id}
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                rows = {
                    name: conn.execute(text(sql), params).mappings().all()
                    for name, sql in _RECORD_QUERIES.items()
                }
                settings_row = (
                    conn.execute(text(_SETTINGS_QUERY), params)
                    .mappings()
                    .first()
                )
        except SQLAlchemyError as exc:
            raise DataUnavailableError(tenant_id, str(exc)) from exc

        if settings_row is None:
            self._logger.info(
                f"No settings stored for tenant {tenant_id}; using defaults"
            )
        return LedgerSnapshot(
            tenant_id=tenant_id,
            settings=row_to_settings(settings_row),
            incomes=self._map(rows["incomes"], row_to_income),
            expenses=self._map(rows["expenses"], row_to_expense),
            invoices=self._map(rows["invoices"], row_to_invoice),
            transfers=self._map(rows["transfers"], row_to_transfer),
            assets=self._map(rows["assets"], row_to_asset),
            loans=self._map(rows["loans"], row_to_loan),
        )

    @staticmethod
    def _map(
        rows: list[Mapping[str, Any]],
        mapper: Callable[[Mapping[str, Any]], T],
    ) -> tuple[T, ...]:
        return tuple(mapper(row) for row in rows)


__all__ = ["SqlAlchemyLedgerRepository"]
