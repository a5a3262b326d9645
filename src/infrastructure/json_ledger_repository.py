"""JSON-file repository for tenant ledger records.

The file holds a ``tenants`` mapping keyed by tenant id. Each tenant entry
mirrors the browser storage of the web app: ``settings`` plus ``incomes``,
``expenses``, ``invoices``, ``transfers``, ``assets`` and ``loans`` lists
with camelCase keys.
"""

import json
from pathlib import Path

from src.application.errors import DataUnavailableError
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


class JsonLedgerRepository(LedgerRepositoryPort):
    """Repository reading a JSON export of the ledger."""

    def __init__(self, json_path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            json_path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._json_path = Path(json_path)
        self._logger = logger or get_app_logger()

    def _load(self, tenant_id: str) -> dict:
        try:
            with self._json_path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, ValueError) as exc:
            raise DataUnavailableError(tenant_id, str(exc)) from exc
        if not isinstance(payload, dict):
            raise DataUnavailableError(
                tenant_id,
                f"{self._json_path} does not contain a JSON object",
            )
        return payload

    def _expect(self, tenant_id: str, value, expected: type, label: str):
        if not isinstance(value, expected):
            kind = "object" if expected is dict else "array"
            raise DataUnavailableError(
                tenant_id,
                f"{label} in {self._json_path} is not a JSON {kind}",
            )
        return value

    def fetch_snapshot(self, tenant_id: str) -> LedgerSnapshot:
        """Return every ledger record and the settings of a tenant.

        A tenant missing from the file yields an empty snapshot with
        default settings.

        Raises:
            DataUnavailableError: When the file cannot be read or parsed,
                or when its tenants, tenant entry, settings, or record
                lists have the wrong JSON type.
        """
        tenants = self._expect(
            tenant_id,
            self._load(tenant_id).get("tenants") or {},
            dict,
            "tenants",
        )
        entry = tenants.get(tenant_id)
        if entry is None:
            self._logger.warning(
                f"Tenant {tenant_id} not found in {self._json_path}"
            )
            entry = {}
        self._expect(tenant_id, entry, dict, f"tenant {tenant_id}")
        settings_row = entry.get("settings")
        if settings_row:
            self._expect(tenant_id, settings_row, dict, "settings")

        def _rows(key: str) -> list[dict]:
            rows = self._expect(tenant_id, entry.get(key) or [], list, key)
            return [row for row in rows if isinstance(row, dict)]

        return LedgerSnapshot(
            tenant_id=tenant_id,
            settings=row_to_settings(settings_row),
            incomes=tuple(row_to_income(row) for row in _rows("incomes")),
            expenses=tuple(row_to_expense(row) for row in _rows("expenses")),
            invoices=tuple(row_to_invoice(row) for row in _rows("invoices")),
            transfers=tuple(
                row_to_transfer(row) for row in _rows("transfers")
            ),
            assets=tuple(row_to_asset(row) for row in _rows("assets")),
            loans=tuple(row_to_loan(row) for row in _rows("loans")),
        )


__all__ = ["JsonLedgerRepository"]
