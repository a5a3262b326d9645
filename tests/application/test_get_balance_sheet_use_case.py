"""Tests for the GetBalanceSheetUseCase."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_balance_sheet import (
    GetBalanceSheetUseCase,
)
from src.domain.models.ledger import (
    Asset,
    Income,
    LedgerSnapshot,
    Loan,
    TenantSettings,
)


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = LedgerSnapshot(
        tenant_id="t1",
        settings=TenantSettings(tax_enabled=False, payables=Decimal("300")),
        incomes=(
            Income("i1", Decimal("5000"), "2024-03-01", "cash"),
            Income("i2", Decimal("800"), "2024-05-01", "cash"),
        ),
        assets=(Asset("a1", "Laptop", Decimal("2000"), "2024-02-01"),),
        loans=(Loan("l1", "Loan", Decimal("1000"), "2024-02-01"),),
    )
    return repository


def test_execute_with_explicit_cutoff() -> None:
    clock = MagicMock()
    use_case = GetBalanceSheetUseCase(
        ledger_repository=_repository(),
        clock=clock,
        logger=MagicMock(),
    )

    sheet = use_case.execute("t1", as_of=date(2024, 3, 31))

    assert sheet.assets.total == Decimal("7000")
    assert sheet.liabilities.total == Decimal("1300")
    assert sheet.owners_equity == Decimal("5700")
    assert sheet.is_balanced is True
    clock.now.assert_not_called()


def test_execute_defaults_cutoff_to_today() -> None:
    clock = MagicMock()
    clock.now.return_value = datetime(2024, 6, 1, tzinfo=timezone.utc)
    logger = MagicMock()
    use_case = GetBalanceSheetUseCase(
        ledger_repository=_repository(),
        clock=clock,
        logger=logger,
    )

    sheet = use_case.execute("t1")

    assert sheet.as_of == date(2024, 6, 1)
    assert sheet.assets.cash_and_bank == Decimal("5800")
    logger.warning.assert_not_called()
