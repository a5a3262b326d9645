"""Tests for the GetFinancialSummaryUseCase."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.errors import DataUnavailableError
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.domain.models.ledger import Income, LedgerSnapshot


def _clock(now: datetime) -> MagicMock:
    clock = MagicMock()
    clock.now.return_value = now
    return clock


def test_execute_uses_clock_day_in_tenant_zone() -> None:
    """The tenant zone decides which month 'today' falls in."""
    snapshot = LedgerSnapshot(
        tenant_id="t1",
        incomes=(
            Income("i1", Decimal("100"), "2024-07-01", "cash"),
            Income("i2", Decimal("40"), "2024-06-30", "cash"),
        ),
    )
    repository = MagicMock()
    repository.fetch_snapshot.return_value = snapshot
    colombo = timezone(timedelta(hours=5, minutes=30))
    clock = _clock(datetime(2024, 6, 30, 20, 0, tzinfo=timezone.utc))

    use_case = GetFinancialSummaryUseCase(
        ledger_repository=repository,
        clock=clock,
        logger=MagicMock(),
        tz=colombo,
    )
    summary = use_case.execute("t1")

    assert summary.as_of.isoformat() == "2024-07-01"
    assert summary.monthly_income == Decimal("100")
    assert summary.yearly_income == Decimal("140")
    assert summary.cash_in_hand == Decimal("140")
    repository.fetch_snapshot.assert_called_once_with("t1")


def test_execute_propagates_data_unavailable() -> None:
    """Fetch failures surface as DataUnavailableError, never zeros."""
    repository = MagicMock()
    repository.fetch_snapshot.side_effect = DataUnavailableError(
        "t1",
        "connection refused",
    )
    logger = MagicMock()
    use_case = GetFinancialSummaryUseCase(
        ledger_repository=repository,
        clock=_clock(datetime(2024, 1, 1, tzinfo=timezone.utc)),
        logger=logger,
    )

    with pytest.raises(DataUnavailableError) as excinfo:
        use_case.execute("t1")

    assert excinfo.value.tenant_id == "t1"
    assert excinfo.value.reason == "connection refused"
    logger.error.assert_called_once()


def test_execute_reports_empty_ledger() -> None:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = LedgerSnapshot(tenant_id="new")
    use_case = GetFinancialSummaryUseCase(
        ledger_repository=repository,
        clock=_clock(datetime(2024, 1, 1, tzinfo=timezone.utc)),
        logger=MagicMock(),
    )

    summary = use_case.execute("new")

    assert summary.has_data is False
    assert summary.pending_payments == Decimal("0")
