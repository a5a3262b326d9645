"""Tests for the dashboard summary."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.ledger import (
    Expense,
    Income,
    Invoice,
    LedgerSnapshot,
    TenantSettings,
    Transfer,
)
from src.domain.services.finance import (
    compute_expense_breakdown,
    compute_financial_summary,
)

TODAY = date(2024, 6, 15)


def test_monthly_profit_and_tax_from_bank_flows() -> None:
    """Bank income and expense this month drive profit and tax."""
    snapshot = LedgerSnapshot(
        tenant_id="t1",
        settings=TenantSettings(tax_rate=Decimal("10"), tax_enabled=True),
        incomes=(Income("i1", Decimal("2000"), "2024-06-03", "bank"),),
        expenses=(
            Expense("e1", Decimal("500"), "2024-06-04", "Hosting", "bank"),
        ),
    )

    summary = compute_financial_summary(snapshot, TODAY, logger=MagicMock())

    assert summary.monthly_profit == Decimal("1500")
    assert summary.estimated_tax_monthly == Decimal("150")
    assert summary.bank_balance == Decimal("1500")
    assert summary.cash_in_hand == Decimal("0")


def test_summary_separates_month_year_and_history() -> None:
    """Balances span history while period sums use calendar windows."""
    snapshot = LedgerSnapshot(
        tenant_id="t1",
        settings=TenantSettings(
            opening_cash=Decimal("1000"),
            tax_rate=Decimal("20"),
        ),
        incomes=(
            Income("i1", Decimal("100"), "2024-06-01", "cash"),
            Income("i2", Decimal("200"), "2024-06-28", "card"),
            Income("i3", Decimal("400"), "2024-02-01", "cash"),
            Income("i4", Decimal("800"), "2023-12-31", "cash"),
            Income("i5", Decimal("50"), None, "cash"),
        ),
        expenses=(
            Expense("e1", Decimal("30"), "2024-06-10", "", "cash"),
            Expense("e2", Decimal("70"), "2023-11-11", "Hosting", "cheque"),
        ),
        invoices=(
            Invoice("v1", "INV-1", Decimal("300"), status="unpaid"),
            Invoice("v2", "INV-2", Decimal("900"), status="paid"),
        ),
        transfers=(Transfer("t1", "cash", "bank", Decimal("100")),),
    )
    logger = MagicMock()

    summary = compute_financial_summary(snapshot, TODAY, logger=logger)

    assert summary.monthly_income == Decimal("300")
    assert summary.yearly_income == Decimal("700")
    assert summary.monthly_expenses == Decimal("30")
    assert summary.yearly_expenses == Decimal("30")
    assert summary.yearly_profit == Decimal("670")
    assert summary.estimated_tax_yearly == Decimal("134")
    assert summary.cash_in_hand == Decimal("2220")
    assert summary.bank_balance == Decimal("300")
    assert summary.total_liquid == Decimal("2520")
    assert summary.pending_payments == Decimal("300")
    assert summary.unpaid_invoices_count == 1
    assert summary.expense_breakdown == {
        "Other": Decimal("30"),
        "Hosting": Decimal("70"),
    }
    assert summary.number_of_incomes == 5
    assert summary.number_of_expenses == 2
    assert summary.has_data is True
    assert summary.as_of == TODAY
    logger.warning.assert_called_once()


def test_empty_ledger_reports_no_data() -> None:
    snapshot = LedgerSnapshot(tenant_id="new")

    summary = compute_financial_summary(snapshot, TODAY, logger=MagicMock())

    assert summary.has_data is False
    assert summary.cash_in_hand == Decimal("0")
    assert summary.expense_breakdown == {}
    assert summary.currency == "LKR"


def test_negative_balance_is_logged() -> None:
    snapshot = LedgerSnapshot(
        tenant_id="t1",
        expenses=(Expense("e1", Decimal("10"), "2024-06-01", "Other"),),
    )
    logger = MagicMock()

    summary = compute_financial_summary(snapshot, TODAY, logger=logger)

    assert summary.cash_in_hand == Decimal("-10")
    message = logger.warning.call_args.args[0]
    assert "cash_in_hand" in message


def test_expense_breakdown_keeps_first_seen_order() -> None:
    expenses = [
        Expense("e1", Decimal("5"), None, "Transport"),
        Expense("e2", Decimal("1"), None, "  "),
        Expense("e3", Decimal("2"), None, "Transport"),
    ]

    breakdown = compute_expense_breakdown(expenses)

    assert list(breakdown.items()) == [
        ("Transport", Decimal("7")),
        ("Other", Decimal("1")),
    ]


def test_summary_counts_recurring_records_still_running() -> None:
    """Ended or non-recurring records are left out of the counts."""
    snapshot = LedgerSnapshot(
        tenant_id="t1",
        incomes=(
            Income("i1", Decimal("100"), "2024-01-05", is_recurring=True),
            Income(
                "i2",
                Decimal("100"),
                "2024-01-05",
                is_recurring=True,
                recurring_end_date="2024-05-31",
            ),
            Income("i3", Decimal("100"), "2024-06-01"),
        ),
        expenses=(
            Expense(
                "e1",
                Decimal("40"),
                "2024-02-01",
                "Rent",
                is_recurring=True,
                recurring_end_date="2024-06-15",
            ),
        ),
    )

    summary = compute_financial_summary(snapshot, TODAY, logger=MagicMock())

    assert summary.active_recurring_incomes == 1
    assert summary.active_recurring_expenses == 1
