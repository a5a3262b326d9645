"""Domain services for finance aggregates."""

from collections.abc import Iterable
from datetime import date, timezone, tzinfo
from decimal import Decimal
from logging import Logger

from src.domain.constants import OTHER_CATEGORY
from src.domain.models.finance import FinancialSummary
from src.domain.models.ledger import Expense, LedgerSnapshot
from src.domain.services.balances import compute_cash_balances
from src.domain.services.periods import (
    filter_by_window,
    month_window,
    year_window,
)
from src.domain.services.profit import compute_profit, estimate_tax
from src.domain.services.receivables import pending_payments, unpaid_invoices
from src.domain.services.recurring import recurring_records
from src.domain.services.validation import (
    validate_balance_sign,
    validate_transfers,
    validate_unclassified_count,
)
from src.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_expense_breakdown(
    expenses: Iterable[Expense],
) -> dict[str, Decimal]:
    """Sum expenses per category, bucketing blanks under ``Other``.

    Args:
        expenses: Expense records to group.

    Returns:
        dict[str, Decimal]: Category totals in first-seen order.
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        category = (expense.category or "").strip() or OTHER_CATEGORY
        totals[category] = totals.get(category, Decimal("0")) + coerce_decimal(
            expense.amount
        )
    return totals


def compute_financial_summary(
    snapshot: LedgerSnapshot,
    today: date,
    *,
    tz: tzinfo = timezone.utc,
    logger: Logger,
) -> FinancialSummary:
    """Compute the dashboard summary of one tenant.

    Balances and the expense breakdown span the full history; income,
    expenses, profit, and tax are computed independently for the month
    and the year containing ``today``. Recurring records count as active
    while their end date is absent or not before ``today``.

    Args:
        snapshot: Ledger records and settings of one tenant.
        today: Current day in the tenant time zone.
        tz: Tenant time zone.
        logger: Logger used for warnings.

    Returns:
        FinancialSummary: Computed balances, period totals, and counts.
    """
    settings = snapshot.settings
    validate_transfers(snapshot.transfers, logger)

    balances = compute_cash_balances(
        snapshot.incomes,
        snapshot.expenses,
        snapshot.transfers,
        settings.opening_cash,
    )
    validate_unclassified_count(balances.unclassified_count, logger)
    validate_balance_sign("cash_in_hand", balances.cash_in_hand, logger)
    validate_balance_sign("bank_balance", balances.bank_balance, logger)

    month = month_window(today)
    year = year_window(today)
    monthly_income = sum_decimals(
        item.amount for item in filter_by_window(snapshot.incomes, month, tz)
    )
    yearly_income = sum_decimals(
        item.amount for item in filter_by_window(snapshot.incomes, year, tz)
    )
    monthly_expenses = sum_decimals(
        item.amount for item in filter_by_window(snapshot.expenses, month, tz)
    )
    yearly_expenses = sum_decimals(
        item.amount for item in filter_by_window(snapshot.expenses, year, tz)
    )
    monthly_profit = compute_profit(monthly_income, monthly_expenses)
    yearly_profit = compute_profit(yearly_income, yearly_expenses)

    return FinancialSummary(
        currency=settings.currency,
        as_of=today,
        cash_in_hand=balances.cash_in_hand,
        bank_balance=balances.bank_balance,
        monthly_income=monthly_income,
        yearly_income=yearly_income,
        monthly_expenses=monthly_expenses,
        yearly_expenses=yearly_expenses,
        monthly_profit=monthly_profit,
        yearly_profit=yearly_profit,
        pending_payments=pending_payments(snapshot.invoices),
        estimated_tax_monthly=estimate_tax(
            monthly_profit,
            settings.tax_rate,
            settings.tax_enabled,
        ),
        estimated_tax_yearly=estimate_tax(
            yearly_profit,
            settings.tax_rate,
            settings.tax_enabled,
        ),
        expense_breakdown=compute_expense_breakdown(snapshot.expenses),
        number_of_incomes=len(snapshot.incomes),
        number_of_expenses=len(snapshot.expenses),
        unpaid_invoices_count=len(unpaid_invoices(snapshot.invoices)),
        active_recurring_incomes=len(
            recurring_records(snapshot.incomes, today, tz)
        ),
        active_recurring_expenses=len(
            recurring_records(snapshot.expenses, today, tz)
        ),
        has_data=not snapshot.is_empty,
    )


__all__ = [
    "compute_expense_breakdown",
    "compute_financial_summary",
]
