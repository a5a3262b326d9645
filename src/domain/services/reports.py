"""Period reports derived from incomes and expenses."""

from collections.abc import Callable, Iterable
from datetime import timezone, tzinfo
from decimal import Decimal

from src.domain.constants import OTHER_CATEGORY
from src.domain.models.finance import (
    CashflowStatement,
    CategoryAmount,
    MonthlyTrendPoint,
    ProfitAndLoss,
    TaxLine,
    TaxReport,
)
from src.domain.models.ledger import Expense, Income, LedgerSnapshot
from src.domain.services.balances import compute_balance_sheet_cash
from src.domain.services.periods import (
    PeriodWindow,
    before_window,
    filter_by_window,
    month_key,
    record_day,
)
from src.utils.decimal_utils import coerce_decimal, sum_decimals


def _income_group(income: Income) -> str:
    return (income.service_type or "").strip() or OTHER_CATEGORY


def _expense_group(expense: Expense) -> str:
    return (expense.category or "").strip() or OTHER_CATEGORY


def group_amounts(
    records: Iterable,
    key: Callable[[object], str],
) -> list[CategoryAmount]:
    """Sum record amounts per group, largest first.

    Args:
        records: Records with an ``amount`` attribute.
        key: Function returning the group name of a record.

    Returns:
        list[CategoryAmount]: Groups sorted by descending amount.
    """
    totals: dict[str, Decimal] = {}
    for record in records:
        name = key(record)
        totals[name] = totals.get(name, Decimal("0")) + coerce_decimal(
            record.amount
        )
    items = [
        CategoryAmount(name=name, amount=amount)
        for name, amount in totals.items()
    ]
    return sorted(items, key=lambda item: item.amount, reverse=True)


def build_profit_and_loss(
    snapshot: LedgerSnapshot,
    window: PeriodWindow | None,
    tz: tzinfo = timezone.utc,
) -> ProfitAndLoss:
    """Group a period's income by service and expenses by category."""
    incomes = filter_by_window(snapshot.incomes, window, tz)
    expenses = filter_by_window(snapshot.expenses, window, tz)
    income_items = group_amounts(incomes, _income_group)
    expense_items = group_amounts(expenses, _expense_group)
    total_income = sum_decimals(item.amount for item in income_items)
    total_expenses = sum_decimals(item.amount for item in expense_items)
    return ProfitAndLoss(
        currency=snapshot.settings.currency,
        start=window.start if window else None,
        end=window.end if window else None,
        income_items=income_items,
        expense_items=expense_items,
        total_income=total_income,
        total_expenses=total_expenses,
        net_profit=total_income - total_expenses,
    )


def build_tax_report(
    snapshot: LedgerSnapshot,
    window: PeriodWindow | None,
    tz: tzinfo = timezone.utc,
) -> TaxReport | None:
    """Compute tax on each income and expense group of a period.

    Returns:
        TaxReport | None: None when the tenant has tax disabled.
    """
    settings = snapshot.settings
    if not settings.tax_enabled:
        return None
    rate = coerce_decimal(settings.tax_rate)
    profit_and_loss = build_profit_and_loss(snapshot, window, tz)

    def _with_tax(items: list[CategoryAmount]) -> list[TaxLine]:
        return [
            TaxLine(
                name=item.name,
                amount=item.amount,
                tax=item.amount * rate / Decimal("100"),
            )
            for item in items
        ]

    income_items = _with_tax(profit_and_loss.income_items)
    expense_items = _with_tax(profit_and_loss.expense_items)
    tax_collected = sum_decimals(item.tax for item in income_items)
    tax_on_expenses = sum_decimals(item.tax for item in expense_items)
    return TaxReport(
        currency=settings.currency,
        start=profit_and_loss.start,
        end=profit_and_loss.end,
        tax_rate=rate,
        income_items=income_items,
        expense_items=expense_items,
        total_income=profit_and_loss.total_income,
        total_expenses=profit_and_loss.total_expenses,
        tax_collected=tax_collected,
        tax_on_expenses=tax_on_expenses,
        net_tax_payable=tax_collected - tax_on_expenses,
    )


def build_monthly_trend(
    snapshot: LedgerSnapshot,
    tz: tzinfo = timezone.utc,
) -> list[MonthlyTrendPoint]:
    """Return income and expenses per calendar month, oldest first."""
    income: dict[str, Decimal] = {}
    expenses: dict[str, Decimal] = {}
    sources = ((income, snapshot.incomes), (expenses, snapshot.expenses))
    for target, records in sources:
        for record in records:
            day = record_day(record.date, tz)
            if day is None:
                continue
            key = month_key(day)
            target[key] = target.get(key, Decimal("0")) + coerce_decimal(
                record.amount
            )
    return [
        MonthlyTrendPoint(
            month=key,
            income=income.get(key, Decimal("0")),
            expenses=expenses.get(key, Decimal("0")),
        )
        for key in sorted(set(income) | set(expenses))
    ]


def build_cashflow_statement(
    snapshot: LedgerSnapshot,
    window: PeriodWindow,
    tz: tzinfo = timezone.utc,
) -> CashflowStatement:
    """Bracket a period's income and expenses with opening and closing cash.

    The opening balance is the opening cash plus everything received and
    spent strictly before the window starts.
    """
    if window.start is not None:
        earlier = before_window(window.start)
        opening_balance = compute_balance_sheet_cash(
            filter_by_window(snapshot.incomes, earlier, tz),
            filter_by_window(snapshot.expenses, earlier, tz),
            snapshot.settings.opening_cash,
        )
    else:
        opening_balance = coerce_decimal(snapshot.settings.opening_cash)
    inflows = sum_decimals(
        item.amount for item in filter_by_window(snapshot.incomes, window, tz)
    )
    outflows = sum_decimals(
        item.amount for item in filter_by_window(snapshot.expenses, window, tz)
    )
    return CashflowStatement(
        currency=snapshot.settings.currency,
        start=window.start,
        end=window.end,
        opening_balance=opening_balance,
        inflows=inflows,
        outflows=outflows,
    )


__all__ = [
    "group_amounts",
    "build_profit_and_loss",
    "build_tax_report",
    "build_monthly_trend",
    "build_cashflow_statement",
]
