"""Domain services package."""

from .balance_sheet import compose_balance_sheet
from .balances import compute_balance_sheet_cash, compute_cash_balances
from .finance import compute_expense_breakdown, compute_financial_summary
from .payment_methods import (
    classify_payment_method,
    is_bank,
    is_cash,
    normalize_payment_method,
)
from .periods import (
    PeriodWindow,
    as_of_window,
    before_window,
    filter_by_window,
    month_window,
    range_window,
    record_day,
    resolve_named_period,
    year_window,
)
from .profit import compute_profit, estimate_tax
from .receivables import pending_payments, unpaid_invoices
from .recurring import is_recurrence_active, recurring_records
from .reports import (
    build_cashflow_statement,
    build_monthly_trend,
    build_profit_and_loss,
    build_tax_report,
)
from .validation import validate_balance_sign, validate_transfers

__all__ = [
    "compose_balance_sheet",
    "compute_balance_sheet_cash",
    "compute_cash_balances",
    "compute_expense_breakdown",
    "compute_financial_summary",
    "classify_payment_method",
    "is_bank",
    "is_cash",
    "normalize_payment_method",
    "PeriodWindow",
    "as_of_window",
    "before_window",
    "filter_by_window",
    "month_window",
    "range_window",
    "record_day",
    "resolve_named_period",
    "year_window",
    "compute_profit",
    "estimate_tax",
    "pending_payments",
    "unpaid_invoices",
    "is_recurrence_active",
    "recurring_records",
    "build_cashflow_statement",
    "build_monthly_trend",
    "build_profit_and_loss",
    "build_tax_report",
    "validate_balance_sign",
    "validate_transfers",
]
