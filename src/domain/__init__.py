"""Domain package for ledger aggregation rules and core models."""

from .constants import BALANCE_EPSILON, DEFAULT_TAX_RATE
from .models import (
    BalanceSheet,
    FinancialSummary,
    LedgerSnapshot,
    TenantSettings,
)
from .services import (
    compose_balance_sheet,
    compute_cash_balances,
    compute_financial_summary,
    estimate_tax,
    pending_payments,
)

__all__ = [
    "BALANCE_EPSILON",
    "DEFAULT_TAX_RATE",
    "BalanceSheet",
    "FinancialSummary",
    "LedgerSnapshot",
    "TenantSettings",
    "compose_balance_sheet",
    "compute_cash_balances",
    "compute_financial_summary",
    "estimate_tax",
    "pending_payments",
]
