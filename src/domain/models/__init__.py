"""Domain models package."""

from .finance import (
    BalanceSheet,
    BalanceSheetAssets,
    BalanceSheetLiabilities,
    CashBalances,
    CashflowStatement,
    CategoryAmount,
    FinancialSummary,
    MonthlyTrendPoint,
    PeriodReports,
    ProfitAndLoss,
    TaxLine,
    TaxReport,
)
from .ledger import (
    Asset,
    Expense,
    Income,
    Invoice,
    InvoiceItem,
    LedgerSnapshot,
    Loan,
    TenantSettings,
    Transfer,
)

__all__ = [
    "Asset",
    "Expense",
    "Income",
    "Invoice",
    "InvoiceItem",
    "LedgerSnapshot",
    "Loan",
    "TenantSettings",
    "Transfer",
    "BalanceSheet",
    "BalanceSheetAssets",
    "BalanceSheetLiabilities",
    "CashBalances",
    "CashflowStatement",
    "CategoryAmount",
    "FinancialSummary",
    "MonthlyTrendPoint",
    "PeriodReports",
    "ProfitAndLoss",
    "TaxLine",
    "TaxReport",
]
