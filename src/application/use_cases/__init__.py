"""Application use cases package."""

from .get_balance_sheet import BalanceSheet, GetBalanceSheetUseCase
from .get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from .get_monthly_trend import GetMonthlyTrendUseCase, MonthlyTrendPoint
from .get_period_reports import GetPeriodReportsUseCase, PeriodReports

__all__ = [
    "BalanceSheet",
    "GetBalanceSheetUseCase",
    "FinancialSummary",
    "GetFinancialSummaryUseCase",
    "GetMonthlyTrendUseCase",
    "MonthlyTrendPoint",
    "GetPeriodReportsUseCase",
    "PeriodReports",
]
