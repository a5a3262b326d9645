"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CashBalances:
    """Cash-in-hand and bank balance with their classified components.

    Attributes:
        cash_in_hand: Opening cash plus net cash flows and transfers.
        bank_balance: Net bank-like flows plus transfers.
        unclassified_count: Records whose payment method matched neither
            cash nor bank and were left out of both balances.
    """

    cash_in_hand: Decimal
    bank_balance: Decimal
    income_cash: Decimal = Decimal("0")
    income_bank: Decimal = Decimal("0")
    expense_cash: Decimal = Decimal("0")
    expense_bank: Decimal = Decimal("0")
    cash_to_bank: Decimal = Decimal("0")
    bank_to_cash: Decimal = Decimal("0")
    unclassified_count: int = 0

    __computed_fields__ = ("total_liquid",)

    @property
    def total_liquid(self) -> Decimal:
        """Return cash_in_hand plus bank_balance."""
        return self.cash_in_hand + self.bank_balance


@dataclass(frozen=True)
class FinancialSummary:
    """Dashboard and assistant summary for one tenant."""

    currency: str
    as_of: date
    cash_in_hand: Decimal
    bank_balance: Decimal
    monthly_income: Decimal
    yearly_income: Decimal
    monthly_expenses: Decimal
    yearly_expenses: Decimal
    monthly_profit: Decimal
    yearly_profit: Decimal
    pending_payments: Decimal
    estimated_tax_monthly: Decimal
    estimated_tax_yearly: Decimal
    expense_breakdown: dict[str, Decimal] = field(default_factory=dict)
    number_of_incomes: int = 0
    number_of_expenses: int = 0
    unpaid_invoices_count: int = 0
    active_recurring_incomes: int = 0
    active_recurring_expenses: int = 0
    has_data: bool = True

    __computed_fields__ = ("total_liquid",)

    @property
    def total_liquid(self) -> Decimal:
        """Return cash_in_hand plus bank_balance."""
        return self.cash_in_hand + self.bank_balance


@dataclass(frozen=True)
class BalanceSheetAssets:
    """Asset side of the balance sheet."""

    opening_cash: Decimal
    cash_and_bank: Decimal
    receivables: Decimal
    equipment: Decimal
    total: Decimal


@dataclass(frozen=True)
class BalanceSheetLiabilities:
    """Liability side of the balance sheet."""

    payables: Decimal
    loans: Decimal
    taxes: Decimal
    total: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Point-in-time statement of assets, liabilities, and equity.

    Attributes:
        owners_equity: Residual of assets minus liabilities.
        retained_profit: Plug figure, equity minus owner capital.
        is_balanced: Float-guard check of the accounting identity.
    """

    currency: str
    as_of: date
    assets: BalanceSheetAssets
    liabilities: BalanceSheetLiabilities
    owners_equity: Decimal
    owner_capital: Decimal
    retained_profit: Decimal
    total_profit: Decimal
    is_balanced: bool


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated under a category or service name."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class ProfitAndLoss:
    """Income and expenses grouped for a period."""

    currency: str
    start: date | None
    end: date | None
    income_items: list[CategoryAmount]
    expense_items: list[CategoryAmount]
    total_income: Decimal
    total_expenses: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class TaxLine:
    """Grouped amount with the tax computed on it."""

    name: str
    amount: Decimal
    tax: Decimal


@dataclass(frozen=True)
class TaxReport:
    """Tax collected on income and paid on expenses for a period."""

    currency: str
    start: date | None
    end: date | None
    tax_rate: Decimal
    income_items: list[TaxLine]
    expense_items: list[TaxLine]
    total_income: Decimal
    total_expenses: Decimal
    tax_collected: Decimal
    tax_on_expenses: Decimal
    net_tax_payable: Decimal


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income, expenses, and profit for one calendar month."""

    month: str
    income: Decimal
    expenses: Decimal

    __computed_fields__ = ("profit",)

    @property
    def profit(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses


@dataclass(frozen=True)
class CashflowStatement:
    """Cash movement over a period, bracketed by opening and closing."""

    currency: str
    start: date | None
    end: date | None
    opening_balance: Decimal
    inflows: Decimal
    outflows: Decimal

    __computed_fields__ = ("net_change", "closing_balance")

    @property
    def net_change(self) -> Decimal:
        """Return inflows minus outflows."""
        return self.inflows - self.outflows

    @property
    def closing_balance(self) -> Decimal:
        """Return the opening balance plus the net change."""
        return self.opening_balance + self.net_change


@dataclass(frozen=True)
class PeriodReports:
    """Profit and loss, tax, and cash flow built from one snapshot."""

    profit_and_loss: ProfitAndLoss
    tax_report: TaxReport | None
    cashflow: CashflowStatement

__all__ = [
    "CashBalances",
    "FinancialSummary",
    "BalanceSheetAssets",
    "BalanceSheetLiabilities",
    "BalanceSheet",
    "CategoryAmount",
    "ProfitAndLoss",
    "TaxLine",
    "TaxReport",
    "MonthlyTrendPoint",
    "CashflowStatement",
    "PeriodReports",
]
