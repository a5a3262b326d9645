"""Domain models for raw ledger records.

Records are supplied by a repository and never mutated by the aggregation
services. Dates are kept as received (date, datetime, or ISO string) and
resolved to calendar days only when a period filter needs them.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Union

from src.domain.constants import (
    DEFAULT_BUSINESS_NAME,
    DEFAULT_CURRENCY,
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_TAX_RATE,
    OTHER_CATEGORY,
    UNPAID_STATUS,
)

RecordDate = Union[date, datetime, str, None]


@dataclass(frozen=True)
class Income:
    """Money received from a client.

    Attributes:
        id: Stable record identifier.
        amount: Received amount, expected to be non-negative.
        date: When the money was received.
        payment_method: Free-text method, classified as cash or bank.
        is_recurring: Descriptive flag, never expanded into new records.
    """

    id: str
    amount: Decimal
    date: RecordDate
    payment_method: str | None = "cash"
    client_id: str | None = None
    client_name: str = ""
    service_type: str = ""
    notes: str = ""
    is_recurring: bool = False
    recurring_frequency: str = "monthly"
    recurring_end_date: RecordDate = None


@dataclass(frozen=True)
class Expense:
    """Money spent by the business."""

    id: str
    amount: Decimal
    date: RecordDate
    category: str = OTHER_CATEGORY
    payment_method: str | None = "cash"
    notes: str = ""
    is_recurring: bool = False
    recurring_frequency: str = "monthly"
    recurring_end_date: RecordDate = None
    receipt: Any = None


@dataclass(frozen=True)
class InvoiceItem:
    """Single billed line on an invoice."""

    description: str
    price: Decimal
    quantity: Decimal


@dataclass(frozen=True)
class Invoice:
    """Invoice issued to a client.

    ``total`` is trusted as stored; it is not recomputed from ``items``.
    """

    id: str
    invoice_number: str
    total: Decimal
    status: str = UNPAID_STATUS
    created_at: RecordDate = None
    due_date: RecordDate = None
    subtotal: Decimal = Decimal("0")
    tax_rate: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    items: tuple[InvoiceItem, ...] = ()
    payment_method: str | None = "bank"
    client_id: str | None = None
    client_name: str = ""
    notes: str = ""


@dataclass(frozen=True)
class Transfer:
    """Internal movement between the cash and bank accounts."""

    id: str
    from_account: str
    to_account: str
    amount: Decimal
    date: RecordDate = None


@dataclass(frozen=True)
class Asset:
    """Equipment or other asset line shown on the balance sheet."""

    id: str
    name: str
    amount: Decimal
    date: RecordDate = None


@dataclass(frozen=True)
class Loan:
    """Outstanding loan balance shown as a liability."""

    id: str
    name: str
    amount: Decimal
    date: RecordDate = None


@dataclass(frozen=True)
class TenantSettings:
    """Per-tenant settings consumed by the aggregation engine.

    Attributes:
        tax_rate: Percent rate, ``10`` meaning 10%.
        opening_cash: Cash balance when bookkeeping started.
        owner_capital: Owner deposits, used to split equity.
        payables: Manually entered unpaid bills.
    """

    currency: str = DEFAULT_CURRENCY
    tax_rate: Decimal = DEFAULT_TAX_RATE
    tax_enabled: bool = True
    opening_cash: Decimal = Decimal("0")
    owner_capital: Decimal = Decimal("0")
    payables: Decimal = Decimal("0")
    business_name: str = DEFAULT_BUSINESS_NAME
    expense_categories: tuple[str, ...] = DEFAULT_EXPENSE_CATEGORIES
    bank_details: str | None = None

    def merged(self, partial: dict[str, Any]) -> "TenantSettings":
        """Return a copy with the non-null values of ``partial`` applied.

        Unknown keys are ignored.

        Args:
            partial: Field name to new value mapping.

        Returns:
            TenantSettings: Updated settings.
        """
        known = self.__dataclass_fields__
        updates = {
            key: value
            for key, value in partial.items()
            if key in known and value is not None
        }
        if not updates:
            return self
        return replace(self, **updates)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Full record set of one tenant, passed into every computation."""

    tenant_id: str
    settings: TenantSettings = field(default_factory=TenantSettings)
    incomes: tuple[Income, ...] = ()
    expenses: tuple[Expense, ...] = ()
    invoices: tuple[Invoice, ...] = ()
    transfers: tuple[Transfer, ...] = ()
    assets: tuple[Asset, ...] = ()
    loans: tuple[Loan, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Return True when the tenant has no ledger records at all."""
        return not (
            self.incomes
            or self.expenses
            or self.invoices
            or self.transfers
            or self.assets
            or self.loans
        )


__all__ = [
    "RecordDate",
    "Income",
    "Expense",
    "InvoiceItem",
    "Invoice",
    "Transfer",
    "Asset",
    "Loan",
    "TenantSettings",
    "LedgerSnapshot",
]
