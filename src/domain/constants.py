"""Domain constants for ledger aggregation."""

from decimal import Decimal

CASH_PAYMENT_METHODS = frozenset({"cash"})

BANK_PAYMENT_METHODS = frozenset(
    {
        "bank",
        "card",
        "online",
        "online_transfer",
        "online_payment",
    }
)

CASH_ACCOUNT = "cash"
BANK_ACCOUNT = "bank"
TRANSFER_ACCOUNTS = (CASH_ACCOUNT, BANK_ACCOUNT)

PAID_STATUS = "paid"
UNPAID_STATUS = "unpaid"

RECURRING_FREQUENCIES = ("monthly", "quarterly", "yearly")

OTHER_CATEGORY = "Other"

DEFAULT_CURRENCY = "LKR"
DEFAULT_BUSINESS_NAME = "My Business"
DEFAULT_TAX_RATE = Decimal("10")
DEFAULT_EXPENSE_CATEGORIES = (
    "Hosting",
    "Tools & Subscriptions",
    "Advertising & Marketing",
    "Transport",
    "Office & Utilities",
    OTHER_CATEGORY,
)

# Tolerance of the Assets = Liabilities + Equity check.
BALANCE_EPSILON = Decimal("0.01")


__all__ = [
    "CASH_PAYMENT_METHODS",
    "BANK_PAYMENT_METHODS",
    "CASH_ACCOUNT",
    "BANK_ACCOUNT",
    "TRANSFER_ACCOUNTS",
    "PAID_STATUS",
    "UNPAID_STATUS",
    "RECURRING_FREQUENCIES",
    "OTHER_CATEGORY",
    "DEFAULT_CURRENCY",
    "DEFAULT_BUSINESS_NAME",
    "DEFAULT_TAX_RATE",
    "DEFAULT_EXPENSE_CATEGORIES",
    "BALANCE_EPSILON",
]
