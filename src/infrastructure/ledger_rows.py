"""Mapping of stored ledger rows into domain records.

Rows come either from SQL (snake_case columns) or from the JSON export of
the browser app (camelCase keys); both spellings are accepted. Numeric
fields are coerced, never validated, so a malformed row still loads.
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
import json
from typing import Any

from src.domain.constants import (
    DEFAULT_TAX_RATE,
    OTHER_CATEGORY,
    UNPAID_STATUS,
)
from src.domain.models.ledger import (
    Asset,
    Expense,
    Income,
    Invoice,
    InvoiceItem,
    Loan,
    TenantSettings,
    Transfer,
)
from src.utils.decimal_utils import coerce_decimal


_MISSING = object()


def _pick(row: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        value = row.get(key, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def _text(row: Mapping[str, Any], *keys: str, default: str = "") -> str:
    value = _pick(row, *keys)
    return default if value is None else str(value)


def _coerce_bool(value, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "false", "no", "off"}
    return bool(value)


def _coerce_tax_rate(value) -> Decimal:
    """Return the stored rate, or the default when missing or unparseable.

    An explicit zero is kept.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_TAX_RATE
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return DEFAULT_TAX_RATE
    return rate if rate.is_finite() else DEFAULT_TAX_RATE


def _load_items(raw) -> tuple[InvoiceItem, ...]:
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return ()
    if not isinstance(raw, list):
        return ()
    items = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        items.append(
            InvoiceItem(
                description=_text(entry, "description"),
                price=coerce_decimal(entry.get("price")),
                quantity=coerce_decimal(entry.get("quantity")),
            )
        )
    return tuple(items)


def row_to_income(row: Mapping[str, Any]) -> Income:
    return Income(
        id=_text(row, "id"),
        amount=coerce_decimal(row.get("amount")),
        date=_pick(row, "date"),
        payment_method=_pick(row, "payment_method", "paymentMethod"),
        client_id=_pick(row, "client_id", "clientId"),
        client_name=_text(row, "client_name", "clientName"),
        service_type=_text(row, "service_type", "serviceType"),
        notes=_text(row, "notes"),
        is_recurring=_coerce_bool(
            _pick(row, "is_recurring", "isRecurring"),
            default=False,
        ),
        recurring_frequency=_text(
            row,
            "recurring_frequency",
            "recurringFrequency",
            default="monthly",
        ),
        recurring_end_date=_pick(
            row,
            "recurring_end_date",
            "recurringEndDate",
        ),
    )


def row_to_expense(row: Mapping[str, Any]) -> Expense:
    return Expense(
        id=_text(row, "id"),
        amount=coerce_decimal(row.get("amount")),
        date=_pick(row, "date"),
        category=_text(row, "category", default=OTHER_CATEGORY),
        payment_method=_pick(row, "payment_method", "paymentMethod"),
        notes=_text(row, "notes"),
        is_recurring=_coerce_bool(
            _pick(row, "is_recurring", "isRecurring"),
            default=False,
        ),
        recurring_frequency=_text(
            row,
            "recurring_frequency",
            "recurringFrequency",
            default="monthly",
        ),
        recurring_end_date=_pick(
            row,
            "recurring_end_date",
            "recurringEndDate",
        ),
        receipt=_pick(row, "receipt"),
    )


def row_to_invoice(row: Mapping[str, Any]) -> Invoice:
    invoice_id = _text(row, "id", "invoice_number", "invoiceNumber")
    return Invoice(
        id=invoice_id,
        invoice_number=_text(
            row,
            "invoice_number",
            "invoiceNumber",
            default=invoice_id,
        ),
        total=coerce_decimal(row.get("total")),
        status=_text(row, "status", default=UNPAID_STATUS),
        created_at=_pick(row, "created_at", "createdAt"),
        due_date=_pick(row, "due_date", "dueDate"),
        subtotal=coerce_decimal(row.get("subtotal")),
        tax_rate=coerce_decimal(_pick(row, "tax_rate", "taxRate")),
        tax_amount=coerce_decimal(_pick(row, "tax_amount", "taxAmount")),
        items=_load_items(row.get("items")),
        payment_method=_pick(row, "payment_method", "paymentMethod"),
        client_id=_pick(row, "client_id", "clientId"),
        client_name=_text(row, "client_name", "clientName"),
        notes=_text(row, "notes"),
    )


def row_to_transfer(row: Mapping[str, Any]) -> Transfer:
    return Transfer(
        id=_text(row, "id"),
        from_account=_text(row, "from_account", "fromAccount").strip().lower(),
        to_account=_text(row, "to_account", "toAccount").strip().lower(),
        amount=coerce_decimal(row.get("amount")),
        date=_pick(row, "date"),
    )


def row_to_asset(row: Mapping[str, Any]) -> Asset:
    return Asset(
        id=_text(row, "id"),
        name=_text(row, "name", default="Asset"),
        amount=coerce_decimal(row.get("amount")),
        date=_pick(row, "date"),
    )


def row_to_loan(row: Mapping[str, Any]) -> Loan:
    return Loan(
        id=_text(row, "id"),
        name=_text(row, "name", default="Loan"),
        amount=coerce_decimal(row.get("amount")),
        date=_pick(row, "date"),
    )


def row_to_settings(row: Mapping[str, Any] | None) -> TenantSettings:
    """Overlay a stored settings row on the defaults.

    Args:
        row: Stored settings, or None when the tenant has none yet.

    Returns:
        TenantSettings: Defaults merged with the stored values.
    """
    defaults = TenantSettings()
    if not row:
        return defaults
    categories = _pick(row, "expense_categories", "expenseCategories")
    if isinstance(categories, str):
        try:
            categories = json.loads(categories)
        except ValueError:
            categories = None
    return defaults.merged(
        {
            "currency": _pick(row, "currency"),
            "tax_rate": _coerce_tax_rate(_pick(row, "tax_rate", "taxRate")),
            "tax_enabled": _coerce_bool(
                _pick(row, "tax_enabled", "taxEnabled"),
                default=True,
            ),
            "opening_cash": coerce_decimal(
                _pick(row, "opening_cash", "openingCash")
            ),
            "owner_capital": coerce_decimal(
                _pick(row, "owner_capital", "ownerCapital")
            ),
            "payables": coerce_decimal(_pick(row, "payables")),
            "business_name": _pick(row, "business_name", "businessName"),
            "expense_categories": (
                tuple(str(item) for item in categories)
                if isinstance(categories, list)
                else None
            ),
            "bank_details": _pick(row, "bank_details", "bankDetails"),
        }
    )


__all__ = [
    "row_to_income",
    "row_to_expense",
    "row_to_invoice",
    "row_to_transfer",
    "row_to_asset",
    "row_to_loan",
    "row_to_settings",
]
