"""Accounts receivable from unpaid invoices."""

from collections.abc import Iterable
from datetime import date, timezone, tzinfo
from decimal import Decimal

from src.domain.constants import PAID_STATUS
from src.domain.models.ledger import Invoice
from src.domain.services.periods import as_of_window, filter_by_window
from src.utils.decimal_utils import sum_decimals


def is_unpaid(invoice: Invoice) -> bool:
    """Return True unless the invoice status reads ``paid``."""
    return str(invoice.status or "").strip().lower() != PAID_STATUS


def unpaid_invoices(
    invoices: Iterable[Invoice],
    cutoff: date | None = None,
    tz: tzinfo = timezone.utc,
) -> list[Invoice]:
    """Return unpaid invoices created on or before ``cutoff``.

    Args:
        invoices: Invoices of one tenant.
        cutoff: Inclusive creation-day bound; None keeps every invoice.
        tz: Tenant time zone.

    Returns:
        list[Invoice]: Unpaid invoices in their original order.
    """
    candidates = [invoice for invoice in invoices if is_unpaid(invoice)]
    if cutoff is None:
        return candidates
    return filter_by_window(
        candidates,
        as_of_window(cutoff),
        tz,
        date_field="created_at",
    )


def pending_payments(
    invoices: Iterable[Invoice],
    cutoff: date | None = None,
    tz: tzinfo = timezone.utc,
) -> Decimal:
    """Return the stored totals of unpaid invoices as of ``cutoff``."""
    return sum_decimals(
        invoice.total for invoice in unpaid_invoices(invoices, cutoff, tz)
    )


__all__ = ["is_unpaid", "unpaid_invoices", "pending_payments"]
