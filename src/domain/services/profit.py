"""Profit and estimated tax for a period."""

from decimal import Decimal

from src.utils.decimal_utils import coerce_decimal


def compute_profit(income_total, expense_total) -> Decimal:
    """Return income minus expenses."""
    return coerce_decimal(income_total) - coerce_decimal(expense_total)


def estimate_tax(profit, tax_rate, tax_enabled: bool) -> Decimal:
    """Return the tax owed on a profit at a percentage rate.

    Losses, zero profit, and disabled tax all yield zero, so the estimate
    is never negative.

    Args:
        profit: Period profit.
        tax_rate: Percent rate, ``10`` meaning 10%.
        tax_enabled: Whether the tenant has tax estimation turned on.

    Returns:
        Decimal: Estimated tax.
    """
    profit = coerce_decimal(profit)
    if not tax_enabled or profit <= 0:
        return Decimal("0")
    return profit * coerce_decimal(tax_rate) / Decimal("100")


__all__ = ["compute_profit", "estimate_tax"]
