"""Classification of free-text payment methods into cash or bank."""

import re
from typing import Literal

from src.domain.constants import BANK_PAYMENT_METHODS, CASH_PAYMENT_METHODS

PaymentChannel = Literal["cash", "bank"]

_WHITESPACE = re.compile(r"\s+")


def normalize_payment_method(payment_method: str | None) -> str:
    """Lower-case a payment method and join its words with underscores.

    Args:
        payment_method: Raw value entered by the user.

    Returns:
        str: Normalized value, empty when nothing was entered.
    """
    if not payment_method:
        return ""
    return _WHITESPACE.sub("_", str(payment_method).lower())


def is_cash(payment_method: str | None) -> bool:
    """Return True for an empty method or one normalizing to ``cash``."""
    if not payment_method:
        return True
    return normalize_payment_method(payment_method) in CASH_PAYMENT_METHODS


def is_bank(payment_method: str | None) -> bool:
    """Return True when the method is bank, card, or an online variant."""
    return normalize_payment_method(payment_method) in BANK_PAYMENT_METHODS


def classify_payment_method(
    payment_method: str | None,
) -> PaymentChannel | None:
    """Return the channel a payment method settles through.

    Unrecognized methods return None and are left out of both the cash
    and the bank balance.
    """
    if is_cash(payment_method):
        return "cash"
    if is_bank(payment_method):
        return "bank"
    return None


__all__ = [
    "PaymentChannel",
    "normalize_payment_method",
    "is_cash",
    "is_bank",
    "classify_payment_method",
]
