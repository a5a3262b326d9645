"""Cash and bank balance derivation."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import BANK_ACCOUNT, CASH_ACCOUNT
from src.domain.models.finance import CashBalances
from src.domain.models.ledger import Expense, Income, Transfer
from src.domain.services.payment_methods import (
    classify_payment_method,
    is_bank,
    is_cash,
)
from src.utils.decimal_utils import coerce_decimal, sum_decimals


def compute_cash_balances(
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    transfers: Iterable[Transfer],
    opening_cash,
) -> CashBalances:
    """Derive cash-in-hand and bank balance from classified flows.

    Cash-to-bank transfers move money out of cash and into the bank;
    bank-to-cash transfers do the reverse. Negative results are returned
    as-is.

    Args:
        incomes: Income records to include.
        expenses: Expense records to include.
        transfers: Transfers between cash and bank.
        opening_cash: Opening cash from the tenant settings.

    Returns:
        CashBalances: Balances and the components they were built from.
    """
    incomes = list(incomes)
    expenses = list(expenses)
    transfers = list(transfers)

    income_cash = sum_decimals(
        item.amount for item in incomes if is_cash(item.payment_method)
    )
    income_bank = sum_decimals(
        item.amount for item in incomes if is_bank(item.payment_method)
    )
    expense_cash = sum_decimals(
        item.amount for item in expenses if is_cash(item.payment_method)
    )
    expense_bank = sum_decimals(
        item.amount for item in expenses if is_bank(item.payment_method)
    )
    cash_to_bank = sum_decimals(
        item.amount
        for item in transfers
        if item.from_account == CASH_ACCOUNT
        and item.to_account == BANK_ACCOUNT
    )
    bank_to_cash = sum_decimals(
        item.amount
        for item in transfers
        if item.from_account == BANK_ACCOUNT
        and item.to_account == CASH_ACCOUNT
    )
    unclassified_count = sum(
        1
        for item in (*incomes, *expenses)
        if classify_payment_method(item.payment_method) is None
    )

    cash_in_hand = (
        coerce_decimal(opening_cash)
        + income_cash
        - expense_cash
        - cash_to_bank
        + bank_to_cash
    )
    bank_balance = income_bank - expense_bank + cash_to_bank - bank_to_cash
    return CashBalances(
        cash_in_hand=cash_in_hand,
        bank_balance=bank_balance,
        income_cash=income_cash,
        income_bank=income_bank,
        expense_cash=expense_cash,
        expense_bank=expense_bank,
        cash_to_bank=cash_to_bank,
        bank_to_cash=bank_to_cash,
        unclassified_count=unclassified_count,
    )


def compute_balance_sheet_cash(
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    opening_cash,
) -> Decimal:
    """Return opening cash plus all income minus all expenses.

    Unlike ``compute_cash_balances`` this ignores payment methods and
    transfers; it is the combined cash-and-bank line of the balance sheet.
    """
    return (
        coerce_decimal(opening_cash)
        + sum_decimals(item.amount for item in incomes)
        - sum_decimals(item.amount for item in expenses)
    )


__all__ = ["compute_cash_balances", "compute_balance_sheet_cash"]
