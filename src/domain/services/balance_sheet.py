"""Balance sheet composition as at a cutoff day."""

from datetime import date, timezone, tzinfo

from src.domain.constants import BALANCE_EPSILON
from src.domain.models.finance import (
    BalanceSheet,
    BalanceSheetAssets,
    BalanceSheetLiabilities,
)
from src.domain.models.ledger import LedgerSnapshot
from src.domain.services.balances import compute_balance_sheet_cash
from src.domain.services.periods import as_of_window, filter_by_window
from src.domain.services.profit import compute_profit, estimate_tax
from src.domain.services.receivables import pending_payments
from src.utils.decimal_utils import coerce_decimal, sum_decimals


def compose_balance_sheet(
    snapshot: LedgerSnapshot,
    as_of: date,
    tz: tzinfo = timezone.utc,
) -> BalanceSheet:
    """Assemble assets, liabilities, and equity as at ``as_of``.

    Income, expenses, assets, and loans dated after ``as_of`` are ignored;
    receivables use invoice creation days. Owner's equity is the residual
    of assets minus liabilities, so ``is_balanced`` can only fail through
    rounding noise.

    Args:
        snapshot: Ledger records and settings of one tenant.
        as_of: Inclusive cutoff day.
        tz: Tenant time zone.

    Returns:
        BalanceSheet: Statement with the identity check applied.
    """
    settings = snapshot.settings
    window = as_of_window(as_of)
    incomes = filter_by_window(snapshot.incomes, window, tz)
    expenses = filter_by_window(snapshot.expenses, window, tz)
    assets = filter_by_window(snapshot.assets, window, tz)
    loans = filter_by_window(snapshot.loans, window, tz)

    opening_cash = coerce_decimal(settings.opening_cash)
    cash_and_bank = compute_balance_sheet_cash(incomes, expenses, opening_cash)
    receivables = pending_payments(snapshot.invoices, as_of, tz)
    equipment = sum_decimals(item.amount for item in assets)
    total_assets = cash_and_bank + receivables + equipment

    payables = coerce_decimal(settings.payables)
    loans_total = sum_decimals(item.amount for item in loans)
    total_profit = compute_profit(
        sum_decimals(item.amount for item in incomes),
        sum_decimals(item.amount for item in expenses),
    )
    taxes = estimate_tax(total_profit, settings.tax_rate, settings.tax_enabled)
    total_liabilities = payables + loans_total + taxes

    owners_equity = total_assets - total_liabilities
    owner_capital = coerce_decimal(settings.owner_capital)
    retained_profit = owners_equity - owner_capital
    is_balanced = (
        abs(total_assets - (total_liabilities + owners_equity))
        < BALANCE_EPSILON
    )

    return BalanceSheet(
        currency=settings.currency,
        as_of=as_of,
        assets=BalanceSheetAssets(
            opening_cash=opening_cash,
            cash_and_bank=cash_and_bank,
            receivables=receivables,
            equipment=equipment,
            total=total_assets,
        ),
        liabilities=BalanceSheetLiabilities(
            payables=payables,
            loans=loans_total,
            taxes=taxes,
            total=total_liabilities,
        ),
        owners_equity=owners_equity,
        owner_capital=owner_capital,
        retained_profit=retained_profit,
        total_profit=total_profit,
        is_balanced=is_balanced,
    )


__all__ = ["compose_balance_sheet"]
