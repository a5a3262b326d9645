"""Domain validation helpers.

These checks only log. Aggregates are still computed from the data as
stored, so an overdraft or an odd transfer stays visible in the figures.
"""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import TRANSFER_ACCOUNTS
from src.domain.models.ledger import Transfer


def validate_balance_sign(
    label: str,
    balance: Decimal,
    logger: Logger,
) -> None:
    """Warn when a cash or bank balance is negative.

    Args:
        label: Name of the balance (e.g. ``cash_in_hand``).
        balance: Computed balance.
        logger: Logger used for warnings.
    """
    if balance < 0:
        logger.warning(f"Negative balance for {label}: {balance}")


def validate_transfers(
    transfers: Iterable[Transfer],
    logger: Logger,
) -> None:
    """Warn about transfers that cannot move money between accounts.

    Args:
        transfers: Transfers of one tenant.
        logger: Logger used for warnings.
    """
    for transfer in transfers:
        if (
            transfer.from_account not in TRANSFER_ACCOUNTS
            or transfer.to_account not in TRANSFER_ACCOUNTS
        ):
            logger.warning(
                f"Transfer {transfer.id} uses unknown accounts "
                f"{transfer.from_account!r} -> {transfer.to_account!r}"
            )
        elif transfer.from_account == transfer.to_account:
            logger.warning(
                f"Transfer {transfer.id} has the same source and "
                f"destination account: {transfer.from_account}"
            )


def validate_unclassified_count(count: int, logger: Logger) -> None:
    """Warn when records were dropped for an unknown payment method."""
    if count:
        logger.warning(
            f"{count} records have an unrecognized payment method and are "
            "excluded from cash and bank balances"
        )


__all__ = [
    "validate_balance_sign",
    "validate_transfers",
    "validate_unclassified_count",
]
