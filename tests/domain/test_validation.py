"""Tests for logging-only validation helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.ledger import Transfer
from src.domain.services.validation import (
    validate_balance_sign,
    validate_transfers,
    validate_unclassified_count,
)


def test_validate_balance_sign_warns_on_negative() -> None:
    logger = MagicMock()

    validate_balance_sign("bank_balance", Decimal("-1"), logger)
    validate_balance_sign("cash_in_hand", Decimal("0"), logger)

    logger.warning.assert_called_once()
    assert "bank_balance" in logger.warning.call_args.args[0]


def test_validate_transfers_flags_odd_accounts() -> None:
    logger = MagicMock()
    transfers = [
        Transfer("t1", "cash", "bank", Decimal("10")),
        Transfer("t2", "bank", "bank", Decimal("10")),
        Transfer("t3", "wallet", "cash", Decimal("10")),
    ]

    validate_transfers(transfers, logger)

    messages = [call.args[0] for call in logger.warning.call_args_list]
    assert len(messages) == 2
    assert "t2" in messages[0]
    assert "t3" in messages[1]


def test_validate_unclassified_count_is_silent_for_zero() -> None:
    logger = MagicMock()

    validate_unclassified_count(0, logger)
    validate_unclassified_count(3, logger)

    logger.warning.assert_called_once()
    assert "3 records" in logger.warning.call_args.args[0]
