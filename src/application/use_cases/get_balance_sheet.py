"""Use case to compose a tenant balance sheet."""

from datetime import date, timezone, tzinfo

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.context import load_snapshot, resolve_today
from src.domain.models.finance import BalanceSheet
from src.domain.services.balance_sheet import compose_balance_sheet
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSheetUseCase:
    """Compose assets, liabilities, and equity as at a day."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        clock: ClockPort,
        logger=None,
        tz: tzinfo = timezone.utc,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing tenant ledger records.
            clock: Port providing the current time.
            logger: Optional logger compatible with logging.Logger-like API.
            tz: Time zone used to resolve record days.
        """
        self._ledger_repository = ledger_repository
        self._clock = clock
        self._logger = logger or get_app_logger()
        self._tz = tz

    def execute(
        self,
        tenant_id: str,
        as_of: date | None = None,
    ) -> BalanceSheet:
        """Return the balance sheet of a tenant.

        Args:
            tenant_id: Tenant whose ledger is used.
            as_of: Inclusive cutoff day; defaults to today.

        Returns:
            BalanceSheet: Statement with the identity check applied.
        """
        snapshot = load_snapshot(
            self._ledger_repository,
            tenant_id,
            self._logger,
        )
        cutoff = as_of or resolve_today(self._clock, self._tz)
        sheet = compose_balance_sheet(snapshot, cutoff, self._tz)
        if not sheet.is_balanced:
            self._logger.warning(
                f"Balance sheet for tenant {tenant_id} as at {cutoff} "
                f"does not balance: assets={sheet.assets.total}, "
                f"liabilities={sheet.liabilities.total}, "
                f"equity={sheet.owners_equity}"
            )
        self._logger.info(
            f"Balance sheet computed for tenant {tenant_id} as at {cutoff}: "
            f"assets={sheet.assets.total}, "
            f"liabilities={sheet.liabilities.total}"
        )
        return sheet


__all__ = ["GetBalanceSheetUseCase", "BalanceSheet"]
