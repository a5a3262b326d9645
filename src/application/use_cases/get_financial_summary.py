"""Use case to compute the dashboard summary of a tenant."""

from datetime import timezone, tzinfo

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.context import load_snapshot, resolve_today
from src.domain.models.finance import FinancialSummary
from src.domain.services.finance import compute_financial_summary
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute balances, period profit, tax, and receivables."""

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
            tz: Time zone used for month and year boundaries.
        """
        self._ledger_repository = ledger_repository
        self._clock = clock
        self._logger = logger or get_app_logger()
        self._tz = tz

    def execute(self, tenant_id: str) -> FinancialSummary:
        """Return the financial summary of a tenant.

        Args:
            tenant_id: Tenant whose ledger is summarized.

        Returns:
            FinancialSummary: Balances, period totals, and counts.
        """
        snapshot = load_snapshot(
            self._ledger_repository,
            tenant_id,
            self._logger,
        )
        today = resolve_today(self._clock, self._tz)
        summary = compute_financial_summary(
            snapshot,
            today,
            tz=self._tz,
            logger=self._logger,
        )
        self._logger.info(
            f"Summary computed for tenant {tenant_id}: "
            f"cash={summary.cash_in_hand}, bank={summary.bank_balance}, "
            f"pending={summary.pending_payments}"
        )
        return summary


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
