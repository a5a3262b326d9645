"""Use case to build every period report from a single ledger read."""

from datetime import date, timezone, tzinfo

from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.context import load_snapshot, resolve_window
from src.domain.models.finance import PeriodReports
from src.domain.services.reports import (
    build_cashflow_statement,
    build_profit_and_loss,
    build_tax_report,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodReportsUseCase:
    """Build profit and loss, tax, and cash flow for the same period.

    The snapshot is fetched once so the three reports always agree with
    each other.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        clock: ClockPort,
        logger=None,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._clock = clock
        self._logger = logger or get_app_logger()
        self._tz = tz

    def execute(
        self,
        tenant_id: str,
        period: str = "this_month",
        start: date | None = None,
        end: date | None = None,
    ) -> PeriodReports:
        """Return the reports of a tenant for a named period.

        Args:
            tenant_id: Tenant whose ledger is used.
            period: Named report period.
            start: First day of a custom period.
            end: Last day of a custom period.

        Returns:
            PeriodReports: Profit and loss, tax (None when disabled), and
            cash flow for the resolved window.
        """
        window = resolve_window(self._clock, self._tz, period, start, end)
        snapshot = load_snapshot(
            self._ledger_repository,
            tenant_id,
            self._logger,
        )
        reports = PeriodReports(
            profit_and_loss=build_profit_and_loss(snapshot, window, self._tz),
            tax_report=build_tax_report(snapshot, window, self._tz),
            cashflow=build_cashflow_statement(snapshot, window, self._tz),
        )
        self._logger.info(
            f"Period reports computed for tenant {tenant_id} "
            f"({window.start} to {window.end}): "
            f"net={reports.profit_and_loss.net_profit}, "
            f"closing={reports.cashflow.closing_balance}"
        )
        return reports


__all__ = ["GetPeriodReportsUseCase", "PeriodReports"]
