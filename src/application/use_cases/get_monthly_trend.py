"""Use case to compute monthly income and expense trends."""

from datetime import timezone, tzinfo

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.context import load_snapshot
from src.domain.models.finance import MonthlyTrendPoint
from src.domain.services.reports import build_monthly_trend
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyTrendUseCase:
    """Return income, expenses, and profit per month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._tz = tz

    def execute(self, tenant_id: str) -> list[MonthlyTrendPoint]:
        snapshot = load_snapshot(
            self._ledger_repository,
            tenant_id,
            self._logger,
        )
        points = build_monthly_trend(snapshot, self._tz)
        self._logger.info(
            f"Monthly trend computed for tenant {tenant_id}: "
            f"{len(points)} months"
        )
        return points


__all__ = ["GetMonthlyTrendUseCase", "MonthlyTrendPoint"]
