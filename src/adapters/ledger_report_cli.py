"""CLI adapter printing a tenant's summary and balance sheet as JSON."""

from datetime import date
import json
import os

from src.application.errors import DataUnavailableError
from src.application.use_cases.get_balance_sheet import (
    GetBalanceSheetUseCase,
)
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.infrastructure.container import (
    build_clock,
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.serialization import to_jsonable


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print the financial summary and balance sheet of a tenant."""
    logger = get_app_logger()
    settings = build_settings()
    as_of = _parse_date(os.getenv("REPORT_AS_OF"), logger)

    repository = build_ledger_repository(settings=settings)
    clock = build_clock(settings)
    summary_use_case = GetFinancialSummaryUseCase(
        ledger_repository=repository,
        clock=clock,
        logger=logger,
        tz=settings.tz,
    )
    balance_sheet_use_case = GetBalanceSheetUseCase(
        ledger_repository=repository,
        clock=clock,
        logger=logger,
        tz=settings.tz,
    )
    try:
        summary = summary_use_case.execute(settings.tenant_id)
        balance_sheet = balance_sheet_use_case.execute(
            settings.tenant_id,
            as_of=as_of,
        )
    except DataUnavailableError as exc:
        logger.error(f"Report aborted: {exc}")
        return

    payload = {
        "tenant_id": settings.tenant_id,
        "summary": summary,
        "balance_sheet": balance_sheet,
    }
    print(json.dumps(to_jsonable(payload), indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
