"""Shared helpers for ledger use cases."""

from datetime import date, tzinfo

from src.application.errors import DataUnavailableError
from src.application.ports.clock import ClockPort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import LedgerSnapshot
from src.domain.services.periods import PeriodWindow, resolve_named_period


def resolve_today(clock: ClockPort, tz: tzinfo) -> date:
    """Return the clock's current day in the tenant time zone."""
    return clock.now().astimezone(tz).date()


def load_snapshot(
    repository: LedgerRepositoryPort,
    tenant_id: str,
    logger,
) -> LedgerSnapshot:
    """Fetch a tenant snapshot, logging fetch failures before re-raising.

    Args:
        repository: Port providing ledger records.
        tenant_id: Tenant whose records are loaded.
        logger: Logger compatible with logging.Logger-like API.

    Returns:
        LedgerSnapshot: Records and settings of the tenant.

    Raises:
        DataUnavailableError: When the repository cannot be read.
    """
    try:
        snapshot = repository.fetch_snapshot(tenant_id)
    except DataUnavailableError as exc:
        logger.error(str(exc))
        raise
    logger.info(
        f"Loaded ledger for tenant {tenant_id}: "
        f"incomes={len(snapshot.incomes)}, expenses={len(snapshot.expenses)}, "
        f"invoices={len(snapshot.invoices)}, "
        f"transfers={len(snapshot.transfers)}"
    )
    return snapshot


def resolve_window(
    clock: ClockPort,
    tz: tzinfo,
    period: str,
    start: date | None = None,
    end: date | None = None,
) -> PeriodWindow:
    """Resolve a named report period against the clock.

    Args:
        clock: Port providing the current time.
        tz: Tenant time zone.
        period: ``this_month``, ``last_month``, ``this_year`` or ``custom``.
        start: First day of a custom period.
        end: Last day of a custom period.

    Returns:
        PeriodWindow: Inclusive window.

    Raises:
        ValueError: For an unknown period or an incomplete custom range.
    """
    window = resolve_named_period(period, resolve_today(clock, tz), start, end)
    if window is None:
        raise ValueError(
            f"Unsupported report period: {period}. Expected this_month, "
            "last_month, this_year, or custom with start and end dates."
        )
    return window


__all__ = ["resolve_today", "load_snapshot", "resolve_window"]
