"""Descriptive helpers for recurring incomes and expenses.

Recurring records are single stored rows carrying a frequency and an
optional end date. Nothing here creates future occurrences.
"""

from collections.abc import Iterable
from datetime import date, timezone, tzinfo
from typing import TypeVar

from src.domain.services.periods import record_day

T = TypeVar("T")


def is_recurrence_active(
    record,
    on: date,
    tz: tzinfo = timezone.utc,
) -> bool:
    """Return True when a recurring record has not ended by ``on``.

    Args:
        record: Income or expense with recurrence fields.
        on: Day to evaluate.
        tz: Tenant time zone.

    Returns:
        bool: False for non-recurring records.
    """
    if not getattr(record, "is_recurring", False):
        return False
    raw_end = getattr(record, "recurring_end_date", None)
    if raw_end is None:
        return True
    end_day = record_day(raw_end, tz)
    if end_day is None:
        return True
    return end_day >= on


def recurring_records(
    records: Iterable[T],
    on: date,
    tz: tzinfo = timezone.utc,
) -> list[T]:
    """Return the records whose recurrence is still active on ``on``."""
    return [
        record for record in records if is_recurrence_active(record, on, tz)
    ]


__all__ = ["is_recurrence_active", "recurring_records"]
