"""Date windows used to narrow ledger records.

Every record date is resolved to a calendar day in the tenant time zone
before it is compared. Naive datetimes are read as UTC. Records whose date
is missing or unparseable fall outside every bounded window.
"""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PeriodWindow:
    """Calendar window with optional bounds.

    Attributes:
        start: First included day, or None for no lower bound.
        end: Last included day (or first excluded day when
            ``end_exclusive``), or None for no upper bound.
        end_exclusive: Whether ``end`` itself is excluded.
    """

    start: date | None = None
    end: date | None = None
    end_exclusive: bool = False

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None

    def contains(self, day: date | None) -> bool:
        """Return True when ``day`` falls inside the window."""
        if day is None:
            return not self.is_bounded
        if self.start is not None and day < self.start:
            return False
        if self.end is not None:
            if self.end_exclusive and day >= self.end:
                return False
            if not self.end_exclusive and day > self.end:
                return False
        return True


def record_day(value, tz: tzinfo = timezone.utc) -> date | None:
    """Resolve a stored record date to a calendar day in ``tz``.

    Args:
        value: date, datetime, ISO 8601 string, or None.
        tz: Tenant time zone.

    Returns:
        date | None: Calendar day, or None when the value is unusable.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if len(text) == 10:
            try:
                return date.fromisoformat(text)
            except ValueError:
                return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(tz).date()
    if isinstance(value, date):
        return value
    return None


def month_window(today: date) -> PeriodWindow:
    """Return the whole calendar month containing ``today``."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return PeriodWindow(
        start=date(today.year, today.month, 1),
        end=date(today.year, today.month, last_day),
    )


def year_window(today: date) -> PeriodWindow:
    """Return the whole calendar year containing ``today``."""
    return PeriodWindow(
        start=date(today.year, 1, 1),
        end=date(today.year, 12, 31),
    )


def as_of_window(cutoff: date) -> PeriodWindow:
    """Return the window of days up to and including ``cutoff``."""
    return PeriodWindow(end=cutoff)


def before_window(cutoff: date) -> PeriodWindow:
    """Return the window of days strictly before ``cutoff``."""
    return PeriodWindow(end=cutoff, end_exclusive=True)


def range_window(start: date, end: date) -> PeriodWindow:
    """Return the inclusive window from ``start`` to ``end``."""
    return PeriodWindow(start=start, end=end)


def resolve_named_period(
    option: str,
    today: date,
    start: date | None = None,
    end: date | None = None,
) -> PeriodWindow | None:
    """Translate a report period option into a window.

    Args:
        option: ``this_month``, ``last_month``, ``this_year`` or ``custom``.
        today: Current day in the tenant time zone.
        start: First day for ``custom``.
        end: Last day for ``custom``.

    Returns:
        PeriodWindow | None: Window, or None for an unknown option or an
        incomplete custom range.
    """
    if option == "this_month":
        return month_window(today)
    if option == "last_month":
        first_of_month = date(today.year, today.month, 1)
        return month_window(first_of_month - timedelta(days=1))
    if option == "this_year":
        return year_window(today)
    if option == "custom" and start and end:
        return range_window(start, end)
    return None


def filter_by_window(
    records: Iterable[T],
    window: PeriodWindow | None,
    tz: tzinfo = timezone.utc,
    date_field: str = "date",
) -> list[T]:
    """Return the records whose date falls inside ``window``.

    Args:
        records: Date-bearing records.
        window: Window to apply; None keeps every record.
        tz: Tenant time zone used to resolve record dates.
        date_field: Attribute holding the record date.

    Returns:
        list: Matching records in their original order.
    """
    if window is None:
        return list(records)
    return [
        record
        for record in records
        if window.contains(record_day(getattr(record, date_field, None), tz))
    ]


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` key for ``day``."""
    return f"{day.year:04d}-{day.month:02d}"


__all__ = [
    "PeriodWindow",
    "record_day",
    "month_window",
    "year_window",
    "as_of_window",
    "before_window",
    "range_window",
    "resolve_named_period",
    "filter_by_window",
    "month_key",
]
