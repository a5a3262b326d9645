"""Clock adapters."""

from datetime import datetime, timezone, tzinfo

from src.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the system time in a fixed time zone."""

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


__all__ = ["SystemClock"]
