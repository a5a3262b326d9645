"""Application port for the current time."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port returning the current instant."""

    def now(self) -> datetime:
        """Return the current time as an aware datetime."""


__all__ = ["ClockPort"]
