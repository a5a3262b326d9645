"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "ClockPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
]
