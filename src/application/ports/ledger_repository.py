"""Application port for tenant ledger data access."""

from typing import Protocol

from src.domain.models.ledger import LedgerSnapshot


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to a tenant's ledger records."""

    def fetch_snapshot(self, tenant_id: str) -> LedgerSnapshot:
        """Return every ledger record and the settings of a tenant.

        Raises:
            DataUnavailableError: When the backing store cannot be read.
        """


__all__ = ["LedgerRepositoryPort"]
