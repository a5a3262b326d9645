"""Errors raised across the application boundary."""


class LedgerError(RuntimeError):
    """Base error for ledger dashboard failures."""


class DataUnavailableError(LedgerError):
    """Raised when ledger data cannot be read from its store.

    Callers use it to tell a failed fetch apart from a tenant that simply
    has no records yet.
    """

    def __init__(self, tenant_id: str, reason: str) -> None:
        super().__init__(
            f"Ledger data unavailable for tenant {tenant_id}: {reason}"
        )
        self.tenant_id = tenant_id
        self.reason = reason


__all__ = ["LedgerError", "DataUnavailableError"]
