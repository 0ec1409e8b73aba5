class LedgerError(Exception):
    """Base class for errors raised by the ledger service."""


class ValidationError(LedgerError):
    """Required input is missing. The client is at fault."""


class NotFoundError(LedgerError):
    """No transaction exists for the given id."""


class StorageError(LedgerError):
    """The database could not be opened, read or written."""
