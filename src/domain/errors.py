"""Domain errors raised by the ledger core and its adapters."""

from src.domain.models.parsing import ParseDiagnostic


class LedgerError(Exception):
    """Base class for ledger errors surfaced to callers."""


class LedgerParseError(LedgerError):
    """Raised in strict mode when a line cannot be placed in the journal."""

    def __init__(self, diagnostic: ParseDiagnostic) -> None:
        super().__init__(diagnostic.describe())
        self.diagnostic = diagnostic


class LedgerSourceError(LedgerError):
    """Raised when the ledger text cannot be obtained."""


class LedgerFileNotFoundError(LedgerSourceError):
    """Raised when the ledger file does not exist."""


__all__ = [
    "LedgerError",
    "LedgerParseError",
    "LedgerSourceError",
    "LedgerFileNotFoundError",
]
