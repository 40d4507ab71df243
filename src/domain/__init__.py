"""Domain package for ledger parsing rules and reporting."""

from .errors import (
    LedgerError,
    LedgerFileNotFoundError,
    LedgerParseError,
    LedgerSourceError,
)
from .models import (
    Amount,
    Budget,
    DiagnosticsMode,
    Journal,
    ParseDiagnostic,
    ParseResult,
    Period,
    Posting,
    PriceObservation,
    Transaction,
)
from .policies import account_segments, truncate_account
from .services import (
    accounts,
    aggregate,
    build_report,
    classify,
    parse_tokens,
    period_of,
    render_amount,
    render_table,
    tokenize,
)

__all__ = [
    "LedgerError",
    "LedgerFileNotFoundError",
    "LedgerParseError",
    "LedgerSourceError",
    "Amount",
    "Budget",
    "DiagnosticsMode",
    "Journal",
    "ParseDiagnostic",
    "ParseResult",
    "Period",
    "Posting",
    "PriceObservation",
    "Transaction",
    "account_segments",
    "truncate_account",
    "accounts",
    "aggregate",
    "build_report",
    "classify",
    "parse_tokens",
    "period_of",
    "render_amount",
    "render_table",
    "tokenize",
]
