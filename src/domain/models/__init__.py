"""Domain models package."""

from .amounts import Amount, sum_amounts
from .journal import (
    Budget,
    CommodityDeclaration,
    Header,
    Include,
    Journal,
    Posting,
    PriceObservation,
    PriceTable,
    Transaction,
)
from .parsing import (
    DiagnosticKind,
    DiagnosticsMode,
    ParseDiagnostic,
    ParseResult,
)
from .reports import Period, PostingEntry, ReportKey, ReportTable
from .tokens import (
    BudgetHeader,
    EmptyLine,
    PostingLine,
    PriceLine,
    Token,
    TransactionHeader,
    Unrecognized,
)

__all__ = [
    "Amount",
    "sum_amounts",
    "Budget",
    "CommodityDeclaration",
    "Header",
    "Include",
    "Journal",
    "Posting",
    "PriceObservation",
    "PriceTable",
    "Transaction",
    "DiagnosticKind",
    "DiagnosticsMode",
    "ParseDiagnostic",
    "ParseResult",
    "Period",
    "PostingEntry",
    "ReportKey",
    "ReportTable",
    "BudgetHeader",
    "EmptyLine",
    "PostingLine",
    "PriceLine",
    "Token",
    "TransactionHeader",
    "Unrecognized",
]
