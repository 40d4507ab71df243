"""Application use cases package."""

from .get_balance_report import GetBalanceReportUseCase
from .get_budget_report import GetBudgetReportUseCase
from .list_accounts import ListAccountsUseCase
from .load_ledger import LoadLedgerUseCase
from .parse_ledger import ParseLedgerUseCase, ParseResult

__all__ = [
    "GetBalanceReportUseCase",
    "GetBudgetReportUseCase",
    "ListAccountsUseCase",
    "LoadLedgerUseCase",
    "ParseLedgerUseCase",
    "ParseResult",
]
