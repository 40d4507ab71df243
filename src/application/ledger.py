"""Public entry points of the ledger core.

Thin functional wrappers over the use cases for callers that only need
plain data or pre-rendered text.
"""

from src.application.use_cases import (
    GetBalanceReportUseCase,
    GetBudgetReportUseCase,
    ListAccountsUseCase,
    ParseLedgerUseCase,
)
from src.domain.models import DiagnosticsMode, Journal


def parse(
    file_contents: str,
    diagnostics: DiagnosticsMode = DiagnosticsMode.WARN,
    logger=None,
) -> Journal:
    """Parse ledger text into a journal."""
    use_case = ParseLedgerUseCase(logger=logger, diagnostics=diagnostics)
    return use_case.execute(file_contents).journal


def list_accounts(journal: Journal, logger=None) -> list[str]:
    """Return the sorted accounts referenced by transactions."""
    return ListAccountsUseCase(logger=logger).execute(journal)


def balance_report(
    journal: Journal,
    depth: int | None = None,
    with_totals: bool = False,
    logger=None,
) -> str:
    """Return the monthly balance table as text."""
    return GetBalanceReportUseCase(logger=logger).execute(
        journal,
        depth=depth,
        with_totals=with_totals,
    )


def budget_report(journal: Journal, logger=None) -> str:
    """Return the budget table as text."""
    return GetBudgetReportUseCase(logger=logger).execute(journal)


__all__ = ["parse", "list_accounts", "balance_report", "budget_report"]
