"""Use case to summarize budget targets."""

from src.domain.models import Journal, ReportTable
from src.domain.services import budget_table, render_table
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetReportUseCase:
    """Aggregate budget postings by account and budget period label."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def build_table(self, journal: Journal) -> ReportTable:
        """Return budget cells with one column per period label."""
        table = budget_table(journal)
        self._logger.info(
            f"Budget report has {len(table.row_headers)} accounts over "
            f"{len(table.column_headers)} budget periods"
        )
        return table

    def execute(self, journal: Journal) -> str:
        """Return the budget report rendered as aligned text."""
        table = self.build_table(journal)
        return render_table(
            table.row_headers,
            table.column_headers,
            table.cells,
        )


__all__ = ["GetBudgetReportUseCase"]
