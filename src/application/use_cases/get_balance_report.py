"""Use case to compute the monthly balance report."""

from src.domain.models import Journal, ReportTable
from src.domain.services import balance_table, render_table
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceReportUseCase:
    """Pivot transaction postings by account and calendar month."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def build_table(
        self,
        journal: Journal,
        depth: int | None = None,
        with_totals: bool = False,
    ) -> ReportTable:
        """Return the report cells without rendering them.

        Args:
            journal: Parsed journal.
            depth: Optional number of account segments to roll up to.
            with_totals: Append a total column per account.

        Returns:
            ReportTable: Accounts as rows, months as columns.
        """
        table = balance_table(journal, depth=depth, with_totals=with_totals)
        filled = sum(1 for row in table.cells for cell in row if cell)
        self._logger.info(
            f"Balance report has {len(table.row_headers)} accounts, "
            f"{len(table.column_headers)} columns and {filled} filled cells"
        )
        return table

    def execute(
        self,
        journal: Journal,
        depth: int | None = None,
        with_totals: bool = False,
    ) -> str:
        """Return the balance report rendered as aligned text.

        Args:
            journal: Parsed journal.
            depth: Optional number of account segments to roll up to.
            with_totals: Append a total column per account.

        Returns:
            str: Rendered table; months without activity are blank.
        """
        table = self.build_table(journal, depth=depth, with_totals=with_totals)
        return render_table(
            table.row_headers,
            table.column_headers,
            table.cells,
        )


__all__ = ["GetBalanceReportUseCase"]
