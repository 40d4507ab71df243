"""Use case to turn ledger text into a journal."""

from src.domain.models import DiagnosticsMode, ParseResult
from src.domain.services import parse_tokens, tokenize
from src.infrastructure.logging.logger import get_app_logger


class ParseLedgerUseCase:
    """Tokenize and parse ledger text, surfacing skipped lines."""

    def __init__(
        self,
        logger=None,
        diagnostics: DiagnosticsMode = DiagnosticsMode.WARN,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            diagnostics: How lines left out of the journal are surfaced.
        """
        self._logger = logger or get_app_logger()
        self._diagnostics = DiagnosticsMode(diagnostics)

    def execute(self, contents: str) -> ParseResult:
        """Return the journal and diagnostics for the ledger text.

        Args:
            contents: Full ledger text.

        Returns:
            ParseResult: Parsed journal with skipped-line diagnostics.

        Raises:
            LedgerParseError: In strict mode, on the first skipped line.
        """
        tokens = tokenize(contents.split("\n"))
        result = parse_tokens(
            tokens,
            strict=self._diagnostics is DiagnosticsMode.STRICT,
        )
        if self._diagnostics is DiagnosticsMode.WARN:
            for diagnostic in result.diagnostics:
                self._logger.warning(f"Skipped {diagnostic.describe()}")
        journal = result.journal
        self._logger.info(
            f"Parsed {len(tokens)} lines into "
            f"{len(journal.transactions)} transactions, "
            f"{len(journal.budgets)} budgets and "
            f"{sum(len(obs) for obs in journal.prices.values())} prices "
            f"({len(result.diagnostics)} lines skipped)"
        )
        return result


__all__ = ["ParseLedgerUseCase", "ParseResult"]
