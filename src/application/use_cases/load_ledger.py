"""Use case to read a ledger from its source and parse it."""

from pathlib import Path

from src.application.ports.ledger_source import LedgerSourcePort
from src.application.use_cases.parse_ledger import ParseLedgerUseCase
from src.domain.models import ParseResult
from src.infrastructure.logging.logger import get_app_logger


class LoadLedgerUseCase:
    """Read ledger text through a source port and parse it."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        parser: ParseLedgerUseCase | None = None,
        logger=None,
    ) -> None:
        self._ledger_source = ledger_source
        self._logger = logger or get_app_logger()
        self._parser = parser or ParseLedgerUseCase(logger=self._logger)

    def execute(self, path: Path | str | None = None) -> ParseResult:
        """Return the parsed ledger found at ``path`` or the default."""
        contents = self._ledger_source.read_text(path)
        return self._parser.execute(contents)


__all__ = ["LoadLedgerUseCase"]
