"""Tests for the LoadLedgerUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

from src.application.use_cases.load_ledger import LoadLedgerUseCase


def test_execute_reads_source_and_parses() -> None:
    """The source text is handed to the parser."""
    source = MagicMock()
    source.read_text.return_value = "2021/01/01 x\n  a 1 EUR\n"
    parser = MagicMock()
    parser.execute.return_value = "parsed"

    use_case = LoadLedgerUseCase(
        ledger_source=source,
        parser=parser,
        logger=MagicMock(),
    )
    result = use_case.execute(Path("main.ledger"))

    assert result == "parsed"
    source.read_text.assert_called_once_with(Path("main.ledger"))
    parser.execute.assert_called_once_with("2021/01/01 x\n  a 1 EUR\n")


def test_execute_builds_default_parser() -> None:
    """Without an explicit parser the default one is used."""
    source = MagicMock()
    source.read_text.return_value = "2021/01/01 x\n  a 1 EUR\n"

    result = LoadLedgerUseCase(
        ledger_source=source,
        logger=MagicMock(),
    ).execute()

    assert len(result.journal.transactions) == 1
    source.read_text.assert_called_once_with(None)
