"""Tests for the ParseLedgerUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.parse_ledger import ParseLedgerUseCase
from src.domain.errors import LedgerParseError
from src.domain.models import DiagnosticsMode


def test_execute_parses_sample_ledger(sample_ledger: str) -> None:
    """The whole pipeline builds headers, prices, budgets, transactions."""
    logger = MagicMock()

    result = ParseLedgerUseCase(logger=logger).execute(sample_ledger)

    journal = result.journal
    assert len(journal.headers) == 2
    assert len(journal.prices_for("STOCK")) == 1
    assert [b.period for b in journal.budgets] == ["monthly"]
    assert [t.description for t in journal.transactions] == [
        "Buy an apple",
        "Buy a lemon",
        "Buy another apple",
        "Buy some stock",
    ]
    assert result.diagnostics == ()
    logger.info.assert_called_once()
    logger.warning.assert_not_called()


def test_warn_mode_logs_each_skipped_line() -> None:
    """Diagnostics are logged as warnings with their line number."""
    logger = MagicMock()

    result = ParseLedgerUseCase(logger=logger).execute(
        "2021/01/01 x\n  a 1 EUR\nhuh?\n"
    )

    assert len(result.diagnostics) == 1
    message = logger.warning.call_args.args[0]
    assert "line 3" in message
    assert "huh?" in message


def test_silent_mode_returns_diagnostics_without_logging() -> None:
    """Silent mode keeps the omission quiet but observable."""
    logger = MagicMock()

    result = ParseLedgerUseCase(
        logger=logger,
        diagnostics=DiagnosticsMode.SILENT,
    ).execute("huh?")

    assert len(result.diagnostics) == 1
    logger.warning.assert_not_called()


def test_strict_mode_raises() -> None:
    """Strict mode turns the first skipped line into an error."""
    use_case = ParseLedgerUseCase(
        logger=MagicMock(),
        diagnostics="strict",
    )

    with pytest.raises(LedgerParseError):
        use_case.execute("2021/01/01 x\n\n  orphan 1 EUR")


def test_only_newlines_separate_ledger_lines() -> None:
    """Form feeds and Unicode separators stay inside a description."""
    result = ParseLedgerUseCase(logger=MagicMock()).execute(
        "2021/01/01 page\x0cbreak   here\r\n"
        "  a 1 EUR\r\n"
        "  b -1 EUR\r\n"
    )

    (transaction,) = result.journal.transactions
    assert transaction.description == "page\x0cbreak   here"
    assert [p.account for p in transaction.postings] == ["a", "b"]
    assert result.diagnostics == ()
