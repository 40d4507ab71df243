"""Pytest configuration for test isolation.

Settings look for a default ledger under ``<project root>/data`` and
loggers write under ``<project root>/logs``; both roots are redirected to a
per-test temporary directory. The app and usage logger singletons are
replaced by mocks so tests never emit log files or console output.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True)
def _isolate_project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point project-root lookups at the test's temporary directory."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.delenv("LEDGER_FILE", raising=False)
    monkeypatch.delenv("LEDGER_DIAGNOSTICS", raising=False)


@pytest.fixture(autouse=True)
def _mock_logger_singletons(monkeypatch: pytest.MonkeyPatch):
    """Make get_app_logger and get_usage_logger return mocks."""
    monkeypatch.setattr(logger_module.AppLogger, "_instance", MagicMock())
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", MagicMock())


@pytest.fixture
def sample_ledger() -> str:
    """Small ledger covering headers, prices, budgets and transactions."""
    return "\n".join(
        [
            "include other.ledger",
            "commodity 1.000,00 EUR",
            "P 2021/01/01 STOCK 1.50 EUR",
            "",
            "~monthly",
            "  expenses:groceries 100.00 EUR",
            "  assets:checking -100.00 EUR",
            "",
            "2021/01/01 Buy an apple",
            "  expenses:groceries 0.45 EUR",
            "  assets:checking -0.45 EUR",
            "",
            "2021/01/15 Buy a lemon",
            "  expenses:lemons 0.30 EUR",
            "  assets:checking -0.30 EUR",
            "",
            "2021/02/01 Buy another apple",
            "  expenses:groceries 0.45 EUR",
            "  assets:checking -0.45 EUR",
            "",
            "2021/02/03 Buy some stock",
            "  assets:stocks 100.00 STOCK @@ 150 EUR",
            "  assets:checking -150 EUR",
        ]
    )
