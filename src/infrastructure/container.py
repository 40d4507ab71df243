"""Composition root for wiring infrastructure adapters."""

from src.application.ports.ledger_source import LedgerSourcePort
from src.infrastructure.ledger_file_source import FileLedgerSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_ledger_source(
    settings: LedgerSettings | None = None,
) -> LedgerSourcePort:
    """Return the configured ledger source adapter."""
    resolved_settings = settings or build_settings()
    return FileLedgerSource(resolved_settings, logger=get_app_logger())


__all__ = ["build_settings", "build_ledger_source"]
