"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from src.domain.models import DiagnosticsMode
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

LEDGER_FILE_PATTERNS = ("*.ledger", "*.journal")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for locating and parsing the ledger file.

    Attributes:
        ledger_file: Default ledger path when none is given explicitly.
        diagnostics: How skipped lines are surfaced.
    """

    ledger_file: Optional[Path] = None
    diagnostics: DiagnosticsMode = DiagnosticsMode.WARN

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_file = os.getenv("LEDGER_FILE")
        if raw_file:
            ledger_file = cls._normalize_path(raw_file, logger=logger)
        else:
            ledger_file = cls._default_ledger_file(logger=logger)
        diagnostics = cls._parse_diagnostics(
            os.getenv("LEDGER_DIAGNOSTICS"),
            logger=logger,
        )
        return cls(ledger_file=ledger_file, diagnostics=diagnostics)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Expand and resolve a ledger file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger file does not exist at {path}")
        return path

    @staticmethod
    def _default_ledger_file(logger) -> Path | None:
        """Return a default ledger path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single ledger is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(
            path
            for pattern in LEDGER_FILE_PATTERNS
            for path in data_dir.glob(pattern)
        )
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple ledger files found in data/. "
                "Set LEDGER_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_diagnostics(raw_mode: str | None, logger) -> DiagnosticsMode:
        """Parse the diagnostics mode, defaulting to warn.

        Args:
            raw_mode: Raw mode value from the environment.
            logger: Logger used for warnings.

        Returns:
            DiagnosticsMode: Parsed mode.
        """
        if not raw_mode:
            return DiagnosticsMode.WARN
        cleaned = raw_mode.strip().lower()
        try:
            return DiagnosticsMode(cleaned)
        except ValueError:
            logger.warning(
                f"Unknown LEDGER_DIAGNOSTICS value '{raw_mode}'. "
                "Falling back to 'warn'."
            )
            return DiagnosticsMode.WARN


__all__ = ["LedgerSettings"]
