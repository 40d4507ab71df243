"""Filesystem adapter for reading ledger files."""

from pathlib import Path

from src.domain.errors import LedgerFileNotFoundError, LedgerSourceError
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class FileLedgerSource:
    """Read ledger text from the local filesystem."""

    def __init__(
        self,
        settings: LedgerSettings | None = None,
        logger=None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the source.

        Args:
            settings: Settings providing the default ledger path.
            logger: Optional logger compatible with logging.Logger-like API.
            encoding: Text encoding of ledger files.
        """
        self._settings = settings or LedgerSettings()
        self._logger = logger or get_app_logger()
        self._encoding = encoding

    def resolve_path(self, path: Path | str | None = None) -> Path:
        """Return the explicit path or the configured default.

        Raises:
            LedgerSourceError: If neither is available.
        """
        if path is not None:
            return Path(path).expanduser()
        if self._settings.ledger_file is None:
            raise LedgerSourceError(
                "No ledger file given. Pass --file or set LEDGER_FILE."
            )
        return self._settings.ledger_file

    def read_text(self, path: Path | str | None = None) -> str:
        """Read the whole ledger file.

        Args:
            path: Explicit ledger path; None uses the configured default.

        Returns:
            str: File contents.

        Raises:
            LedgerFileNotFoundError: If the file does not exist.
            LedgerSourceError: If the file cannot be read or decoded.
        """
        resolved = self.resolve_path(path)
        try:
            contents = resolved.read_text(encoding=self._encoding)
        except FileNotFoundError as exc:
            raise LedgerFileNotFoundError(
                f"Ledger file not found: {resolved}"
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise LedgerSourceError(
                f"Cannot read ledger file {resolved}: {exc}"
            ) from exc
        self._logger.info(
            f"Read {len(contents)} characters from ledger {resolved}"
        )
        return contents


__all__ = ["FileLedgerSource"]
