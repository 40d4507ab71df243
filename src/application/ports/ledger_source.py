"""Ledger source ports for the ledger core.

This module defines the application-layer protocol for obtaining ledger
text. Infrastructure implementations decide where the text comes from.
"""

from pathlib import Path
from typing import Protocol


class LedgerSourcePort(Protocol):
    """Port exposing the raw text of a ledger.

    Use cases depend on this protocol instead of reading files directly.
    """

    def read_text(self, path: Path | None = None) -> str:
        """Return the ledger contents.

        Args:
            path: Explicit ledger location; None selects the configured
                default.

        Returns:
            str: Full ledger text.

        Raises:
            LedgerSourceError: If the ledger cannot be read.
        """


__all__ = ["LedgerSourcePort"]
