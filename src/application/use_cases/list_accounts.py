"""Use case to list the accounts used by transactions."""

from src.domain.models import Journal
from src.domain.services import accounts
from src.infrastructure.logging.logger import get_app_logger


class ListAccountsUseCase:
    """List accounts referenced by transaction postings."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, journal: Journal) -> list[str]:
        """Return the sorted, duplicate-free account paths.

        Args:
            journal: Parsed journal.

        Returns:
            list[str]: Account paths; budget-only accounts are excluded.
        """
        names = accounts(journal)
        self._logger.info(f"Listed {len(names)} accounts")
        return names


__all__ = ["ListAccountsUseCase"]
