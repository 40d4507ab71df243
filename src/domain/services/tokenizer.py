"""Tokenizer mapping every ledger line to exactly one token."""

from collections.abc import Iterable

from src.domain.models import Token
from src.domain.services.line_classifier import classify


def tokenize(lines: Iterable[str]) -> list[Token]:
    """Classify lines in order, one token per line.

    Args:
        lines: Ledger lines in file order.

    Returns:
        list[Token]: Tokens aligned with the input lines.
    """
    return [classify(line) for line in lines]


__all__ = ["tokenize"]
