"""Helpers for Decimal parsing."""

from decimal import Decimal, InvalidOperation


def parse_decimal(raw: str) -> Decimal | None:
    """Parse a decimal literal without ever raising.

    Args:
        raw: Literal text taken from a ledger line.

    Returns:
        Decimal | None: Parsed value, or None for garbage and non-finite
        literals such as ``NaN`` or ``Infinity``.
    """
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


__all__ = ["parse_decimal"]
