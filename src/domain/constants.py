"""Domain constants for ledger parsing and reporting."""

LEDGER_DATE_FORMAT = "%Y/%m/%d"

AMOUNT_SEPARATOR = ", "

COLUMN_SEPARATOR = " | "

TOTAL_COLUMN_HEADER = "Total"


__all__ = [
    "LEDGER_DATE_FORMAT",
    "AMOUNT_SEPARATOR",
    "COLUMN_SEPARATOR",
    "TOTAL_COLUMN_HEADER",
]
