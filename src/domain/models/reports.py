"""Domain models for report aggregation."""

from dataclasses import dataclass
from datetime import date

from src.domain.models.journal import Posting


@dataclass(frozen=True, order=True)
class Period:
    """Calendar month used to bucket postings."""

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}"


@dataclass(frozen=True)
class PostingEntry:
    """Posting tagged with the date and description of its transaction."""

    date: date
    description: str
    posting: Posting


ReportKey = tuple[str, Period]


@dataclass(frozen=True)
class ReportTable:
    """Rendered-cell matrix ready for text or dataframe display.

    Attributes:
        row_headers: Row labels, usually account paths.
        column_headers: Column labels, usually periods.
        cells: Cell text per row; empty strings mark missing cells.
    """

    row_headers: tuple[str, ...]
    column_headers: tuple[str, ...]
    cells: tuple[tuple[str, ...], ...]

    def as_records(self, label: str = "Account") -> list[dict[str, str]]:
        """Return one dict per row, keyed by column header."""
        return [
            {label: row_header, **dict(zip(self.column_headers, row))}
            for row_header, row in zip(self.row_headers, self.cells)
        ]


__all__ = ["Period", "PostingEntry", "ReportKey", "ReportTable"]
