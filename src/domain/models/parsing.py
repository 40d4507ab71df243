"""Domain models describing the outcome of parsing a ledger."""

from dataclasses import dataclass
from enum import Enum

from src.domain.models.journal import Journal


class DiagnosticKind(str, Enum):
    """Reason a line was left out of the journal."""

    UNRECOGNIZED = "unrecognized"
    ORPHAN_POSTING = "orphan_posting"


class DiagnosticsMode(str, Enum):
    """How skipped lines are surfaced to the caller."""

    SILENT = "silent"
    WARN = "warn"
    STRICT = "strict"


@dataclass(frozen=True)
class ParseDiagnostic:
    """A skipped input line.

    Attributes:
        line_number: 1-based position of the line in the input.
        kind: Why the line was skipped.
        line: Raw line content.
    """

    line_number: int
    kind: DiagnosticKind
    line: str

    def describe(self) -> str:
        """Return a single-line human readable description."""
        if self.kind is DiagnosticKind.ORPHAN_POSTING:
            reason = "posting outside of a transaction or budget"
        else:
            reason = "unrecognized line"
        return f"line {self.line_number}: {reason}: {self.line!r}"


@dataclass(frozen=True)
class ParseResult:
    """Journal plus the lines that did not make it into it."""

    journal: Journal
    diagnostics: tuple[ParseDiagnostic, ...] = ()


__all__ = [
    "DiagnosticKind",
    "DiagnosticsMode",
    "ParseDiagnostic",
    "ParseResult",
]
