"""Structural parser grouping tokens into a journal.

The parser is a one-token-lookahead state machine driven by a single loop.
A token that closes a budget or transaction is re-dispatched in the
``GENERAL`` state without being consumed.
"""

from collections.abc import Sequence
from datetime import date
from enum import Enum

from src.domain.errors import LedgerParseError
from src.domain.models import (
    Budget,
    BudgetHeader,
    CommodityDeclaration,
    DiagnosticKind,
    EmptyLine,
    Header,
    Include,
    Journal,
    ParseDiagnostic,
    ParseResult,
    Posting,
    PostingLine,
    PriceLine,
    PriceObservation,
    PriceTable,
    Token,
    Transaction,
    TransactionHeader,
    Unrecognized,
)


class ParserState(Enum):
    """Structural context of the parser."""

    GENERAL = "general"
    IN_BUDGET = "in_budget"
    IN_TRANSACTION = "in_transaction"


class _JournalAccumulator:
    """Mutable working state, frozen into a Journal by ``build``."""

    def __init__(self, strict: bool) -> None:
        self._strict = strict
        self.headers: list[Header] = []
        self.prices: dict[str, list[PriceObservation]] = {}
        self.budgets: list[Budget] = []
        self.transactions: list[Transaction] = []
        self.diagnostics: list[ParseDiagnostic] = []
        self._open_budget: str | None = None
        self._open_transaction: tuple[date, str] | None = None
        self._postings: list[Posting] = []

    def open_budget(self, period: str) -> None:
        self._open_budget = period
        self._postings = []

    def open_transaction(self, header: TransactionHeader) -> None:
        self._open_transaction = (header.date, header.description)
        self._postings = []

    def add_posting(self, posting: Posting) -> None:
        self._postings.append(posting)

    def close(self) -> None:
        """Flush the open budget or transaction, if any."""
        if self._open_budget is not None:
            self.budgets.append(
                Budget(
                    period=self._open_budget,
                    postings=tuple(self._postings),
                )
            )
        elif self._open_transaction is not None:
            posted_on, description = self._open_transaction
            self.transactions.append(
                Transaction(
                    date=posted_on,
                    description=description,
                    postings=tuple(self._postings),
                )
            )
        self._open_budget = None
        self._open_transaction = None
        self._postings = []

    def skip(self, line_number: int, kind: DiagnosticKind, line: str) -> None:
        diagnostic = ParseDiagnostic(
            line_number=line_number,
            kind=kind,
            line=line,
        )
        if self._strict:
            raise LedgerParseError(diagnostic)
        self.diagnostics.append(diagnostic)

    def build(self) -> ParseResult:
        journal = Journal(
            headers=tuple(self.headers),
            prices=PriceTable(self.prices),
            budgets=tuple(self.budgets),
            transactions=tuple(self.transactions),
        )
        return ParseResult(
            journal=journal,
            diagnostics=tuple(self.diagnostics),
        )


def _dispatch_general(
    acc: _JournalAccumulator,
    token: Token,
    line_number: int,
) -> ParserState:
    """Handle a token at top level and return the next state."""
    if isinstance(token, (Include, CommodityDeclaration)):
        acc.headers.append(token)
    elif isinstance(token, PriceLine):
        observation = token.observation
        acc.prices.setdefault(observation.commodity, []).append(observation)
    elif isinstance(token, BudgetHeader):
        acc.open_budget(token.period)
        return ParserState.IN_BUDGET
    elif isinstance(token, TransactionHeader):
        acc.open_transaction(token)
        return ParserState.IN_TRANSACTION
    elif isinstance(token, PostingLine):
        acc.skip(
            line_number,
            DiagnosticKind.ORPHAN_POSTING,
            token.raw_line,
        )
    elif isinstance(token, Unrecognized):
        acc.skip(line_number, DiagnosticKind.UNRECOGNIZED, token.raw_line)
    elif not isinstance(token, EmptyLine):
        raise TypeError(f"Unsupported token type: {type(token).__name__}")
    return ParserState.GENERAL


def parse_tokens(
    tokens: Sequence[Token],
    *,
    strict: bool = False,
) -> ParseResult:
    """Build a journal from a token sequence.

    Args:
        tokens: Tokens in line order, as produced by ``tokenize``.
        strict: Raise on the first skipped line instead of collecting it.

    Returns:
        ParseResult: Journal plus diagnostics for skipped lines.

    Raises:
        LedgerParseError: In strict mode, for an unrecognized line or a
            posting outside of any transaction or budget.
    """
    acc = _JournalAccumulator(strict=strict)
    state = ParserState.GENERAL
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if state is ParserState.IN_BUDGET:
            if isinstance(token, PostingLine):
                acc.add_posting(token.posting)
            elif isinstance(token, BudgetHeader):
                acc.close()
                acc.open_budget(token.period)
            else:
                acc.close()
                state = ParserState.GENERAL
                continue
        elif state is ParserState.IN_TRANSACTION:
            if isinstance(token, PostingLine):
                acc.add_posting(token.posting)
            elif isinstance(token, TransactionHeader):
                acc.close()
                acc.open_transaction(token)
            else:
                acc.close()
                state = ParserState.GENERAL
                continue
        else:
            state = _dispatch_general(acc, token, index + 1)
        index += 1
    acc.close()
    return acc.build()


__all__ = ["ParserState", "parse_tokens"]
