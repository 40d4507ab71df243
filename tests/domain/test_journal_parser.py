"""Tests for the structural parser."""

import pickle
from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import LedgerParseError
from src.domain.models import (
    Amount,
    CommodityDeclaration,
    DiagnosticKind,
    Include,
    Posting,
)
from src.domain.services import parse_tokens, tokenize


def _parse(lines, **kwargs):
    return parse_tokens(tokenize(lines), **kwargs)


def test_single_transaction_keeps_posting_order() -> None:
    """Postings are stored in input order with exact amounts."""
    result = _parse(
        [
            "2021/01/01 apples",
            "  expenses:groceries 5.00 EUR",
            "  assets:checking -5.00 EUR",
        ]
    )

    (transaction,) = result.journal.transactions
    assert transaction.date == date(2021, 1, 1)
    assert transaction.description == "apples"
    assert transaction.postings == (
        Posting("expenses:groceries", Amount({"EUR": Decimal("5.00")})),
        Posting("assets:checking", Amount({"EUR": Decimal("-5.00")})),
    )
    assert result.diagnostics == ()


def test_headers_and_prices_are_recorded_in_order() -> None:
    """Include/commodity lines go to headers, P lines to prices."""
    result = _parse(
        [
            "include a.ledger",
            "commodity 1.000,00 EUR",
            "P 2021/01/01 STOCK 1.50 EUR",
            "P 2021/02/01 STOCK 1.75 EUR",
            "P 2021/02/01 GOLD 50 EUR",
        ]
    )
    journal = result.journal

    assert journal.headers == (
        Include("a.ledger"),
        CommodityDeclaration("1.000,00 EUR"),
    )
    assert [obs.price for obs in journal.prices_for("STOCK")] == [
        Decimal("1.50"),
        Decimal("1.75"),
    ]
    assert len(journal.prices_for("GOLD")) == 1
    assert journal.prices_for("SILVER") == ()


def test_budget_then_transaction_without_blank_line() -> None:
    """A transaction header closes a budget and is re-dispatched."""
    result = _parse(
        [
            "~monthly",
            "  expenses:groceries 100 EUR",
            "2021/01/01 apples",
            "  expenses:groceries 5 EUR",
        ]
    )
    journal = result.journal

    (budget,) = journal.budgets
    assert budget.period == "monthly"
    assert [p.account for p in budget.postings] == ["expenses:groceries"]
    (transaction,) = journal.transactions
    assert [p.amount["EUR"] for p in transaction.postings] == [Decimal("5")]


def test_consecutive_headers_flush_previous_accumulator() -> None:
    """A header of the same kind closes the open block."""
    result = _parse(
        [
            "~monthly",
            "  expenses:rent 500 EUR",
            "~yearly",
            "  expenses:holiday 1000 EUR",
            "2021/01/01 one",
            "  a 1 EUR",
            "2021/01/02 two",
            "  b 2 EUR",
        ]
    )
    journal = result.journal

    assert [b.period for b in journal.budgets] == ["monthly", "yearly"]
    assert [
        [p.account for p in t.postings] for t in journal.transactions
    ] == [["a"], ["b"]]


def test_empty_line_closes_transaction() -> None:
    """A posting after a blank line does not leak into the transaction."""
    result = _parse(
        [
            "2021/01/01 one",
            "  a 1 EUR",
            "",
            "  b 2 EUR",
        ]
    )

    (transaction,) = result.journal.transactions
    assert [p.account for p in transaction.postings] == ["a"]
    (diagnostic,) = result.diagnostics
    assert diagnostic.kind is DiagnosticKind.ORPHAN_POSTING
    assert diagnostic.line_number == 4


def test_transaction_and_budget_without_postings_are_kept() -> None:
    """Blocks with zero postings are legal."""
    result = _parse(["~weekly", "", "2021/01/01 nothing"])

    assert result.journal.budgets[0].postings == ()
    assert result.journal.transactions[0].postings == ()


def test_open_block_is_flushed_at_end_of_input() -> None:
    """The last transaction is not lost without a trailing blank line."""
    result = _parse(["2021/01/01 last", "  a 1 EUR"])

    assert len(result.journal.transactions) == 1


def test_unrecognized_line_is_skipped_and_parsing_continues() -> None:
    """Garbage is reported and everything after it is still parsed."""
    result = _parse(
        [
            "garbage here",
            "2021/01/01 after",
            "  a 1 EUR",
        ]
    )

    assert len(result.journal.transactions) == 1
    (diagnostic,) = result.diagnostics
    assert diagnostic.kind is DiagnosticKind.UNRECOGNIZED
    assert diagnostic.line_number == 1
    assert diagnostic.line == "garbage here"


def test_unrecognized_line_closes_open_transaction() -> None:
    """Postings after a malformed line belong to no transaction."""
    result = _parse(
        [
            "2021/01/01 one",
            "  a 1 EUR",
            "  b oops EUR",
            "  c 3 EUR",
        ]
    )

    (transaction,) = result.journal.transactions
    assert [p.account for p in transaction.postings] == ["a"]
    assert [d.line_number for d in result.diagnostics] == [3, 4]


def test_comment_line_closes_transaction_and_orphans_postings() -> None:
    """A marker line is unrecognized, so it ends the open transaction."""
    result = _parse(
        [
            "2021/01/01 one",
            "  ; paid cash",
            "  a 1 EUR",
        ]
    )

    (transaction,) = result.journal.transactions
    assert transaction.postings == ()
    assert [(d.line_number, d.kind) for d in result.diagnostics] == [
        (2, DiagnosticKind.UNRECOGNIZED),
        (3, DiagnosticKind.ORPHAN_POSTING),
    ]


def test_orphan_posting_diagnostic_keeps_the_input_line() -> None:
    """The diagnostic shows the posting as written, purchase price included."""
    line = "    assets:stocks   100 STOCK @@ 150 EUR"

    result = _parse(["2021/01/01 one", "", line])

    (diagnostic,) = result.diagnostics
    assert diagnostic.kind is DiagnosticKind.ORPHAN_POSTING
    assert diagnostic.line == line


def test_strict_mode_raises_on_first_skipped_line() -> None:
    """Strict parsing surfaces the diagnostic as an error."""
    with pytest.raises(LedgerParseError) as excinfo:
        _parse(["2021/01/01 ok", "", "nonsense"], strict=True)

    assert excinfo.value.diagnostic.line_number == 3


def test_large_ledger_does_not_recurse() -> None:
    """Tens of thousands of lines parse with an iterative loop."""
    lines = []
    for _ in range(20000):
        lines.extend(["2021/01/01 tx", "  a 1 EUR", "  b -1 EUR", ""])

    result = _parse(lines)

    assert len(result.journal.transactions) == 20000


def test_prices_are_read_only_and_picklable() -> None:
    """The price table cannot be changed but survives a pickle round."""
    result = _parse(["P 2021/01/01 STOCK 1.50 EUR"])
    prices = result.journal.prices

    with pytest.raises(TypeError):
        prices["GOLD"] = ()
    assert not hasattr(prices, "setdefault")

    restored = pickle.loads(pickle.dumps(result.journal))
    assert restored.prices == prices
    assert restored.prices_for("STOCK")[0].price == Decimal("1.50")
