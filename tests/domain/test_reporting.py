"""Tests for the reporting services."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    Amount,
    Budget,
    Journal,
    Period,
    Posting,
    Transaction,
)
from src.domain.services import (
    account_view,
    accounts,
    aggregate,
    balance_table,
    budget_table,
    build_report,
    period_of,
    render_amount,
)


def _posting(account: str, quantity: str, commodity: str = "EUR") -> Posting:
    return Posting(account, Amount.of(Decimal(quantity), commodity))


def _journal() -> Journal:
    return Journal(
        budgets=(
            Budget("monthly", (_posting("expenses:rent", "500"),)),
        ),
        transactions=(
            Transaction(
                date(2021, 1, 1),
                "Buy an apple",
                (
                    _posting("expenses:groceries", "0.45"),
                    _posting("assets:checking", "-0.45"),
                ),
            ),
            Transaction(
                date(2021, 1, 15),
                "Buy a lemon",
                (
                    _posting("expenses:lemons", "0.30"),
                    _posting("assets:checking", "-0.30"),
                ),
            ),
            Transaction(
                date(2021, 2, 1),
                "Buy another apple",
                (
                    _posting("expenses:groceries", "0.45"),
                    _posting("assets:checking", "-0.45"),
                ),
            ),
            Transaction(
                date(2021, 2, 3),
                "Buy stock",
                (
                    _posting("assets:stocks", "2", "STOCK"),
                    _posting("assets:checking", "-3.00"),
                ),
            ),
        ),
    )


def test_accounts_are_sorted_unique_and_exclude_budgets() -> None:
    """Only transaction accounts are listed, once each."""
    assert accounts(_journal()) == [
        "assets:checking",
        "assets:stocks",
        "expenses:groceries",
        "expenses:lemons",
    ]


def test_account_view_tags_postings_with_transaction_context() -> None:
    """Each entry knows its transaction date and description."""
    view = account_view(_journal().transactions)

    groceries = view["expenses:groceries"]
    assert [(e.date, e.description) for e in groceries] == [
        (date(2021, 1, 1), "Buy an apple"),
        (date(2021, 2, 1), "Buy another apple"),
    ]
    assert "expenses:rent" not in view


def test_period_of_groups_by_calendar_month() -> None:
    """Same month and year share a period."""
    assert period_of(date(2021, 1, 1)) == period_of(date(2021, 1, 31))
    assert period_of(date(2021, 1, 1)) != period_of(date(2022, 1, 1))
    assert str(period_of(date(2021, 2, 3))) == "2021/02"


def test_aggregate_keeps_commodities_apart() -> None:
    """Postings in different commodities are not merged."""
    total = aggregate(
        [
            _posting("a", "1.5", "EUR"),
            _posting("a", "2", "STOCK"),
            _posting("a", "0.5", "EUR"),
        ]
    )

    assert total == {"EUR": Decimal("2.0"), "STOCK": Decimal("2")}


def test_build_report_only_materializes_observed_cells() -> None:
    """Months without postings for an account have no cell."""
    report = build_report(_journal().transactions)

    assert report[("assets:checking", Period(2021, 1))] == {
        "EUR": Decimal("-0.75")
    }
    assert report[("assets:checking", Period(2021, 2))] == {
        "EUR": Decimal("-3.45")
    }
    assert ("expenses:lemons", Period(2021, 2)) not in report
    assert ("assets:stocks", Period(2021, 1)) not in report


def test_build_report_rolls_up_to_depth() -> None:
    """Depth truncation merges sibling accounts."""
    report = build_report(_journal().transactions, depth=1)

    assert report[("expenses", Period(2021, 1))] == {"EUR": Decimal("0.75")}
    assert report[("assets", Period(2021, 2))] == {
        "STOCK": Decimal("2"),
        "EUR": Decimal("-3.45"),
    }


def test_render_amount_uses_insertion_order() -> None:
    """Pairs are rendered in commodity insertion order."""
    amount = Amount.of(Decimal("100.00"), "STOCK") + Amount.of(
        Decimal("-1"),
        "EUR",
    )

    assert render_amount(amount) == "100.00 STOCK, -1 EUR"
    assert render_amount(Amount()) == ""


def test_balance_table_leaves_missing_cells_blank() -> None:
    """Absent cells are empty strings, never zero."""
    table = balance_table(_journal())

    assert table.column_headers == ("2021/01", "2021/02")
    lemons = table.row_headers.index("expenses:lemons")
    assert table.cells[lemons] == ("0.30 EUR", "")


def test_balance_table_with_totals() -> None:
    """The total column aggregates every period."""
    table = balance_table(_journal(), with_totals=True)

    assert table.column_headers[-1] == "Total"
    checking = table.row_headers.index("assets:checking")
    assert table.cells[checking][-1] == "-4.20 EUR"


def test_budget_table_uses_budget_labels() -> None:
    """Budget periods become the columns."""
    table = budget_table(_journal())

    assert table.row_headers == ("expenses:rent",)
    assert table.column_headers == ("monthly",)
    assert table.cells == (("500 EUR",),)


def test_render_amount_never_uses_exponents() -> None:
    """Small and large quantities keep positional notation."""
    amount = Amount.of(Decimal("0.00000001"), "BTC") + Amount.of(
        Decimal("1E+3"),
        "EUR",
    )

    assert render_amount(amount) == "0.00000001 BTC, 1000 EUR"
