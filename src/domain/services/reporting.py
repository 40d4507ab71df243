"""Domain services pivoting journal postings into report cells."""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import AMOUNT_SEPARATOR, TOTAL_COLUMN_HEADER
from src.domain.models import (
    Amount,
    Budget,
    Journal,
    Period,
    Posting,
    PostingEntry,
    ReportKey,
    ReportTable,
    Transaction,
    sum_amounts,
)
from src.domain.policies import truncate_account


def accounts(journal: Journal) -> list[str]:
    """Return the accounts posted to by any transaction.

    Budget postings are not included.

    Args:
        journal: Parsed journal.

    Returns:
        list[str]: Distinct account paths in lexical order.
    """
    return sorted(
        {
            posting.account
            for transaction in journal.transactions
            for posting in transaction.postings
        }
    )


def account_view(
    transactions: Iterable[Transaction],
    depth: int | None = None,
) -> dict[str, list[PostingEntry]]:
    """Pivot transaction postings by account.

    Args:
        transactions: Transactions in journal order.
        depth: Optional number of account segments to roll postings up to.

    Returns:
        dict[str, list[PostingEntry]]: Postings per account, tagged with
        their transaction's date and description. Accounts without
        postings are absent.
    """
    view: dict[str, list[PostingEntry]] = {}
    for transaction in transactions:
        for posting in transaction.postings:
            account = truncate_account(posting.account, depth)
            view.setdefault(account, []).append(
                PostingEntry(
                    date=transaction.date,
                    description=transaction.description,
                    posting=posting,
                )
            )
    return view


def period_of(day: date) -> Period:
    """Return the calendar month a date falls in."""
    return Period(year=day.year, month=day.month)


def aggregate(postings: Iterable[Posting | PostingEntry]) -> Amount:
    """Sum posting amounts commodity by commodity.

    Args:
        postings: Postings, bare or tagged with their transaction context.

    Returns:
        Amount: Commodity-wise total.
    """
    return sum_amounts(
        (
            item.posting.amount
            if isinstance(item, PostingEntry)
            else item.amount
        )
        for item in postings
    )


def build_report(
    transactions: Iterable[Transaction],
    depth: int | None = None,
) -> dict[ReportKey, Amount]:
    """Aggregate postings into (account, period) cells.

    Args:
        transactions: Transactions to aggregate.
        depth: Optional number of account segments to roll postings up to.

    Returns:
        dict[ReportKey, Amount]: One cell per observed (account, period);
        pairs without postings are absent.
    """
    report: dict[ReportKey, Amount] = {}
    for account, entries in account_view(transactions, depth).items():
        partitions: dict[Period, list[PostingEntry]] = {}
        for entry in entries:
            partitions.setdefault(period_of(entry.date), []).append(entry)
        for period, partition in partitions.items():
            report[(account, period)] = aggregate(partition)
    return report


def account_totals(
    report: Mapping[ReportKey, Amount],
) -> dict[str, Amount]:
    """Collapse report cells over all periods, per account."""
    totals: dict[str, Amount] = {}
    for (account, _period), amount in report.items():
        totals[account] = totals.get(account, Amount()) + amount
    return totals


def build_budget_report(
    budgets: Sequence[Budget],
) -> dict[tuple[str, str], Amount]:
    """Aggregate budget postings into (account, budget period) cells.

    Args:
        budgets: Budgets in journal order.

    Returns:
        dict[tuple[str, str], Amount]: One cell per observed pair.
    """
    report: dict[tuple[str, str], Amount] = {}
    for budget in budgets:
        for posting in budget.postings:
            key = (posting.account, budget.period)
            report[key] = report.get(key, Amount()) + posting.amount
    return report


def render_amount(amount: Mapping[str, Decimal]) -> str:
    """Format an amount as ``"<decimal> <commodity>"`` pairs.

    Quantities are written in plain positional notation, never exponents.

    Args:
        amount: Quantities keyed by commodity, in insertion order.

    Returns:
        str: Comma-separated pairs, empty for an empty amount.
    """
    return AMOUNT_SEPARATOR.join(
        f"{quantity:f} {commodity}" for commodity, quantity in amount.items()
    )


def balance_table(
    journal: Journal,
    depth: int | None = None,
    with_totals: bool = False,
) -> ReportTable:
    """Lay out the balance report as accounts by calendar months.

    Args:
        journal: Parsed journal.
        depth: Optional number of account segments to roll postings up to.
        with_totals: Append a column aggregating every period.

    Returns:
        ReportTable: Sorted accounts as rows, sorted periods as columns.
    """
    report = build_report(journal.transactions, depth)
    row_headers = sorted({account for account, _period in report})
    periods = sorted({period for _account, period in report})
    column_headers = [str(period) for period in periods]
    totals = account_totals(report) if with_totals else {}
    if with_totals:
        column_headers.append(TOTAL_COLUMN_HEADER)
    cells = []
    for account in row_headers:
        row = [
            render_amount(report[(account, period)])
            if (account, period) in report
            else ""
            for period in periods
        ]
        if with_totals:
            row.append(render_amount(totals[account]))
        cells.append(tuple(row))
    return ReportTable(
        row_headers=tuple(row_headers),
        column_headers=tuple(column_headers),
        cells=tuple(cells),
    )


def budget_table(journal: Journal) -> ReportTable:
    """Lay out budget postings as accounts by budget period labels."""
    report = build_budget_report(journal.budgets)
    row_headers = sorted({account for account, _label in report})
    labels = list(
        dict.fromkeys(
            budget.period for budget in journal.budgets if budget.postings
        )
    )
    cells = tuple(
        tuple(
            render_amount(report[(account, label)])
            if (account, label) in report
            else ""
            for label in labels
        )
        for account in row_headers
    )
    return ReportTable(
        row_headers=tuple(row_headers),
        column_headers=tuple(labels),
        cells=cells,
    )


__all__ = [
    "accounts",
    "account_view",
    "period_of",
    "aggregate",
    "build_report",
    "account_totals",
    "build_budget_report",
    "render_amount",
    "balance_table",
    "budget_table",
]
