"""Line grammars of the ledger format.

Each grammar is a matcher that turns one line into a typed token or returns
None. ``classify`` tries them in priority order and the first match wins;
lines matching nothing become ``Unrecognized``.
"""

import re
from collections.abc import Callable
from datetime import date, datetime

from src.domain.constants import LEDGER_DATE_FORMAT
from src.domain.models import (
    Amount,
    BudgetHeader,
    CommodityDeclaration,
    EmptyLine,
    Include,
    Posting,
    PostingLine,
    PriceLine,
    PriceObservation,
    Token,
    TransactionHeader,
    Unrecognized,
)
from src.utils.decimal_utils import parse_decimal

LineMatcher = Callable[[str], Token | None]

_DATE = r"\d{4}/\d{2}/\d{2}"
_COMMODITY = r"[^\s\d\-+.,@;\"][^\s@;\"]*"

_INCLUDE_RE = re.compile(r"include (?P<path>\S+)")
_COMMODITY_RE = re.compile(r"commodity (?P<spec>.*)")
_BUDGET_RE = re.compile(r"~\s*(?P<period>\S.*?)\s*")
_PRICE_RE = re.compile(
    rf"P\s+(?P<date>{_DATE})\s+(?P<commodity>{_COMMODITY})"
    rf"\s+(?P<price>\S+)\s+(?P<reference>{_COMMODITY})\s*"
)
_TRANSACTION_RE = re.compile(rf"(?P<date>{_DATE}) (?P<description>.*)")
_POSTING_RE = re.compile(
    rf"\s+(?P<account>\S+)\s+(?P<quantity>\S+)"
    rf"\s+(?P<commodity>{_COMMODITY})"
    rf"(?:\s+@@\s+(?P<cost>\S+)\s+(?P<cost_commodity>{_COMMODITY}))?\s*"
)


def _parse_date(raw: str) -> date | None:
    try:
        return datetime.strptime(raw, LEDGER_DATE_FORMAT).date()
    except ValueError:
        return None


def match_include(line: str) -> Include | None:
    """Match ``include <path>``."""
    match = _INCLUDE_RE.fullmatch(line)
    if match is None:
        return None
    return Include(path=match["path"])


def match_commodity(line: str) -> CommodityDeclaration | None:
    """Match ``commodity <free text>``, keeping the text verbatim."""
    match = _COMMODITY_RE.fullmatch(line)
    if match is None:
        return None
    return CommodityDeclaration(spec=match["spec"])


def match_budget_header(line: str) -> BudgetHeader | None:
    """Match a budget header such as ``~monthly``."""
    match = _BUDGET_RE.fullmatch(line)
    if match is None:
        return None
    return BudgetHeader(period=match["period"])


def match_price(line: str) -> PriceLine | None:
    """Match ``P <date> <commodity> <decimal> <reference-commodity>``."""
    match = _PRICE_RE.fullmatch(line)
    if match is None:
        return None
    observed_on = _parse_date(match["date"])
    price = parse_decimal(match["price"])
    if observed_on is None or price is None:
        return None
    return PriceLine(
        observation=PriceObservation(
            commodity=match["commodity"],
            date=observed_on,
            price=price,
            reference_commodity=match["reference"],
        )
    )


def match_transaction_header(line: str) -> TransactionHeader | None:
    """Match ``<yyyy/mm/dd> <description>``."""
    match = _TRANSACTION_RE.fullmatch(line)
    if match is None:
        return None
    posted_on = _parse_date(match["date"])
    if posted_on is None:
        return None
    return TransactionHeader(
        date=posted_on,
        description=match["description"],
    )


def match_posting(line: str) -> PostingLine | None:
    """Match an indented posting with an optional ``@@`` purchase price.

    Args:
        line: Raw ledger line.

    Returns:
        PostingLine | None: Parsed posting, or None when the line is not
        indented or either quantity is not a finite decimal.
    """
    match = _POSTING_RE.fullmatch(line)
    if match is None:
        return None
    quantity = parse_decimal(match["quantity"])
    if quantity is None:
        return None
    purchase_price = None
    if match["cost"] is not None:
        cost = parse_decimal(match["cost"])
        if cost is None:
            return None
        purchase_price = Amount.of(cost, match["cost_commodity"])
    return PostingLine(
        posting=Posting(
            account=match["account"],
            amount=Amount.of(quantity, match["commodity"]),
            purchase_price=purchase_price,
        ),
        raw_line=line,
    )


def match_empty_line(line: str) -> EmptyLine | None:
    """Match a line with zero characters."""
    return EmptyLine() if line == "" else None


GRAMMARS: tuple[LineMatcher, ...] = (
    match_include,
    match_commodity,
    match_budget_header,
    match_price,
    match_transaction_header,
    match_posting,
    match_empty_line,
)


def classify(line: str) -> Token:
    """Classify one ledger line.

    Args:
        line: Raw line, with or without its line terminator.

    Returns:
        Token: Token of the first grammar that matches, else Unrecognized.
    """
    stripped = line.rstrip("\r\n")
    for grammar in GRAMMARS:
        token = grammar(stripped)
        if token is not None:
            return token
    return Unrecognized(raw_line=stripped)


__all__ = [
    "GRAMMARS",
    "LineMatcher",
    "classify",
    "match_budget_header",
    "match_commodity",
    "match_empty_line",
    "match_include",
    "match_posting",
    "match_price",
    "match_transaction_header",
]
