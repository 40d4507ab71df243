"""Typed tokens produced by the line classifier, one per input line."""

from dataclasses import dataclass
from datetime import date

from src.domain.models.journal import (
    CommodityDeclaration,
    Include,
    Posting,
    PriceObservation,
)


@dataclass(frozen=True)
class BudgetHeader:
    """Opening line of a budget block, e.g. ``~monthly``."""

    period: str


@dataclass(frozen=True)
class TransactionHeader:
    """Opening line of a transaction: date followed by a description."""

    date: date
    description: str


@dataclass(frozen=True)
class PostingLine:
    """Indented posting line wrapping the parsed posting.

    Attributes:
        posting: Parsed account and amounts.
        raw_line: Line as read, without its terminator.
    """

    posting: Posting
    raw_line: str = ""


@dataclass(frozen=True)
class PriceLine:
    """``P`` directive wrapping the parsed price observation."""

    observation: PriceObservation


@dataclass(frozen=True)
class EmptyLine:
    """Line with zero characters."""


@dataclass(frozen=True)
class Unrecognized:
    """Line matching no grammar, kept verbatim."""

    raw_line: str


Token = (
    Include
    | CommodityDeclaration
    | BudgetHeader
    | PriceLine
    | TransactionHeader
    | PostingLine
    | EmptyLine
    | Unrecognized
)


__all__ = [
    "Include",
    "CommodityDeclaration",
    "BudgetHeader",
    "TransactionHeader",
    "PostingLine",
    "PriceLine",
    "EmptyLine",
    "Unrecognized",
    "Token",
]
