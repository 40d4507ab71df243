"""Domain services package."""

from .journal_parser import ParserState, parse_tokens
from .line_classifier import classify
from .reporting import (
    account_totals,
    account_view,
    balance_table,
    budget_table,
    accounts,
    aggregate,
    build_budget_report,
    build_report,
    period_of,
    render_amount,
)
from .table import render_table
from .tokenizer import tokenize

__all__ = [
    "ParserState",
    "parse_tokens",
    "classify",
    "tokenize",
    "account_totals",
    "account_view",
    "balance_table",
    "budget_table",
    "accounts",
    "aggregate",
    "build_budget_report",
    "build_report",
    "period_of",
    "render_amount",
    "render_table",
]
