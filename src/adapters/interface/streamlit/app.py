"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path

import streamlit as st
import altair as alt

from src.application.use_cases.get_balance_report import (
    GetBalanceReportUseCase,
)
from src.application.use_cases.get_budget_report import (
    GetBudgetReportUseCase,
)
from src.application.use_cases.list_accounts import ListAccountsUseCase
from src.application.use_cases.load_ledger import LoadLedgerUseCase
from src.application.use_cases.parse_ledger import (
    ParseLedgerUseCase,
    ParseResult,
)
from src.domain.errors import LedgerError
from src.domain.models import DiagnosticsMode, Journal, ReportTable
from src.domain.services import build_report
from src.infrastructure.container import build_ledger_source, build_settings


def _fetch_ledger(path: str | None) -> ParseResult:
    """Read and parse the ledger, collecting diagnostics silently."""
    settings = build_settings()
    use_case = LoadLedgerUseCase(
        ledger_source=build_ledger_source(settings),
        parser=ParseLedgerUseCase(diagnostics=DiagnosticsMode.SILENT),
    )
    return use_case.execute(Path(path) if path else None)


@st.cache_data(show_spinner=False)
def _load_ledger(path: str | None, schema_version: int = 1) -> ParseResult:
    """Cached wrapper around _fetch_ledger for Streamlit sessions."""
    _ = schema_version
    return _fetch_ledger(path)


def _default_ledger_path() -> str:
    """Return the configured ledger path, or an empty string."""
    ledger_file = build_settings().ledger_file
    return str(ledger_file) if ledger_file else ""


def _render_table(table: ReportTable, label: str) -> None:
    """Render a report table as a dataframe."""
    if not table.row_headers:
        st.info("No postings available for this report.")
        return
    st.dataframe(
        table.as_records(label),
        width="stretch",
        hide_index=True,
    )


def _render_accounts(accounts: Sequence[str]) -> None:
    """Render the accounts list with light filtering."""
    st.subheader("Accounts")
    query = st.text_input("Search by name", placeholder="Type to filter")
    query_lower = query.strip().lower()
    filtered = [
        account
        for account in accounts
        if not query_lower or query_lower in account.lower()
    ]
    st.caption(f"{len(filtered)} accounts shown")
    data = [
        {
            "Account": account,
            "Depth": account.count(":") + 1,
        }
        for account in filtered
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _prepare_monthly_chart_data(
    journal: Journal,
    account: str,
    commodity: str,
) -> list[dict[str, str | float]]:
    """Prepare per-month totals of one commodity for one account.

    Args:
        journal: Parsed journal.
        account: Account to chart.
        commodity: Commodity to chart; other commodities are left out.

    Returns:
        Altair-ready rows sorted by period.
    """
    report = build_report(journal.transactions)
    data: list[dict[str, str | float]] = []
    for (row_account, period), amount in sorted(report.items()):
        if row_account != account or commodity not in amount:
            continue
        quantity: Decimal = amount[commodity]
        data.append(
            {
                "period": str(period),
                "amount": float(quantity),
                "amount_label": f"{quantity:f} {commodity}",
            }
        )
    return data


def _account_commodities(journal: Journal, account: str) -> list[str]:
    """Return the commodities posted to an account, in first-seen order."""
    commodities: dict[str, None] = {}
    for transaction in journal.transactions:
        for posting in transaction.postings:
            if posting.account == account:
                commodities.update(dict.fromkeys(posting.amount))
    return list(commodities)


def _render_monthly_chart(
    journal: Journal,
    accounts: Sequence[str],
    chart_height: int = 320,
) -> None:
    """Render a bar chart of monthly activity for a selected account."""
    if not accounts:
        return
    account = st.selectbox("Account", options=list(accounts), index=0)
    commodities = _account_commodities(journal, account)
    if not commodities:
        return
    commodity = st.selectbox("Commodity", options=commodities, index=0)
    data = _prepare_monthly_chart_data(journal, account, commodity)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("period:O", title=None),
        y=alt.Y("amount:Q", title=commodity),
        color=alt.condition(
            alt.datum.amount >= 0,
            alt.value("#2e7d32"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("period:O"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(
        height=chart_height,
    ).configure_view(
        stroke=None
    )
    st.subheader(f"Monthly activity: {account}")
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    path = st.sidebar.text_input("Ledger file", value=_default_ledger_path())
    page = st.sidebar.selectbox("Page", ["Balance", "Budget", "Accounts"])

    try:
        result = _load_ledger(path or None, schema_version=1)
    except LedgerError as exc:
        st.warning(str(exc))
        return
    journal = result.journal
    if result.diagnostics:
        st.warning(
            f"{len(result.diagnostics)} lines were skipped while parsing."
        )

    accounts = ListAccountsUseCase().execute(journal)
    if page == "Balance":
        with_totals = st.sidebar.checkbox("Show totals", value=True)
        table = GetBalanceReportUseCase().build_table(
            journal,
            with_totals=with_totals,
        )
        st.subheader("Balance by month")
        _render_table(table, "Account")
        _render_monthly_chart(journal, accounts)
    elif page == "Budget":
        table = GetBudgetReportUseCase().build_table(journal)
        st.subheader("Budget targets")
        _render_table(table, "Account")
    else:
        st.caption(f"{len(accounts)} accounts used by transactions")
        if not accounts:
            st.warning("No accounts found in this ledger.")
            return
        _render_accounts(accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
