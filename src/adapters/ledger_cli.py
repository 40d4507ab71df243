"""CLI adapter printing ledger reports.

This module wires the ledger use cases to the filesystem source and
exposes them as typer commands. Reports go to stdout, errors to stderr.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Optional

import typer

from src.application.use_cases import (
    GetBalanceReportUseCase,
    GetBudgetReportUseCase,
    ListAccountsUseCase,
    LoadLedgerUseCase,
    ParseLedgerUseCase,
)
from src.domain.errors import LedgerError
from src.domain.models import DiagnosticsMode, Journal
from src.infrastructure.container import build_ledger_source, build_settings
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Report on a plain-text ledger. The ledger path defaults to the "
        "LEDGER_FILE environment variable."
    ),
)

# Module-level option objects keep calls out of parameter defaults.
FILE_OPTION = typer.Option(
    None,
    "--file",
    "-f",
    help="Ledger file to read (falls back to LEDGER_FILE).",
    dir_okay=False,
)
DIAGNOSTICS_OPTION = typer.Option(
    None,
    "--diagnostics",
    help="How to surface skipped lines (falls back to LEDGER_DIAGNOSTICS).",
    case_sensitive=False,
)
DEPTH_OPTION = typer.Option(
    None,
    "--depth",
    min=1,
    help="Roll accounts up to this many segments.",
)
TOTALS_OPTION = typer.Option(
    False,
    "--totals",
    help="Append a total column per account.",
)


def _load_journal(
    file: Optional[Path],
    diagnostics: Optional[DiagnosticsMode],
) -> Journal:
    """Read and parse the ledger selected by the options and settings."""
    settings = build_settings()
    logger = get_app_logger()
    parser = ParseLedgerUseCase(
        logger=logger,
        diagnostics=diagnostics or settings.diagnostics,
    )
    use_case = LoadLedgerUseCase(
        ledger_source=build_ledger_source(settings),
        parser=parser,
        logger=logger,
    )
    return use_case.execute(file).journal


def _run(
    command: str,
    file: Optional[Path],
    diagnostics: Optional[DiagnosticsMode],
    render: Callable[[Journal], str],
) -> None:
    """Load the journal, print the rendered report, map errors to exit 1."""
    get_usage_logger().info(f"command={command} file={file or '<default>'}")
    try:
        journal = _load_journal(file, diagnostics)
    except LedgerError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    typer.echo(render(journal))


@app.command("accounts")
def accounts_cmd(
    file: Optional[Path] = FILE_OPTION,
    diagnostics: Optional[DiagnosticsMode] = DIAGNOSTICS_OPTION,
) -> None:
    """List the accounts used by transactions, one per line."""
    _run(
        "accounts",
        file,
        diagnostics,
        lambda journal: "\n".join(ListAccountsUseCase().execute(journal)),
    )


@app.command("balancesheet")
def balancesheet_cmd(
    file: Optional[Path] = FILE_OPTION,
    diagnostics: Optional[DiagnosticsMode] = DIAGNOSTICS_OPTION,
    depth: Optional[int] = DEPTH_OPTION,
    totals: bool = TOTALS_OPTION,
) -> None:
    """Print account balances per calendar month."""
    _run(
        "balancesheet",
        file,
        diagnostics,
        lambda journal: GetBalanceReportUseCase().execute(
            journal,
            depth=depth,
            with_totals=totals,
        ),
    )


app.command("bs", help="Alias of balancesheet.")(balancesheet_cmd)


@app.command("budget")
def budget_cmd(
    file: Optional[Path] = FILE_OPTION,
    diagnostics: Optional[DiagnosticsMode] = DIAGNOSTICS_OPTION,
) -> None:
    """Print budget targets per account and budget period."""
    _run(
        "budget",
        file,
        diagnostics,
        lambda journal: GetBudgetReportUseCase().execute(journal),
    )


def main() -> None:
    """Run the ledger CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
