"""CLI commands for inspecting a ledger document using Typer."""

import logging
import sys
from pathlib import Path

import typer

from ..config import Settings, load_settings
from ..exceptions import SplitLedgerError
from .service import ExpenseService, load_ledger_file
from .ui import (
    console,
    display_balances,
    display_expenses,
    display_settlements,
    display_users,
)

app = typer.Typer(
    name="ledger",
    help="Balances and settle-up plans for a shared expense ledger",
)

LedgerFileArgument = typer.Argument(
    None,
    help="Ledger JSON file (defaults to SPLITLEDGER_LEDGER_FILE or ledger.json)",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose output")


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _load(ledger_file: Path | None, verbose: bool) -> tuple[ExpenseService, Settings]:
    """Load settings and replay the ledger document into a fresh service."""
    setup_logging(verbose)

    try:
        settings = load_settings()
        path = ledger_file or settings.ledger_file

        service = ExpenseService()
        load_ledger_file(path, service)
    except SplitLedgerError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            raise
        sys.exit(1)

    return service, settings


@app.command()
def users(
    ledger_file: Path | None = LedgerFileArgument,
    verbose: bool = VerboseOption,
):
    """List registered users."""
    service, _ = _load(ledger_file, verbose)
    display_users(service.list_users())


@app.command()
def expenses(
    ledger_file: Path | None = LedgerFileArgument,
    verbose: bool = VerboseOption,
):
    """List recorded expenses in the order they were accepted."""
    service, settings = _load(ledger_file, verbose)
    display_expenses(service.list_expenses(), settings.currency_symbol)


@app.command()
def balances(
    ledger_file: Path | None = LedgerFileArgument,
    verbose: bool = VerboseOption,
):
    """Show each user's net balance (positive = owed money)."""
    service, settings = _load(ledger_file, verbose)
    display_balances(service.compute_balances(), settings.currency_symbol)


@app.command()
def settle(
    ledger_file: Path | None = LedgerFileArgument,
    verbose: bool = VerboseOption,
):
    """
    Suggest payments that clear every balance.

    Uses greedy matching of the largest debtor against the largest creditor.
    The plan is short but not guaranteed to be the shortest possible.
    """
    service, settings = _load(ledger_file, verbose)
    display_settlements(service.compute_settlement(), settings.currency_symbol)
