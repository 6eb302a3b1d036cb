"""CLI for SplitLedger."""

import typer

from .ledger.cli import app as ledger_app
from .mcp_server import run_server

app = typer.Typer(
    name="splitledger",
    help="Track shared expenses and work out who owes whom",
)

app.add_typer(ledger_app, name="ledger", help="Inspect a ledger document")


@app.command()
def mcp():
    """Start the MCP server exposing the ledger as tools."""
    run_server()


if __name__ == "__main__":
    app()
