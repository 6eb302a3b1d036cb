"""MCP server for SplitLedger — exposes the expense ledger as tools."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .config import load_settings
from .exceptions import SplitLedgerError
from .ledger.service import ExpenseService, load_ledger_file
from .models import Expense, Split, User

logger = logging.getLogger(__name__)

mcp_app = FastMCP("splitledger")

# ---------------------------------------------------------------------------
# Session state — one MCP server process = one in-memory ledger
# ---------------------------------------------------------------------------

WORKFLOW_INSTRUCTIONS = """\
You are keeping a shared expense ledger for a group. Follow this workflow:

1. PEOPLE: Call list_users to see who is registered. Register anyone missing
   with register_user (short unique id + display name).

2. EXPENSES: For each shared cost call record_expense with who paid, the
   total, and one split per participant. Splits must add up to the total
   (within one cent); ask the user how to divide it if that is unclear.

3. BALANCES: Call get_balances to show who is owed money and who owes.

4. SETTLE: Call settle_up to get the list of payments that clears every
   balance, and present it to the user.

Nothing is saved between sessions. Positive balance = owed money, \
negative = owes money.\
"""


@dataclass
class SessionState:
    """Holds the ledger between MCP tool calls within a single conversation."""

    service: ExpenseService = field(default_factory=ExpenseService)
    currency_symbol: str | None = None


_state = SessionState()


def _symbol() -> str:
    """Currency symbol from settings, loaded once per session."""
    if _state.currency_symbol is None:
        _state.currency_symbol = load_settings().currency_symbol
    return _state.currency_symbol


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _format_amount(amount: Decimal) -> str:
    """Format an amount as an accounting-style string."""
    if amount < 0:
        return f"({_symbol()}{abs(amount):,.2f})"
    return f"{_symbol()}{amount:,.2f}"


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp_app.tool()
def register_user(user_id: str, name: str) -> str:
    """Register a participant in the ledger.

    Args:
        user_id: Unique identifier for the user.
        name: Display name.
    """
    try:
        user = _state.service.register_user(User(id=user_id, name=name))
        return f"Registered {user.name} (id: {user.id})"
    except SplitLedgerError as e:
        return f"Error: {e}"
    except Exception as e:
        return f"Failed to register user: {e}"


@mcp_app.tool()
def record_expense(
    paid_by: str,
    total_amount: Decimal,
    splits: list[Split],
    description: str = "",
    expense_id: str = "",
) -> str:
    """Record a shared expense paid by one user.

    Args:
        paid_by: ID of the user who paid.
        total_amount: Total cost of the expense.
        splits: Amount each participant owes; must add up to total_amount.
        description: What the expense was for.
        expense_id: Optional identifier; generated when omitted.
    """
    try:
        expense = _state.service.record_expense(
            Expense(
                id=expense_id,
                description=description,
                total_amount=total_amount,
                paid_by=paid_by,
                splits=tuple(splits),
            )
        )
        return (
            f"Recorded expense {expense.id}: {expense.description or 'untitled'} | "
            f"{_format_amount(expense.total_amount)} paid by {expense.paid_by} | "
            f"{len(expense.splits)} splits"
        )
    except SplitLedgerError as e:
        return f"Error: {e}"
    except Exception as e:
        return f"Failed to record expense: {e}"


@mcp_app.tool()
def list_users() -> str:
    """List registered users."""
    users = sorted(_state.service.list_users(), key=lambda u: u.id)
    if not users:
        return "No users registered."

    lines = [f"Users ({len(users)} total):"]
    for user in users:
        lines.append(f"  - {user.id}: {user.name}")
    return "\n".join(lines)


@mcp_app.tool()
def list_expenses() -> str:
    """List recorded expenses in the order they were recorded."""
    expenses = _state.service.list_expenses()
    if not expenses:
        return "No expenses recorded."

    lines = [f"Expenses ({len(expenses)} total):"]
    for exp in expenses:
        shares = ", ".join(
            f"{split.user_id}: {_format_amount(split.amount)}" for split in exp.splits
        )
        lines.append(
            f"  - [{exp.id}] {exp.description or 'untitled'} | "
            f"{_format_amount(exp.total_amount)} paid by {exp.paid_by} | {shares}"
        )
    return "\n".join(lines)


@mcp_app.tool()
def get_balances() -> str:
    """Show each user's net balance (positive = owed money, negative = owes)."""
    balances = _state.service.compute_balances()
    if not balances:
        return "No users registered."

    lines = ["Balances:"]
    for balance in sorted(balances, key=lambda b: b.amount, reverse=True):
        lines.append(
            f"  - {balance.name} ({balance.user_id}): {_format_amount(balance.amount)}"
        )
    return "\n".join(lines)


@mcp_app.tool()
def settle_up() -> str:
    """Suggest payments that bring every balance to zero."""
    settlements = _state.service.compute_settlement()
    if not settlements:
        return "All settled up, no payments needed."

    lines = [f"Settle Up ({len(settlements)} payments):"]
    for s in settlements:
        lines.append(f"  - {s.from_user} pays {s.to_user} {_format_amount(s.amount)}")
    return "\n".join(lines)


@mcp_app.tool()
def load_ledger(path: str = "") -> str:
    """Load users and expenses from a JSON ledger file into this session.

    Args:
        path: Ledger file path; defaults to the configured ledger file.
    """
    try:
        ledger_path = Path(path) if path else load_settings().ledger_file
        document = load_ledger_file(ledger_path, _state.service)
        return (
            f"Loaded {len(document.users)} users and "
            f"{len(document.expenses)} expenses from {ledger_path}"
        )
    except SplitLedgerError as e:
        return f"Error: {e}"
    except Exception as e:
        return f"Failed to load ledger: {e}"


# ---------------------------------------------------------------------------
# MCP Prompt
# ---------------------------------------------------------------------------


@mcp_app.prompt()
def settle_workflow() -> str:
    """Instructions for keeping the ledger and settling up."""
    return WORKFLOW_INSTRUCTIONS


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_server():
    """Start the MCP server (stdio transport)."""
    logger.info("Starting SplitLedger MCP server")
    mcp_app.run(transport="stdio")
