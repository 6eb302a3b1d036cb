"""Rich rendering for ledger listings, balances and settlement plans."""

from decimal import Decimal

from rich.console import Console
from rich.table import Table

from ..models import Expense, Settlement, User, UserBalance

console = Console()


def format_money(amount: Decimal, symbol: str = "$", use_color: bool = True) -> str:
    """
    Format money in accounting style with alignment.

    Negative amounts use parentheses: ($85.02)
    Positive amounts have spaces:      $85.02
    The spaces ensure decimal points align in tables.
    """
    abs_amount = abs(amount)
    if amount < 0:
        if use_color:
            return f"({symbol}[red]{abs_amount:,.2f}[/red])"
        return f"({symbol}{abs_amount:,.2f})"
    if use_color:
        return f" [green]{symbol}{abs_amount:,.2f}[/green] "
    return f" {symbol}{abs_amount:,.2f} "


def display_users(users: list[User]) -> None:
    """Display registered users sorted by id."""
    table = Table(title="Users", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")

    for user in sorted(users, key=lambda u: u.id):
        table.add_row(user.id, user.name)

    console.print(table)


def display_expenses(expenses: list[Expense], symbol: str = "$") -> None:
    """Display expenses in the order they were recorded."""
    table = Table(title="Expenses", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", max_width=12)
    table.add_column("Description", style="cyan")
    table.add_column("Paid By")
    table.add_column("Total", justify="right")
    table.add_column("Splits", style="yellow", no_wrap=False)

    for expense in expenses:
        splits = ", ".join(
            f"{split.user_id}: {split.amount:,.2f}" for split in expense.splits
        )
        table.add_row(
            expense.id,
            expense.description,
            expense.paid_by,
            format_money(expense.total_amount, symbol),
            splits or "[dim]none[/dim]",
        )

    console.print(table)


def display_balances(balances: list[UserBalance], symbol: str = "$") -> None:
    """Display net balances, creditors first."""
    table = Table(title="Balances", show_header=True, header_style="bold magenta")
    table.add_column("User", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Balance", justify="right")

    for balance in sorted(balances, key=lambda b: b.amount, reverse=True):
        table.add_row(balance.user_id, balance.name, format_money(balance.amount, symbol))

    console.print(table)


def display_settlements(settlements: list[Settlement], symbol: str = "$") -> None:
    """Display the settlement plan as a list of payments."""
    if not settlements:
        console.print("[green]All settled up, no payments needed.[/green]")
        return

    table = Table(title="Settle Up", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right")
    table.add_column("From", style="red")
    table.add_column("To", style="green")
    table.add_column("Amount", justify="right")

    for i, settlement in enumerate(settlements, start=1):
        table.add_row(
            str(i),
            settlement.from_user,
            settlement.to_user,
            format_money(settlement.amount, symbol),
        )

    console.print(table)
    console.print(f"\n[bold]Total payments:[/bold] {len(settlements)}")
