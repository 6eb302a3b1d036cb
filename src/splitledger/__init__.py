"""SplitLedger - Track shared expenses and settle up with as few payments as possible."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .ledger.balances import compute_balances
from .ledger.service import ExpenseService, load_ledger_file
from .ledger.settlement import compute_settlements
from .ledger.store import LedgerStore
from .models import Expense, Settlement, Split, User, UserBalance

__all__ = [
    "Settings",
    "load_settings",
    "compute_balances",
    "ExpenseService",
    "load_ledger_file",
    "compute_settlements",
    "LedgerStore",
    "Expense",
    "Settlement",
    "Split",
    "User",
    "UserBalance",
]
