"""Service layer that composes the ledger store and the balance engines.

This is the API transports call into. Every query re-derives its result from
a fresh snapshot of the store, so balances always reflect the latest
committed expense.
"""

import logging
import uuid
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import LedgerFileError, SplitLedgerError
from ..models import Expense, LedgerFile, Settlement, User, UserBalance
from .balances import compute_balances
from .settlement import compute_settlements
from .store import LedgerStore

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for recording shared expenses and settling up."""

    def __init__(self, store: LedgerStore | None = None):
        """Initialize the service with its own store unless one is given."""
        self.store = store if store is not None else LedgerStore()

    def register_user(self, user: User) -> User:
        """
        Register a new participant.

        Raises:
            InvalidInputError: If id or name is empty
            DuplicateUserError: If the id is already registered
        """
        try:
            registered = self.store.register_user(user)
        except SplitLedgerError as e:
            logger.warning(f"Rejected user {user.id!r}: {e}")
            raise

        logger.info(f"Registered user {registered.id} ({registered.name})")
        return registered

    def record_expense(self, expense: Expense) -> Expense:
        """
        Record a shared expense.

        An expense without an id gets a generated one; the stored expense is
        returned.

        Raises:
            InvalidInputError: If a user reference is empty or an amount is out of range
            UnknownUserError: If the payer or a split user is not registered
            AmountMismatchError: If the splits do not add up to the total
        """
        if not expense.id:
            expense = expense.model_copy(update={"id": uuid.uuid4().hex})

        try:
            recorded = self.store.append_expense(expense)
        except SplitLedgerError as e:
            logger.warning(f"Rejected expense {expense.id}: {e}")
            raise

        logger.info(
            f"Recorded expense {recorded.id} '{recorded.description}': "
            f"{recorded.total_amount} paid by {recorded.paid_by}, "
            f"{len(recorded.splits)} splits"
        )
        return recorded

    def list_users(self) -> list[User]:
        """All registered users."""
        return self.store.list_users()

    def list_expenses(self) -> list[Expense]:
        """All recorded expenses in the order they were accepted."""
        return self.store.list_expenses()

    def compute_balances(self) -> list[UserBalance]:
        """Net balance for every registered user."""
        snapshot = self.store.snapshot()
        balances = compute_balances(snapshot)
        logger.debug(
            f"Computed {len(balances)} balances from {len(snapshot.expenses)} expenses"
        )
        return balances

    def compute_settlement(self) -> list[Settlement]:
        """Payments that would clear every outstanding balance."""
        settlements = compute_settlements(self.compute_balances())
        logger.debug(f"Settlement plan has {len(settlements)} payments")
        return settlements


def load_ledger_file(path: Path, service: ExpenseService) -> LedgerFile:
    """
    Read a JSON ledger document and replay it into a service.

    Users are registered first, then expenses are recorded in document order,
    so the usual validation rules apply to every entry.

    Args:
        path: Path to the JSON document
        service: Service to load into

    Returns:
        The parsed document

    Raises:
        LedgerFileError: If the file is missing or malformed
        SplitLedgerError: If an entry is rejected by the ledger
    """
    try:
        document = LedgerFile.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise LedgerFileError(f"Cannot read ledger file {path}: {e}") from e
    except ValidationError as e:
        raise LedgerFileError(f"Invalid ledger file {path}:\n{e}") from e

    for user in document.users:
        service.register_user(user)
    for expense in document.expenses:
        service.record_expense(expense)

    logger.info(
        f"Loaded {len(document.users)} users and {len(document.expenses)} "
        f"expenses from {path}"
    )
    return document
