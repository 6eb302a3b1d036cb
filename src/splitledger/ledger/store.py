"""In-memory ledger store guarded by a reader/writer lock."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ..exceptions import DuplicateUserError
from ..models import Expense, LedgerSnapshot, User
from .validation import validate_expense, validate_user


class ReadWriteLock:
    """
    Many concurrent readers or one exclusive writer.

    Waiting writers block new readers from entering, so a steady stream of
    queries cannot starve an expense being recorded.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the block."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class LedgerStore:
    """Registered users and the append-only expense log."""

    def __init__(self):
        """Initialize an empty ledger."""
        self._users: dict[str, User] = {}
        self._expenses: list[Expense] = []
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._expenses)

    # ========================================================================
    # Users
    # ========================================================================

    def register_user(self, user: User) -> User:
        """
        Add a user to the ledger.

        Raises:
            InvalidInputError: If id or name is empty
            DuplicateUserError: If the id is already registered
        """
        validate_user(user)
        with self._lock.write_locked():
            if user.id in self._users:
                raise DuplicateUserError(user.id)
            self._users[user.id] = user
        return user

    def list_users(self) -> list[User]:
        """Return a copy of all registered users (order is not guaranteed)."""
        with self._lock.read_locked():
            return list(self._users.values())

    # ========================================================================
    # Expenses
    # ========================================================================

    def append_expense(self, expense: Expense) -> Expense:
        """
        Validate an expense and append it to the log as one atomic step.

        Raises:
            InvalidInputError: If a user reference is empty or an amount is out of range
            UnknownUserError: If the payer or a split user is not registered
            AmountMismatchError: If the splits do not add up to the total
        """
        with self._lock.write_locked():
            validate_expense(expense, self._users)
            self._expenses.append(expense)
        return expense

    def list_expenses(self) -> list[Expense]:
        """Return a copy of all expenses in insertion order."""
        with self._lock.read_locked():
            return list(self._expenses)

    def snapshot(self) -> LedgerSnapshot:
        """Copy users and expenses under a single read lock."""
        with self._lock.read_locked():
            return LedgerSnapshot(
                users=tuple(self._users.values()),
                expenses=tuple(self._expenses),
            )
