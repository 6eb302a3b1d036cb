"""Validation rules applied before anything is admitted to the ledger.

These functions are pure: they inspect a candidate value against the set of
registered user ids and raise on the first problem found. The store calls
them while holding its write lock, so the check and the mutation that
follows are observed as one unit.
"""

from collections.abc import Container
from decimal import Decimal

from ..exceptions import AmountMismatchError, InvalidInputError, UnknownUserError
from ..models import Expense, User
from .money import MAX_AMOUNT, TOLERANCE


def validate_user(user: User) -> None:
    """
    Check that a user has a non-empty id and name.

    Raises:
        InvalidInputError: If id or name is empty or whitespace only
    """
    if not user.id.strip():
        raise InvalidInputError("User ID is required")
    if not user.name.strip():
        raise InvalidInputError(f"Name is required for user {user.id}")


def _validate_amount(amount: Decimal, label: str) -> None:
    if not amount.is_finite() or abs(amount) >= MAX_AMOUNT:
        raise InvalidInputError(
            f"{label} {amount} is out of range (must be below {MAX_AMOUNT:,f})"
        )


def validate_expense(expense: Expense, user_ids: Container[str]) -> None:
    """
    Check required fields, referential integrity and amounts of an expense.

    Order of checks: empty user references, payer, each split in order,
    amount range, then the amount sum.

    Args:
        expense: Candidate expense
        user_ids: Ids of all registered users

    Raises:
        InvalidInputError: If a user reference is empty or an amount is out of range
        UnknownUserError: If the payer or a split participant is not registered
        AmountMismatchError: If |total - sum(splits)| exceeds 0.01
    """
    if not expense.paid_by.strip():
        raise InvalidInputError("Payer is required")
    if any(not split.user_id.strip() for split in expense.splits):
        raise InvalidInputError("User ID is required for every split")

    if expense.paid_by not in user_ids:
        raise UnknownUserError(expense.paid_by, role="payer")

    for split in expense.splits:
        if split.user_id not in user_ids:
            raise UnknownUserError(split.user_id, role="user in split")

    _validate_amount(expense.total_amount, "Total amount")
    for split in expense.splits:
        _validate_amount(split.amount, f"Split amount for {split.user_id}")

    split_total = expense.split_total
    if abs(expense.total_amount - split_total) > TOLERANCE:
        raise AmountMismatchError(expense.total_amount, split_total)
