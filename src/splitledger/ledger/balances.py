"""Net balance computation over the full expense log."""

from decimal import Decimal

from ..models import LedgerSnapshot, UserBalance
from .money import round_money


def compute_balances(snapshot: LedgerSnapshot) -> list[UserBalance]:
    """
    Net every expense into one signed balance per registered user.

    The payer is credited with the expense total and each split participant
    is debited their split amount. Balances are rounded to cents only at the
    end, half away from zero.

    Args:
        snapshot: Consistent view of users and expenses

    Returns:
        One balance per registered user in registration order, including
        users who never took part in an expense
    """
    totals: dict[str, Decimal] = {user.id: Decimal("0") for user in snapshot.users}

    for expense in snapshot.expenses:
        totals[expense.paid_by] += expense.total_amount
        for split in expense.splits:
            totals[split.user_id] -= split.amount

    return [
        UserBalance(user_id=user.id, name=user.name, amount=round_money(totals[user.id]))
        for user in snapshot.users
    ]
