"""Greedy debt settlement.

Matches the largest debtor against the largest creditor until one side runs
out. Each round fully clears at least one party, so for D debtors and C
creditors at most D + C - 1 payments are produced.

This is a heuristic. Finding the true minimum number of payments for an
arbitrary set of balances is a partition problem (NP-hard), and greedy
matching can miss it. Balances {A: -4, B: -3, C: -3, D: +6, E: +4} take four
payments here, while A->E 4, B->D 3, C->D 3 needs only three.
"""

import heapq
from decimal import Decimal

from ..models import Settlement, UserBalance
from .money import CENT, TOLERANCE, round_money

# Heap entry: (-magnitude, position in input, user id).
# Ties on magnitude go to the user listed first.
_Entry = tuple[Decimal, int, str]


def _push(heap: list[_Entry], magnitude: Decimal, position: int, user_id: str) -> None:
    heapq.heappush(heap, (-magnitude, position, user_id))


def compute_settlements(balances: list[UserBalance]) -> list[Settlement]:
    """
    Produce payments that bring every balance to zero.

    Steps:
    1. Split users into debtors (< -0.01) and creditors (> 0.01)
    2. Pay min(largest debt, largest credit) from debtor to creditor
    3. Return any party with a remaining balance of at least a cent
    4. Stop when either side is empty

    Args:
        balances: Net balances, typically from compute_balances

    Returns:
        Payments in the order they were chosen; each amount is positive and
        rounded to cents
    """
    debtors: list[_Entry] = []
    creditors: list[_Entry] = []

    for position, balance in enumerate(balances):
        amount = round_money(balance.amount)
        if amount < -TOLERANCE:
            _push(debtors, -amount, position, balance.user_id)
        elif amount > TOLERANCE:
            _push(creditors, amount, position, balance.user_id)

    settlements: list[Settlement] = []

    while debtors and creditors:
        neg_debt, debtor_pos, debtor = heapq.heappop(debtors)
        neg_credit, creditor_pos, creditor = heapq.heappop(creditors)
        debt, credit = -neg_debt, -neg_credit

        payment = round_money(min(debt, credit))
        settlements.append(
            Settlement(from_user=debtor, to_user=creditor, amount=payment)
        )

        remaining_debt = debt - payment
        remaining_credit = credit - payment

        if remaining_debt >= CENT:
            _push(debtors, remaining_debt, debtor_pos, debtor)
        if remaining_credit >= CENT:
            _push(creditors, remaining_credit, creditor_pos, creditor)

    return settlements
