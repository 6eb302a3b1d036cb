"""Decimal helpers shared by validation, balances and settlement."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")

# Absolute tolerance for split sums and for treating a balance as settled
TOLERANCE = Decimal("0.01")

# Largest magnitude accepted for a single amount. Sums of many such amounts
# stay far below the 28-digit context precision that quantize needs.
MAX_AMOUNT = Decimal("1e15")


def round_money(amount: Decimal) -> Decimal:
    """
    Round a Decimal amount to whole cents.
    Uses ROUND_HALF_UP, which rounds halves away from zero.

    Args:
        amount: Amount as Decimal

    Returns:
        Amount quantized to two decimal places
    """
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
