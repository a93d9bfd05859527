"""Floating-point tolerance shared by the balance and settlement code."""

# Smallest amount (in the ledger's currency unit) treated as non-zero.
EPSILON = 0.01


def is_negligible(value: float) -> bool:
    return abs(value) < EPSILON


def is_debtor(balance: float) -> bool:
    return balance < -EPSILON


def is_creditor(balance: float) -> bool:
    return balance > EPSILON


def round_money(value: float) -> float:
    """Round for display; never used inside the algorithms."""
    rounded = round(value, 2)
    return 0.0 if rounded == 0 else rounded
