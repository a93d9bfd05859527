"""Reduce a ledger to per-member net balances and total contributions."""
import logging

from tripsplit.exceptions import UnknownMemberError
from tripsplit.schemas import Balances, Expense, Ledger

logger = logging.getLogger(__name__)


def _check_references(expense: Expense, member_ids: set[str]) -> None:
    if expense.paid_by not in member_ids:
        raise UnknownMemberError(expense.id, expense.paid_by)
    for split in expense.split_between:
        if split.member_id not in member_ids:
            raise UnknownMemberError(expense.id, split.member_id)


def compute_balances(ledger: Ledger) -> Balances:
    """
    net_balance: member_id -> signed standing from unsettled expenses
    (positive = is owed money, negative = owes money).
    total_contributed: member_id -> everything the member ever paid, settled or not.

    Custom splits only credit the payer; their shares are not deducted yet.
    Raises UnknownMemberError if any expense names a member outside the ledger.
    """
    net_balance: dict[str, float] = {m.id: 0.0 for m in ledger.members}
    total_contributed: dict[str, float] = {m.id: 0.0 for m in ledger.members}

    member_ids = set(net_balance)
    for e in ledger.expenses:
        _check_references(e, member_ids)
        total_contributed[e.paid_by] += e.amount

    active = [e for e in ledger.expenses if not e.settled]
    for e in active:
        net_balance[e.paid_by] += e.amount
        n = len(e.split_between)
        if n == 0:
            continue
        if e.split_type == "equally":
            share = e.amount / n
            for split in e.split_between:
                net_balance[split.member_id] -= share
        else:
            logger.debug("Expense %s has a %s split; no shares deducted", e.id, e.split_type)

    logger.debug(
        "Computed balances for %d members from %d active of %d expenses",
        len(net_balance), len(active), len(ledger.expenses),
    )
    return Balances(net_balance=net_balance, total_contributed=total_contributed)
