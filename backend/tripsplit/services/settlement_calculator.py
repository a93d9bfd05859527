"""Plan the transfers that settle everyone up (who owes whom)."""
import logging
import math
from collections.abc import Mapping

from tripsplit.schemas import Balances, Ledger, SettlementItem
from tripsplit.services.balance_calculator import compute_balances
from tripsplit.services.tolerance import EPSILON, is_creditor, is_debtor, is_negligible

logger = logging.getLogger(__name__)


def plan_settlements(net_balance: Mapping[str, float]) -> list[SettlementItem]:
    """
    net_balance: member_id -> net balance (positive = is owed money, negative = owes money).
    Returns transfers that bring every balance within EPSILON of zero.

    Greedy two-pointer pass: debtors and creditors keep the mapping's iteration
    order (no sort by size), so ties go to whoever comes first in the ledger.
    Every step closes out a debtor or a creditor. Amounts are not rounded.
    Non-finite balances (overflowed sums) take part in no transfer.
    """
    finite = [(mid, bal) for mid, bal in net_balance.items() if math.isfinite(bal)]
    if len(finite) != len(net_balance):
        logger.warning("Skipping %d non-finite balances", len(net_balance) - len(finite))
    owers = [[mid, bal] for mid, bal in finite if is_debtor(bal)]
    oweds = [[mid, bal] for mid, bal in finite if is_creditor(bal)]

    out: list[SettlementItem] = []
    i, j = 0, 0
    while i < len(owers) and j < len(oweds):
        ower, owed = owers[i], oweds[j]
        amount = min(abs(ower[1]), owed[1])
        if amount > EPSILON:
            out.append(SettlementItem(from_member_id=ower[0], to_member_id=owed[0], amount=amount))
        ower[1] += amount
        owed[1] -= amount
        ower_done = is_negligible(ower[1])
        owed_done = owed[1] < EPSILON
        if not (ower_done or owed_done):
            # unreachable for finite input; keeps the loop bounded
            logger.warning("Settlement step for %s -> %s made no progress", ower[0], owed[0])
            break
        i += ower_done
        j += owed_done

    logger.debug("Planned %d transfers for %d debtors, %d creditors", len(out), len(owers), len(oweds))
    return out


def settle_ledger(ledger: Ledger) -> tuple[Balances, list[SettlementItem]]:
    """Balances plus the settlement plan; the one path every caller goes through."""
    balances = compute_balances(ledger)
    return balances, plan_settlements(balances.net_balance)
