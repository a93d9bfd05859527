"""Balances and settlements: who paid what, who owes whom for a ledger."""
import logging
from typing import Callable

from fastapi import APIRouter, HTTPException

from tripsplit.exceptions import UnknownMemberError
from tripsplit.schemas import (
    Balances, BalanceReport, Ledger, MemberBalance, SettlementItem, SettlementSummary, TripStats,
)
from tripsplit.services.settlement_calculator import settle_ledger
from tripsplit.services.stats import trip_stats
from tripsplit.services.tolerance import round_money

logger = logging.getLogger(__name__)

router = APIRouter(tags=["balances"])


def _checked(compute: Callable, ledger: Ledger):
    try:
        return compute(ledger)
    except UnknownMemberError as exc:
        logger.warning("Rejected ledger %r: %s", ledger.name, exc)
        raise HTTPException(status_code=400, detail=str(exc))


def _member_balances(ledger: Ledger, balances: Balances) -> list[MemberBalance]:
    return [
        MemberBalance(
            member_id=m.id,
            name=m.name,
            net_balance=round_money(balances.net_balance[m.id]),
            total_contributed=round_money(balances.total_contributed[m.id]),
        )
        for m in ledger.members
    ]


@router.post("/balances", response_model=BalanceReport)
def get_balances(ledger: Ledger):
    balances, _ = _checked(settle_ledger, ledger)
    return BalanceReport(
        currency=ledger.currency,
        total_expenses=round_money(sum(e.amount for e in ledger.expenses)),
        expense_count=len(ledger.expenses),
        balances=_member_balances(ledger, balances),
    )


@router.post("/settlements", response_model=SettlementSummary)
def get_settlements(ledger: Ledger):
    balances, settlements = _checked(settle_ledger, ledger)
    return SettlementSummary(
        currency=ledger.currency,
        members=ledger.members,
        balances=_member_balances(ledger, balances),
        settlements=[
            SettlementItem(from_member_id=s.from_member_id, to_member_id=s.to_member_id, amount=round_money(s.amount))
            for s in settlements
        ],
        settled_up=not settlements,
    )


@router.post("/stats", response_model=TripStats)
def get_stats(ledger: Ledger):
    return _checked(trip_stats, ledger)
