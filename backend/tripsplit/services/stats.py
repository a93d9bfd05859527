"""Spending breakdowns for a ledger: per member, per day, per title."""
from tripsplit.schemas import DailyTotal, Ledger, MemberContribution, TitleTotal, TripStats
from tripsplit.services.balance_calculator import compute_balances
from tripsplit.services.tolerance import round_money


def contribution_by_member(ledger: Ledger) -> list[MemberContribution]:
    """Total paid per member, settled expenses included; members who paid nothing are left out."""
    totals = compute_balances(ledger).total_contributed
    return [
        MemberContribution(member_id=m.id, name=m.name, amount=round_money(totals[m.id]))
        for m in ledger.members
        if totals[m.id] > 0
    ]


def daily_totals(ledger: Ledger) -> list[DailyTotal]:
    totals: dict[str, float] = {}
    for e in ledger.expenses:
        day = e.date.strftime("%Y-%m-%d")
        totals[day] = totals.get(day, 0.0) + e.amount
    return [DailyTotal(date=day, total=round_money(total)) for day, total in sorted(totals.items())]


def title_totals(ledger: Ledger) -> list[TitleTotal]:
    """Totals grouped by expense title, largest first."""
    totals: dict[str, float] = {}
    for e in ledger.expenses:
        totals[e.title] = totals.get(e.title, 0.0) + e.amount
    ranked = sorted(totals.items(), key=lambda item: -item[1])
    return [TitleTotal(title=title, total=round_money(total)) for title, total in ranked]


def trip_stats(ledger: Ledger) -> TripStats:
    return TripStats(
        currency=ledger.currency,
        total_expenses=round_money(sum(e.amount for e in ledger.expenses)),
        expense_count=len(ledger.expenses),
        contribution_by_member=contribution_by_member(ledger),
        daily_totals=daily_totals(ledger),
        title_totals=title_totals(ledger),
    )
