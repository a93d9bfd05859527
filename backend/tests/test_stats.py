from tripsplit.services.stats import contribution_by_member, daily_totals, title_totals, trip_stats


def test_contribution_skips_members_who_paid_nothing(dinner):
    assert [(c.member_id, c.amount) for c in contribution_by_member(dinner)] == [("A", 90.0)]


def test_daily_totals_sorted_by_date(build_ledger, make_expense):
    ledger = build_ledger(["A"], [
        make_expense("e1", 10.0, "A", ["A"], date="2024-06-03T08:00:00"),
        make_expense("e2", 20.0, "A", ["A"], date="2024-05-30T08:00:00"),
        make_expense("e3", 5.5, "A", ["A"], date="2024-06-03T23:00:00"),
    ])
    assert [(d.date, d.total) for d in daily_totals(ledger)] == [("2024-05-30", 20.0), ("2024-06-03", 15.5)]


def test_title_totals_largest_first(build_ledger, make_expense):
    ledger = build_ledger(["A"], [
        make_expense("e1", 12.0, "A", ["A"], title="Coffee"),
        make_expense("e2", 80.0, "A", ["A"], title="Hotel"),
        make_expense("e3", 12.0, "A", ["A"], title="Coffee"),
        make_expense("e4", 24.0, "A", ["A"], title="Museum"),
    ])
    # equal totals keep first-seen order
    assert [(t.title, t.total) for t in title_totals(ledger)] == [("Hotel", 80.0), ("Coffee", 24.0), ("Museum", 24.0)]


def test_empty_ledger_stats(build_ledger):
    stats = trip_stats(build_ledger([]))
    assert stats.total_expenses == 0.0
    assert stats.expense_count == 0
    assert stats.contribution_by_member == []
    assert stats.daily_totals == []
    assert stats.title_totals == []
