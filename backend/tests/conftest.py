import pytest
from fastapi.testclient import TestClient

from tripsplit.main import app
from tripsplit.schemas import Ledger


def _expense(eid, amount, paid_by, split, split_type="equally", settled=False, shares=None, title=None, date=None):
    return {
        "id": eid,
        "title": title or f"Expense {eid}",
        "amount": amount,
        "paid_by": paid_by,
        "split_between": [
            {"member_id": m, "share": (shares or {}).get(m)} for m in split
        ],
        "split_type": split_type,
        "date": date or "2024-06-01T12:00:00",
        "settled": settled,
    }


def _ledger(member_ids, expenses=(), name="Beach Trip"):
    return {
        "name": name,
        "currency": "EUR",
        "members": [{"id": m, "name": f"Member {m}"} for m in member_ids],
        "expenses": list(expenses),
    }


@pytest.fixture
def make_expense():
    """Expense JSON body."""
    return _expense


@pytest.fixture
def make_ledger():
    """Ledger JSON body; members are named "Member <id>"."""
    return _ledger


@pytest.fixture
def build_ledger():
    """Validated Ledger model."""
    def build(member_ids, expenses=(), name="Beach Trip"):
        return Ledger.model_validate(_ledger(member_ids, expenses, name=name))
    return build


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def dinner_ledger():
    """A pays 90 for A, B, C."""
    return _ledger(["A", "B", "C"], [_expense("e1", 90.0, "A", ["A", "B", "C"])])


@pytest.fixture
def dinner(dinner_ledger):
    return Ledger.model_validate(dinner_ledger)
