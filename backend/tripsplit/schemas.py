"""Pydantic schemas for the ledger and computed results."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ----- Ledger -----
class Member(BaseModel):
    id: str
    name: str
    phone: Optional[str] = None


class ExpenseSplit(BaseModel):
    member_id: str
    share: Optional[float] = Field(default=None, allow_inf_nan=False)


class Expense(BaseModel):
    id: str
    title: str
    amount: float = Field(allow_inf_nan=False)
    paid_by: str
    split_between: list[ExpenseSplit] = []
    split_type: Literal["equally", "custom"] = "equally"
    notes: Optional[str] = None
    date: datetime
    settled: bool = False


class Ledger(BaseModel):
    name: str = "Trip"
    currency: str = "USD"
    members: list[Member] = []
    expenses: list[Expense] = []


# ----- Computed -----
class Balances(BaseModel):
    """Per-member maps, keyed in member order. Positive net balance = is owed."""
    net_balance: dict[str, float] = {}
    total_contributed: dict[str, float] = {}


class SettlementItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    from_member_id: str = Field(alias="from")
    to_member_id: str = Field(alias="to")
    amount: float


# ----- Responses -----
class MemberBalance(BaseModel):
    member_id: str
    name: str
    net_balance: float
    total_contributed: float


class BalanceReport(BaseModel):
    currency: str
    total_expenses: float
    expense_count: int
    balances: list[MemberBalance]


class SettlementSummary(BaseModel):
    currency: str
    members: list[Member] = []
    balances: list[MemberBalance]
    settlements: list[SettlementItem]
    settled_up: bool


# ----- Stats -----
class MemberContribution(BaseModel):
    member_id: str
    name: str
    amount: float


class DailyTotal(BaseModel):
    date: str
    total: float


class TitleTotal(BaseModel):
    title: str
    total: float


class TripStats(BaseModel):
    currency: str
    total_expenses: float
    expense_count: int
    contribution_by_member: list[MemberContribution]
    daily_totals: list[DailyTotal]
    title_totals: list[TitleTotal]
