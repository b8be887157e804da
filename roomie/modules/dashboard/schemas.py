from pydantic import BaseModel
from typing import List
import datetime as dt
from decimal import Decimal

from roomie.household.types import ChoreProgress, HouseholdStats, Reminder


class RoommateBalance(BaseModel):
    roommate_id: str
    name: str
    color: str
    balance: Decimal
    display: str  # e.g. "+$100.00"
    label: str  # "Owed to you" | "You owe"


class RoommateProgress(ChoreProgress):
    name: str
    color: str


class RecentBill(BaseModel):
    id: str
    title: str
    amount: Decimal
    category: str
    paid_by: str
    paid_by_name: str
    date: dt.date
    settled: bool


class DashboardResponse(BaseModel):
    today: dt.date
    stats: HouseholdStats
    balances: List[RoommateBalance]
    chore_progress: List[RoommateProgress]
    recent_bills: List[RecentBill]
    reminders: List[Reminder]
