from supabase import Client
from roomie.config.settings import settings
from roomie.household.balances import (
    balance_label, compute_balances, format_balance, select_contribution
)
from roomie.household.lookups import resolve_color, resolve_name
from roomie.household.reminders import derive_reminders
from roomie.household.status import chore_progress, summarize
from roomie.household.types import Bill, Chore, HouseholdStats, Reminder, Roommate
from roomie.modules.bills.service import BillService
from roomie.modules.chores.service import ChoreService
from roomie.modules.dashboard.schemas import (
    DashboardResponse, RecentBill, RoommateBalance, RoommateProgress
)
from roomie.modules.roommates.service import RoommateService
from typing import List, Tuple
from datetime import date
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

HouseholdSnapshot = Tuple[List[Roommate], List[Bill], List[Chore]]


class DashboardService:
    """Read-only household overview computed from one snapshot of the store."""

    def __init__(
        self,
        supabase: Client,
        payer_inclusive: bool = settings.balance_payer_inclusive,
        grace_days: int = settings.bill_grace_days,
        recent_bills_limit: int = settings.recent_bills_limit
    ):
        self.supabase = supabase
        self.contribution = select_contribution(payer_inclusive)
        self.grace_days = grace_days
        self.recent_bills_limit = recent_bills_limit

    def load_snapshot(self) -> HouseholdSnapshot:
        roommates = RoommateService(self.supabase).list_roommates()
        bills = BillService(self.supabase).list_bills()
        chores = ChoreService(self.supabase).list_chores()
        return roommates, bills, chores

    def build_balances(self, roommates: List[Roommate], bills: List[Bill]) -> List[RoommateBalance]:
        balances = compute_balances(bills, roommates, self.contribution)
        return [
            RoommateBalance(
                roommate_id=roommate.id,
                name=roommate.name,
                color=resolve_color(roommates, roommate.id),
                balance=balances[roommate.id],
                display=format_balance(balances[roommate.id]),
                label=balance_label(balances[roommate.id]),
            )
            for roommate in roommates
        ]

    def build_recent_bills(self, roommates: List[Roommate], bills: List[Bill]) -> List[RecentBill]:
        # bills arrive newest first
        return [
            RecentBill(
                id=bill.id,
                title=bill.title,
                amount=bill.amount,
                category=bill.category,
                paid_by=bill.paid_by,
                paid_by_name=resolve_name(roommates, bill.paid_by),
                date=bill.date,
                settled=bill.settled,
            )
            for bill in bills[:self.recent_bills_limit]
        ]

    def get_dashboard(self, today: date) -> DashboardResponse:
        roommates, bills, chores = self.load_snapshot()
        return DashboardResponse(
            today=today,
            stats=summarize(bills, chores, today),
            balances=self.build_balances(roommates, bills),
            chore_progress=[
                RoommateProgress(
                    **chore_progress(chores, roommate.id).model_dump(),
                    name=roommate.name,
                    color=resolve_color(roommates, roommate.id),
                )
                for roommate in roommates
            ],
            recent_bills=self.build_recent_bills(roommates, bills),
            reminders=derive_reminders(roommates, bills, chores, today, self.grace_days),
        )

    def get_balances(self) -> List[RoommateBalance]:
        roommates, bills, _ = self.load_snapshot()
        return self.build_balances(roommates, bills)

    def get_balance(self, roommate_id: str) -> RoommateBalance:
        for balance in self.get_balances():
            if balance.roommate_id == roommate_id:
                return balance
        raise HTTPException(status_code=404, detail="Roommate not found")

    def get_reminders(self, today: date) -> List[Reminder]:
        roommates, bills, chores = self.load_snapshot()
        return derive_reminders(roommates, bills, chores, today, self.grace_days)

    def get_stats(self, today: date) -> HouseholdStats:
        _, bills, chores = self.load_snapshot()
        return summarize(bills, chores, today)
