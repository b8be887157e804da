"""Completed / pending / overdue classification for chores and bills.

Every predicate takes the reference day from the caller so results do not
depend on when they run.
"""

import datetime as dt
from typing import Iterable

from roomie.household.types import Bill, Chore, ChoreProgress, HouseholdStats

DEFAULT_BILL_GRACE_DAYS = 1


def is_chore_overdue(chore: Chore, today: dt.date) -> bool:
    return not chore.completed and chore.due_date < today


def is_chore_due_on(chore: Chore, day: dt.date) -> bool:
    return not chore.completed and chore.due_date == day


def is_bill_overdue(bill: Bill, today: dt.date, grace_days: int = DEFAULT_BILL_GRACE_DAYS) -> bool:
    """An unsettled bill is overdue once grace_days whole days have passed since its date."""
    return not bill.settled and (today - bill.date).days >= grace_days


def count_completed_chores(chores: Iterable[Chore]) -> int:
    return sum(1 for chore in chores if chore.completed)


def count_pending_chores(chores: Iterable[Chore]) -> int:
    return sum(1 for chore in chores if not chore.completed)


def count_overdue_chores(chores: Iterable[Chore], today: dt.date) -> int:
    return sum(1 for chore in chores if is_chore_overdue(chore, today))


def chore_progress(chores: Iterable[Chore], roommate_id: str) -> ChoreProgress:
    """Completed vs. assigned chores for one roommate; 0% when nothing is assigned."""
    assigned = [chore for chore in chores if chore.assigned_to == roommate_id]
    completed = count_completed_chores(assigned)
    percent = (completed / len(assigned)) * 100 if assigned else 0.0
    return ChoreProgress(
        roommate_id=roommate_id,
        completed=completed,
        total=len(assigned),
        percent=percent,
    )


def summarize(bills: Iterable[Bill], chores: Iterable[Chore], today: dt.date) -> HouseholdStats:
    chores = list(chores)
    return HouseholdStats(
        total_bills=len(list(bills)),
        completed_chores=count_completed_chores(chores),
        pending_chores=count_pending_chores(chores),
        overdue_chores=count_overdue_chores(chores, today),
    )
