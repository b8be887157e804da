"""
Reminder derivation.

Turns a snapshot of roommates, bills and chores into the notices shown on the
dashboard. Rules run in a fixed order and every matching rule emits:

1. overdue bills: one high-priority reminder per participant who did not pay;
2. chores due tomorrow: one reminder at the chore's own priority;
3. overdue chores: one reminder, always high priority.

Nothing is de-duplicated or persisted; the same snapshot and day always give
the same list in the same order.
"""

import datetime as dt
from typing import Iterable, List

from roomie.household.balances import format_money
from roomie.household.lookups import resolve_name
from roomie.household.status import (
    DEFAULT_BILL_GRACE_DAYS,
    is_bill_overdue,
    is_chore_due_on,
    is_chore_overdue,
)
from roomie.household.types import Bill, Chore, Priority, Reminder, ReminderKind, Roommate


def bill_reminders(
    roommates: List[Roommate],
    bills: Iterable[Bill],
    today: dt.date,
    grace_days: int = DEFAULT_BILL_GRACE_DAYS,
) -> List[Reminder]:
    reminders = []
    for bill in bills:
        if not is_bill_overdue(bill, today, grace_days):
            continue
        share = format_money(bill.amount / len(bill.split_between))
        for roommate_id in bill.split_between:
            if roommate_id == bill.paid_by:
                continue
            name = resolve_name(roommates, roommate_id)
            reminders.append(Reminder(
                kind=ReminderKind.BILL,
                message=f'{name} hasn\'t paid their share of "{bill.title}" (${share})',
                roommate_id=roommate_id,
                priority=Priority.HIGH,
            ))
    return reminders


def chores_due_tomorrow_reminders(
    roommates: List[Roommate], chores: Iterable[Chore], today: dt.date
) -> List[Reminder]:
    tomorrow = today + dt.timedelta(days=1)
    return [
        Reminder(
            kind=ReminderKind.CHORE,
            message=f'{resolve_name(roommates, chore.assigned_to)} has "{chore.title}" due tomorrow',
            roommate_id=chore.assigned_to,
            priority=chore.priority,
        )
        for chore in chores
        if is_chore_due_on(chore, tomorrow)
    ]


def overdue_chore_reminders(
    roommates: List[Roommate], chores: Iterable[Chore], today: dt.date
) -> List[Reminder]:
    # overdue always escalates, whatever the chore's own priority
    return [
        Reminder(
            kind=ReminderKind.CHORE,
            message=f'{resolve_name(roommates, chore.assigned_to)} has overdue chore: "{chore.title}"',
            roommate_id=chore.assigned_to,
            priority=Priority.HIGH,
        )
        for chore in chores
        if is_chore_overdue(chore, today)
    ]


def derive_reminders(
    roommates: Iterable[Roommate],
    bills: Iterable[Bill],
    chores: Iterable[Chore],
    today: dt.date,
    grace_days: int = DEFAULT_BILL_GRACE_DAYS,
) -> List[Reminder]:
    """All reminders for the household on `today`, bills first, then chores."""
    roommates = list(roommates)
    chores = list(chores)
    return (
        bill_reminders(roommates, bills, today, grace_days)
        + chores_due_tomorrow_reminders(roommates, chores, today)
        + overdue_chore_reminders(roommates, chores, today)
    )
