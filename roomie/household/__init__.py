"""Pure household logic: balances, chore/bill status, reminders and lookups.

Nothing in this package performs I/O or reads the clock.
"""

from roomie.household.balances import compute_balance, compute_balances
from roomie.household.reminders import derive_reminders
from roomie.household.status import (
    count_completed_chores,
    count_overdue_chores,
    count_pending_chores,
    is_bill_overdue,
    is_chore_overdue,
)

__all__ = [
    "compute_balance",
    "compute_balances",
    "derive_reminders",
    "count_completed_chores",
    "count_overdue_chores",
    "count_pending_chores",
    "is_bill_overdue",
    "is_chore_overdue",
]
