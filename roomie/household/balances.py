"""
Balance calculation over bill snapshots.

A positive balance means the household owes the roommate money, a negative one
means the roommate owes. Amounts stay exact Decimals; rounding is only applied
by the display helpers at the bottom of this module.

The default contribution keeps the long-standing payer formula: the payer is
credited (N - 1) shares of amount / N even when they are not part of the
split, so such a bill credits more than it collects. payer_inclusive_contribution
divides by split_between plus the payer instead; it is opt-in through
settings.balance_payer_inclusive and never replaces the default silently.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable

from roomie.household.types import Bill, Roommate

ZERO = Decimal("0")
CENT = Decimal("0.01")

Contribution = Callable[[Bill, str], Decimal]


def bill_contribution(bill: Bill, roommate_id: str) -> Decimal:
    """What a single bill adds to a roommate's balance."""
    if bill.settled:
        return ZERO
    participants = len(bill.split_between)
    share = bill.amount / participants
    if bill.paid_by == roommate_id:
        return (participants - 1) * share
    if roommate_id in bill.split_between:
        return -share
    return ZERO


def payer_inclusive_contribution(bill: Bill, roommate_id: str) -> Decimal:
    """Same as bill_contribution, but the payer always takes one share of the division."""
    if bill.settled:
        return ZERO
    members = set(bill.split_between)
    members.add(bill.paid_by)
    participants = len(members)
    share = bill.amount / participants
    if bill.paid_by == roommate_id:
        return (participants - 1) * share
    if roommate_id in members:
        return -share
    return ZERO


def compute_balance(
    bills: Iterable[Bill],
    roommate_id: str,
    contribution: Contribution = bill_contribution,
) -> Decimal:
    return sum((contribution(bill, roommate_id) for bill in bills), ZERO)


def compute_balances(
    bills: Iterable[Bill],
    roommates: Iterable[Roommate],
    contribution: Contribution = bill_contribution,
) -> Dict[str, Decimal]:
    """Balance of every roommate, keyed by id in snapshot order."""
    bills = list(bills)
    return {
        roommate.id: compute_balance(bills, roommate.id, contribution)
        for roommate in roommates
    }


def select_contribution(payer_inclusive: bool) -> Contribution:
    return payer_inclusive_contribution if payer_inclusive else bill_contribution


# Display helpers


def format_money(value: Decimal) -> str:
    """Round half-up to cents, e.g. Decimal("33.335") -> "33.34"."""
    return str(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


def format_balance(value: Decimal) -> str:
    rounded = Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    if rounded >= 0:
        return f"+${abs(rounded)}"
    return f"-${abs(rounded)}"


def balance_label(value: Decimal) -> str:
    return "Owed to you" if value >= 0 else "You owe"
