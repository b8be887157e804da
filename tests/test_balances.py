"""Tests for roomie.household.balances"""

from datetime import date
from decimal import Decimal

import pytest

from roomie.household.balances import (
    balance_label,
    bill_contribution,
    compute_balance,
    compute_balances,
    format_balance,
    format_money,
    payer_inclusive_contribution,
    select_contribution,
)
from roomie.household.types import Bill, Roommate


def make_bill(amount, paid_by, split_between, settled=False, bill_id="b1"):
    return Bill(
        id=bill_id,
        title="Groceries",
        amount=Decimal(amount),
        paid_by=paid_by,
        split_between=split_between,
        date=date(2024, 6, 1),
        settled=settled,
    )


def make_roommates(*ids):
    return [Roommate(id=i, name=f"Roommate {i}", email=f"{i}@example.com") for i in ids]


class TestComputeBalance:
    def test_three_way_split(self):
        bills = [make_bill("150", "1", ["1", "2", "3"])]
        assert compute_balance(bills, "1") == Decimal("100")
        assert compute_balance(bills, "2") == Decimal("-50")
        assert compute_balance(bills, "3") == Decimal("-50")

    def test_settled_bill_contributes_nothing(self):
        bills = [make_bill("150", "1", ["1", "2", "3"], settled=True)]
        assert compute_balance(bills, "1") == 0
        assert compute_balance(bills, "2") == 0

    def test_two_bills_net_out(self):
        bills = [
            make_bill("150", "1", ["1", "2", "3"], bill_id="b1"),
            make_bill("90", "2", ["1", "2", "3"], bill_id="b2"),
        ]
        assert compute_balance(bills, "1") == Decimal("70")
        assert compute_balance(bills, "2") == Decimal("10")
        assert compute_balance(bills, "3") == Decimal("-80")

    def test_no_bills(self):
        assert compute_balance([], "1") == 0

    def test_unrelated_roommate(self):
        bills = [make_bill("150", "1", ["1", "2"])]
        assert compute_balance(bills, "9") == 0

    def test_payer_outside_split_keeps_legacy_credit(self):
        # the payer is credited (N - 1) shares even when not splitting
        bills = [make_bill("100", "1", ["2", "3"])]
        assert compute_balance(bills, "1") == Decimal("50")
        assert compute_balance(bills, "2") == Decimal("-50")
        assert compute_balance(bills, "3") == Decimal("-50")

    def test_single_participant_who_paid(self):
        bills = [make_bill("40", "1", ["1"])]
        assert compute_balance(bills, "1") == 0

    def test_repeatable(self):
        bills = [make_bill("150", "1", ["1", "2", "3"])]
        assert compute_balance(bills, "2") == compute_balance(bills, "2")


class TestComputeBalances:
    def test_all_settled_gives_zero_everywhere(self):
        bills = [
            make_bill("150", "1", ["1", "2", "3"], settled=True, bill_id="b1"),
            make_bill("30", "3", ["2", "3"], settled=True, bill_id="b2"),
        ]
        balances = compute_balances(bills, make_roommates("1", "2", "3"))
        assert all(v == 0 for v in balances.values())

    def test_sums_to_zero_when_payer_splits(self):
        bills = [
            make_bill("120", "1", ["1", "2", "3"], bill_id="b1"),
            make_bill("45.50", "2", ["1", "2"], bill_id="b2"),
        ]
        balances = compute_balances(bills, make_roommates("1", "2", "3"))
        assert sum(balances.values()) == 0

    def test_keeps_roommate_order(self):
        balances = compute_balances([], make_roommates("3", "1", "2"))
        assert list(balances) == ["3", "1", "2"]


class TestPayerInclusive:
    def test_payer_outside_split_takes_a_share(self):
        bill = make_bill("90", "1", ["2", "3"])
        assert payer_inclusive_contribution(bill, "1") == Decimal("60")
        assert payer_inclusive_contribution(bill, "2") == Decimal("-30")
        assert payer_inclusive_contribution(bill, "3") == Decimal("-30")

    def test_same_as_default_when_payer_splits(self):
        bill = make_bill("150", "1", ["1", "2", "3"])
        for rid in ["1", "2", "3", "4"]:
            assert payer_inclusive_contribution(bill, rid) == bill_contribution(bill, rid)

    def test_select_contribution(self):
        assert select_contribution(False) is bill_contribution
        assert select_contribution(True) is payer_inclusive_contribution


class TestDisplay:
    @pytest.mark.parametrize("value,expected", [
        (Decimal("33.335"), "33.34"),
        (Decimal("50"), "50.00"),
        (Decimal("100") / 3, "33.33"),
    ])
    def test_format_money(self, value, expected):
        assert format_money(value) == expected

    def test_format_balance_signs(self):
        assert format_balance(Decimal("100")) == "+$100.00"
        assert format_balance(Decimal("-50")) == "-$50.00"
        assert format_balance(Decimal("0")) == "+$0.00"

    def test_balance_label(self):
        assert balance_label(Decimal("0")) == "Owed to you"
        assert balance_label(Decimal("-0.01")) == "You owe"
