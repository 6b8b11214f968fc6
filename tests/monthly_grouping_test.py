"""
Tests for the monthly grouper.
"""
import random
from datetime import date, datetime, timezone, timedelta
from decimal import Decimal

import pytest

from domain.entities import Instant, Text, Transaction
from domain.exceptions import MalformedRecordError
from domain.services.monthly_grouping import MonthlyGrouping, REFERENCE_TIMEZONE


def _at(*args, **kwargs) -> Transaction:
    amount = kwargs.pop("amount", "10")
    type = kwargs.pop("type", "deposit")
    return Transaction(type=type, amount=Decimal(amount), date=Instant(datetime(*args, **kwargs)))


def test_reference_timezone_is_utc():
    assert REFERENCE_TIMEZONE == timezone.utc


def test_empty_input_returns_empty_list():
    assert MonthlyGrouping.group_by_month([]) == []
    assert MonthlyGrouping.summarize([]) == []


def test_single_month_produces_one_group():
    txns = [_at(2024, 5, 1), _at(2024, 5, 31, 23, 59)]
    groups = MonthlyGrouping.group_by_month(txns)
    assert len(groups) == 1
    assert groups[0].key == (2024, 5)
    assert groups[0].transactions == txns


def test_scenario_a_text_and_native_dates_in_same_month():
    first = Transaction(type="deposit", amount=Decimal(100), date=Text("2024-01-05"))
    second = Transaction(type="deposit", amount=Decimal(50), date=Instant(datetime(2024, 1, 20, tzinfo=timezone.utc)))
    groups = MonthlyGrouping.summarize([first, second])

    assert len(groups) == 1
    assert (groups[0].year, groups[0].month) == (2024, 1)
    assert [t.amount for t in groups[0].transactions] == [Decimal(100), Decimal(50)]
    assert all(t.type == "deposit" for t in groups[0].transactions)


def test_scenario_b_groups_most_recent_first():
    txns = [
        Transaction(type="deposit", amount=Decimal(1), date=Text("2024-03-01")),
        Transaction(type="deposit", amount=Decimal(2), date=Text("2024-02-15")),
    ]
    groups = MonthlyGrouping.summarize(txns)
    assert [g.key for g in groups] == [(2024, 3), (2024, 2)]


def test_scenario_c_malformed_date_returns_no_groups():
    txns = [Transaction(type="deposit", amount=Decimal(1), date=Text("not-a-date"))]
    with pytest.raises(MalformedRecordError) as exc_info:
        MonthlyGrouping.summarize(txns, user_id="u-1")
    assert exc_info.value.transaction is txns[0]


def test_groups_order_by_year_before_month():
    txns = [_at(2023, 12, 1), _at(2024, 1, 1), _at(2022, 6, 1), _at(2024, 11, 1)]
    groups = MonthlyGrouping.group_by_month(txns)
    assert [g.key for g in groups] == [(2024, 11), (2024, 1), (2023, 12), (2022, 6)]


def test_within_group_input_order_is_kept_not_date_order():
    late = _at(2024, 4, 28, amount="1")
    early = _at(2024, 4, 2, amount="2")
    middle = _at(2024, 4, 15, amount="3")
    groups = MonthlyGrouping.group_by_month([late, early, middle])
    assert groups[0].transactions == [late, early, middle]


def test_naive_timestamps_are_read_as_utc():
    groups = MonthlyGrouping.group_by_month([_at(2024, 1, 31, 23, 30)])
    assert groups[0].key == (2024, 1)


def test_aware_timestamps_are_converted_to_utc():
    # 00:30 on Feb 1st in UTC+02:00 is still January in UTC
    tz = timezone(timedelta(hours=2))
    txn = Transaction(type="deposit", amount=Decimal(1), date=Instant(datetime(2024, 2, 1, 0, 30, tzinfo=tz)))
    groups = MonthlyGrouping.group_by_month([txn])
    assert groups[0].key == (2024, 1)


def test_text_offsets_group_by_utc_month():
    txn = Transaction(type="deposit", amount=Decimal(1), date=Text("2024-03-31T22:00:00-05:00"))
    groups = MonthlyGrouping.summarize([txn])
    assert groups[0].key == (2024, 4)


def test_plain_dates_are_grouped_by_their_month():
    txn = Transaction(type="deposit", amount=Decimal(1), date=Instant(date(2024, 7, 4)))
    assert MonthlyGrouping.group_by_month([txn])[0].key == (2024, 7)


def test_unnormalized_transaction_is_rejected():
    txn = Transaction(type="deposit", amount=Decimal(1), date=Text("2024-01-01"))
    with pytest.raises(ValueError):
        MonthlyGrouping.group_by_month([txn])


def test_grouping_is_complete_and_ordered_for_random_input():
    rng = random.Random(7)
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    txns = [
        Transaction(
            type=rng.choice(["deposit", "withdrawal"]),
            amount=Decimal(i),
            date=Instant(start + timedelta(days=rng.randint(0, 1500), hours=rng.randint(0, 23))),
        )
        for i in range(300)
    ]
    groups = MonthlyGrouping.group_by_month(txns)

    # nothing dropped or duplicated
    flattened = [t for g in groups for t in g.transactions]
    assert sorted(t.amount for t in flattened) == [Decimal(i) for i in range(300)]

    # strictly descending keys
    keys = [g.key for g in groups]
    assert keys == sorted(keys, reverse=True)
    assert len(keys) == len(set(keys))

    # every group keeps the relative input order
    position = {id(t): i for i, t in enumerate(txns)}
    for g in groups:
        indexes = [position[id(t)] for t in g.transactions]
        assert indexes == sorted(indexes)
        assert all(MonthlyGrouping.month_key(t) == g.key for t in g.transactions)


def test_repeated_runs_are_identical():
    txns = [_at(2024, m, d) for m in (3, 1, 2) for d in (9, 1)]
    first = MonthlyGrouping.group_by_month(txns)
    second = MonthlyGrouping.group_by_month(list(txns))
    assert first == second
