from datetime import date, datetime

import pytest

from cashcompass.core.aggregate import Totals, summarize
from cashcompass.core.budget import evaluate_budget
from cashcompass.core.recurrence import EntryDraft
from cashcompass.core.windows import week_window

WEEK = week_window(datetime(2025, 3, 5))


def make_entry(kind, amount, on):
    return EntryDraft(owner_id=1, kind=kind, category="Misc", amount=amount, occurs_on=on)


def test_empty_input_sums_to_zero():
    assert summarize([], WEEK) == Totals(0, 0, 0)
    assert summarize([], None).as_dict() == {"income": 0, "expense": 0, "savings": 0}


def test_sums_by_kind_inside_the_window():
    entries = [
        make_entry("income", 500.0, date(2025, 3, 2)),
        make_entry("expense", 120.0, date(2025, 3, 4)),
        make_entry("expense", 30.0, date(2025, 3, 8)),
    ]

    assert summarize(entries, WEEK) == Totals(500.0, 150.0, 350.0)


def test_entries_outside_the_window_are_ignored():
    entries = [
        make_entry("income", 999.0, date(2025, 3, 1)),
        make_entry("expense", 999.0, date(2025, 3, 9)),
        make_entry("expense", 40.0, date(2025, 3, 3)),
    ]

    assert summarize(entries, WEEK) == Totals(0.0, 40.0, -40.0)


def test_no_window_sums_everything():
    entries = [
        make_entry("income", 10.0, date(2020, 1, 1)),
        make_entry("expense", 25.0, date(2030, 1, 1)),
    ]

    assert summarize(entries, None) == Totals(10.0, 25.0, -15.0)


@pytest.mark.parametrize(
    "limit, expense, notified, expected",
    [
        (100, 89, False, (0.89, False, False)),
        (100, 95, False, (0.95, True, True)),
        (100, 95, True, (0.95, False, True)),
        (100, 90, False, (0.9, True, True)),
        (100, 0, True, (0.0, False, True)),
    ],
)
def test_evaluate_budget(limit, expense, notified, expected):
    assert tuple(evaluate_budget(limit, expense, notified)) == expected


def test_zero_ceiling_has_zero_utilization():
    status = evaluate_budget(0, 50, False)

    assert status.utilization == 0
    assert status.should_notify is False
