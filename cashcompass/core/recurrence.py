"""Expand a recurring entry template into the concrete entries to store.

Expansion happens once, at creation time. The result is a finite batch of
dated drafts; nothing is scheduled afterwards.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

MONTHLY = "monthly"
YEARLY = "yearly"


@dataclass(frozen=True)
class EntryDraft:
    owner_id: int
    kind: str
    category: str
    amount: float
    occurs_on: date
    note: str = ""
    period: Optional[str] = None

    def as_row(self) -> dict:
        return {
            "user_id": self.owner_id,
            "kind": self.kind,
            "category": self.category,
            "amount": self.amount,
            "note": self.note,
            "occurs_on": self.occurs_on,
            "recurrence_period": self.period,
        }


def _monthly_dates(start: date, reference_year: int) -> List[date]:
    if reference_year < start.year:
        raise ValueError(f"reference year {reference_year} is before start year {start.year}")
    dates = []
    first_of_month = start.replace(day=1)
    last_month = date(reference_year, 12, 1)
    while first_of_month <= last_month:
        _, days_in_month = calendar.monthrange(first_of_month.year, first_of_month.month)
        # months without this day are skipped rather than rolled over
        if start.day <= days_in_month:
            dates.append(first_of_month.replace(day=start.day))
        first_of_month += relativedelta(months=1)
    return dates


def _yearly_dates(start: date) -> List[date]:
    # relativedelta clamps Feb 29 to Feb 28 in a non-leap year
    return [start, start + relativedelta(years=1)]


def expand_recurrence(template: EntryDraft, period: Optional[str], reference_year: int) -> List[EntryDraft]:
    """Materialize the drafts for ``template`` under ``period``.

    ``monthly`` yields one draft per month from the start month through
    December of ``reference_year`` on the same day of month. ``yearly`` yields
    the start date and the same date a year later. ``None`` yields the
    template alone.
    """
    if period is None:
        return [replace(template, period=None)]
    if period == MONTHLY:
        dates = _monthly_dates(template.occurs_on, reference_year)
    elif period == YEARLY:
        dates = _yearly_dates(template.occurs_on)
    else:
        raise ValueError(f"unknown recurrence period: {period!r}")
    return [replace(template, occurs_on=day, period=period) for day in dates]
