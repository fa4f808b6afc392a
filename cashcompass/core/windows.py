"""Calendar week boundaries used for weekly summaries and budgets.

Weeks start on Sunday at local midnight and are half-open: a week covers
``[start, end)``, so the previous week ends exactly where the current one starts.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Union

DAYS_PER_WEEK = 7


def _as_datetime(value: Union[date, datetime], tzinfo=None) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=tzinfo)


class Window(NamedTuple):
    start: datetime
    end: datetime

    def contains(self, value: Union[date, datetime]) -> bool:
        """True when ``value`` falls in ``[start, end)``; bare dates count as midnight."""
        moment = _as_datetime(value, self.start.tzinfo)
        return self.start <= moment < self.end

    def shift(self, weeks: int) -> "Window":
        delta = timedelta(days=DAYS_PER_WEEK * weeks)
        return Window(self.start + delta, self.end + delta)


def week_window(reference: Union[date, datetime], weeks_ago: int = 0) -> Window:
    """Return the Sunday-anchored week containing ``reference``, moved back ``weeks_ago`` weeks.

    Example:
        >>> week_window(datetime(2025, 3, 5, 14, 30)).start
        datetime.datetime(2025, 3, 2, 0, 0)
    """
    reference = _as_datetime(reference)
    # date.weekday() is Monday=0 ... Sunday=6
    days_since_sunday = (reference.weekday() + 1) % DAYS_PER_WEEK
    sunday = reference.date() - timedelta(days=days_since_sunday + DAYS_PER_WEEK * weeks_ago)
    start = datetime.combine(sunday, time.min, tzinfo=reference.tzinfo)
    return Window(start, start + timedelta(days=DAYS_PER_WEEK))
