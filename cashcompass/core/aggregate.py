from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

from .windows import Window

INCOME = "income"
EXPENSE = "expense"


class Totals(NamedTuple):
    income: float
    expense: float
    savings: float

    def as_dict(self) -> dict:
        return {"income": self.income, "expense": self.expense, "savings": self.savings}


def summarize(entries: Iterable, window: Optional[Window]) -> Totals:
    """Sum income and expense for entries inside ``window`` (all entries when None).

    Entries only need ``kind``, ``amount`` and ``occurs_on`` attributes, so both
    ORM rows and drafts work.
    """
    income = 0.0
    expense = 0.0
    for entry in entries:
        if window is not None and not window.contains(entry.occurs_on):
            continue
        if entry.kind == INCOME:
            income += entry.amount
        elif entry.kind == EXPENSE:
            expense += entry.amount
    return Totals(income, expense, income - expense)
