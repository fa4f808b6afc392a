from __future__ import annotations

from typing import NamedTuple

NOTIFY_THRESHOLD = 0.9


class BudgetStatus(NamedTuple):
    utilization: float
    should_notify: bool
    notified: bool


def evaluate_budget(limit_amount: float, period_expense: float, already_notified: bool) -> BudgetStatus:
    """Compute utilization and the one-shot "approaching limit" notification.

    The notification fires on the first call at or above the threshold and
    stays suppressed until the caller resets ``notified`` (when the ceiling
    changes).
    """
    utilization = period_expense / limit_amount if limit_amount > 0 else 0
    should_notify = utilization >= NOTIFY_THRESHOLD and not already_notified
    return BudgetStatus(utilization, should_notify, already_notified or should_notify)
