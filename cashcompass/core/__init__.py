from .windows import Window, week_window
from .recurrence import EntryDraft, expand_recurrence, MONTHLY, YEARLY
from .aggregate import Totals, summarize, INCOME, EXPENSE
from .budget import BudgetStatus, evaluate_budget, NOTIFY_THRESHOLD

__all__ = [
    "Window", "week_window",
    "EntryDraft", "expand_recurrence", "MONTHLY", "YEARLY",
    "Totals", "summarize", "INCOME", "EXPENSE",
    "BudgetStatus", "evaluate_budget", "NOTIFY_THRESHOLD",
]
