from .user import User
from .entry import Entry
from .budget import Budget
from .weekly_plan import WeeklyPlanLine

__all__ = ["User", "Entry", "Budget", "WeeklyPlanLine"]
