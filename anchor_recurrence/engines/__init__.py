"""Engine modules for the Anchor recurrence engine.

Contains the pure computation engines:
- interval_engine: Fixed-step advancement (daily, weekly, monthly, yearly, every N days)
- weekday_engine: Next date among a set of weekdays
- nth_weekday_engine: Nth / last weekday of the following month
- schedule_engine: RuleEvaluator dispatcher, previews, "due today" checks
"""

# Use relative imports within package to avoid mypy module resolution issues
from .interval_engine import IntervalAdvancer
from .nth_weekday_engine import NthWeekdayResolver
from .schedule_engine import (
    RuleEvaluator,
    compute_next,
    generate_occurrences,
    next_occurrence_date,
    should_recur_today,
)
from .weekday_engine import WeekdaySetScanner

__all__ = [
    "IntervalAdvancer",
    "NthWeekdayResolver",
    "RuleEvaluator",
    "WeekdaySetScanner",
    "compute_next",
    "generate_occurrences",
    "next_occurrence_date",
    "should_recur_today",
]
