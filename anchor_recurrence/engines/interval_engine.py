"""Interval Advancer - fixed-step recurrence arithmetic.

Handles the rule kinds whose next date is a pure function of the anchor:
- daily: anchor + 1 day
- weekly: anchor + 7 days
- custom_interval_days: anchor + interval_days
- yearly: same month/day next year (Feb 29 clamps to Feb 28)
- monthly: next month on day_of_month (or the anchor's day), clamped to
  the month's last day instead of overflowing (Jan 31 -> Feb 29 in 2024)

ARCHITECTURE: Pure logic engine, no state. Rules are assumed well-formed;
the dispatcher validates before calling in here.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..models import (
    CustomIntervalRule,
    DailyRule,
    MonthlyRule,
    WeeklyRule,
    YearlyRule,
)
from ..utils.dt_utils import dt_add_months, dt_add_years

IntervalRule = DailyRule | WeeklyRule | YearlyRule | CustomIntervalRule | MonthlyRule


class IntervalAdvancer:
    """Advance an anchor date by a fixed calendar step."""

    @staticmethod
    def next_date(anchor: date, rule: IntervalRule) -> date:
        """Return the candidate date following `anchor` for a fixed-step rule.

        Args:
            anchor: Date the next occurrence is computed from.
            rule: A daily, weekly, yearly, custom-interval or monthly rule.

        Returns:
            The candidate date (end_date is checked by the caller).

        Raises:
            TypeError: If `rule` is not a fixed-step rule.
        """
        if isinstance(rule, DailyRule):
            return anchor + timedelta(days=1)
        if isinstance(rule, WeeklyRule):
            return anchor + timedelta(weeks=1)
        if isinstance(rule, CustomIntervalRule):
            return anchor + timedelta(days=rule.interval_days)
        if isinstance(rule, YearlyRule):
            return dt_add_years(anchor, 1)
        if isinstance(rule, MonthlyRule):
            return dt_add_months(anchor, 1, day=rule.day_of_month)
        raise TypeError(f"IntervalAdvancer cannot handle rule kind {rule.kind!r}")
