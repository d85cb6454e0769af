"""Weekday-Set Scanner - next date among a set of weekdays.

Scans forward from the day after the anchor, one day at a time, and stops
at the first date whose weekday is in the rule's set. The anchor itself is
never eligible ("next", not "today or next"). A non-empty set always
matches within seven days; validate_rule() rejects empty sets so the
dispatcher never calls in here with one.
"""

from __future__ import annotations

from datetime import date, timedelta

from .. import const
from ..models import SpecificWeekdaysRule
from ..utils.dt_utils import dt_weekday


class WeekdaySetScanner:
    """Find the earliest date after an anchor that falls on a wanted weekday."""

    @staticmethod
    def next_date(anchor: date, rule: SpecificWeekdaysRule) -> date:
        """Return the first date strictly after `anchor` on one of `rule.weekdays`.

        Raises:
            ValueError: If the weekday set is empty (no date can ever match).

        Example:
            anchor=Mon 2024-01-01, weekdays={Mon, Wed, Fri} -> Wed 2024-01-03
        """
        for offset in range(1, const.DAYS_PER_WEEK + 1):
            candidate = anchor + timedelta(days=offset)
            if dt_weekday(candidate) in rule.weekdays:
                return candidate

        raise ValueError(
            f"WeekdaySetScanner: no weekday in {sorted(rule.weekdays)} "
            f"within {const.DAYS_PER_WEEK} days of {anchor}"
        )
