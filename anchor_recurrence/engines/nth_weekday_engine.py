"""Nth-Weekday Resolver - "2nd Tuesday" / "last Friday" of next month.

Always resolves inside the month FOLLOWING the anchor's month:
1. Jump to the first day of that month.
2. n = -1 (last): walk backward from the month's last day until the
   weekday matches.
3. n = 1..5: walk forward from day 1, counting matching weekdays, and
   return the n-th match.

Month length comes from the calendar (28/29/30/31 days, leap-year aware).
When the month holds fewer than n matching weekdays (a 5th occurrence in a
short month) there is no date; next_date() returns None and the dispatcher
reports NoMoreOccurrences for that cycle. Whether to try the following
month instead is left to the caller.
"""

from __future__ import annotations

from datetime import date, timedelta

from .. import const
from ..models import NthWeekdayRule
from ..utils.dt_utils import dt_days_in_month, dt_first_of_next_month, dt_weekday


class NthWeekdayResolver:
    """Resolve the Nth (or last) weekday of the month after an anchor."""

    @staticmethod
    def next_date(anchor: date, rule: NthWeekdayRule) -> date | None:
        """Return the rule's date in the month after `anchor`, or None.

        Examples:
            anchor=2024-01-15, 2nd Tuesday -> 2024-02-13
            anchor=2024-01-31, last Friday -> 2024-02-23
            anchor=2024-01-10, 5th Monday  -> None (Feb 2024 has 4 Mondays)
        """
        month_start = dt_first_of_next_month(anchor)
        return NthWeekdayResolver.resolve_in_month(
            month_start.year, month_start.month, rule.n, rule.weekday
        )

    @staticmethod
    def resolve_in_month(year: int, month: int, n: int, weekday: int) -> date | None:
        """Return the n-th `weekday` (Sunday=0) of the given month, or None.

        Args:
            year: Calendar year.
            month: Calendar month (1-12).
            n: 1-5 for first..fifth, const.NTH_LAST for the last occurrence.
            weekday: 0=Sunday ... 6=Saturday.
        """
        days_in_month = dt_days_in_month(year, month)

        if n == const.NTH_LAST:
            return NthWeekdayResolver._scan_backward(
                date(year, month, days_in_month), weekday
            )

        count = 0
        for day in range(1, days_in_month + 1):
            candidate = date(year, month, day)
            if dt_weekday(candidate) == weekday:
                count += 1
                if count == n:
                    return candidate
        return None

    @staticmethod
    def _scan_backward(last_day: date, weekday: int) -> date | None:
        """Walk backward from `last_day` to the nearest matching weekday."""
        candidate = last_day
        for _ in range(const.MAX_DAY_SCAN_ITERATIONS):
            if dt_weekday(candidate) == weekday:
                return candidate
            candidate -= timedelta(days=1)
        return None
