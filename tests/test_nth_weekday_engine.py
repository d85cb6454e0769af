"""Unit tests for NthWeekdayResolver.

Tests edge cases:
- Forward counting (1st..5th) in the month after the anchor
- Backward scan for the last occurrence (n = -1)
- 28/29/30/31-day months, including leap-year February
- Fifth occurrence missing in short months -> None
- Year boundary (anchor in December resolves in January)
- Cross-check against dateutil.rrule as an independent oracle

Calendar reference (Sunday=0 ... Saturday=6):
    Feb 2024: 29 days, starts Thursday (Fri 2, 9, 16, 23; Tue 6, 13, 20, 27)
    Apr 2024: 30 days, starts Monday (Mon 1, 8, 15, 22, 29)
    Feb 2025: 28 days, starts Saturday (Fri 7, 14, 21, 28)
    Feb 2026: 28 days, starts Sunday (exactly four of every weekday)
"""

from datetime import date, datetime, timedelta

from dateutil.rrule import rrulestr
import pytest

from anchor_recurrence import const
from anchor_recurrence.description import to_rrule_string
from anchor_recurrence.engines.nth_weekday_engine import NthWeekdayResolver
from anchor_recurrence.models import NthWeekdayRule
from anchor_recurrence.utils.dt_utils import dt_days_in_month, dt_weekday
from tests.helpers import d

# =============================================================================
# Forward counting
# =============================================================================


class TestForwardCount:
    """Test n = 1..5."""

    def test_second_tuesday(self) -> None:
        """Anchor 2024-01-15, 2nd Tuesday -> 2024-02-13."""
        rule = NthWeekdayRule(n=2, weekday=const.TUESDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 15), rule) == d(2024, 2, 13)

    def test_first_weekday_on_day_one(self) -> None:
        """1st Thursday when the month starts on Thursday -> day 1."""
        rule = NthWeekdayRule(n=1, weekday=const.THURSDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 20), rule) == d(2024, 2, 1)

    def test_first_weekday_late_in_week(self) -> None:
        """1st Wednesday of Feb 2024 (starts Thursday) -> Feb 7."""
        rule = NthWeekdayRule(n=1, weekday=const.WEDNESDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 3), rule) == d(2024, 2, 7)

    def test_always_uses_following_month(self) -> None:
        """Even if this month's date is still ahead, next month is used."""
        rule = NthWeekdayRule(n=4, weekday=const.MONDAY)
        # 4th Monday of Jan 2024 is Jan 22, after the anchor, but is skipped
        assert NthWeekdayResolver.next_date(d(2024, 1, 2), rule) == d(2024, 2, 26)

    def test_fifth_thursday_leap_february(self) -> None:
        """Feb 2024 has five Thursdays (1, 8, 15, 22, 29)."""
        rule = NthWeekdayRule(n=5, weekday=const.THURSDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 31), rule) == d(2024, 2, 29)

    def test_fifth_monday_thirty_day_month(self) -> None:
        """Apr 2024 has five Mondays; the 5th is Apr 29."""
        rule = NthWeekdayRule(n=5, weekday=const.MONDAY)
        assert NthWeekdayResolver.next_date(d(2024, 3, 10), rule) == d(2024, 4, 29)

    def test_december_anchor_resolves_in_january(self) -> None:
        """Anchor in Dec 2024 -> 3rd Friday of Jan 2025 (Jan 17)."""
        rule = NthWeekdayRule(n=3, weekday=const.FRIDAY)
        assert NthWeekdayResolver.next_date(d(2024, 12, 31), rule) == d(2025, 1, 17)


# =============================================================================
# Missing fifth occurrence
# =============================================================================


class TestMissingOccurrence:
    """Months with fewer than n matching weekdays."""

    def test_fifth_monday_missing_in_leap_february(self) -> None:
        """Feb 2024 has four Mondays -> None."""
        rule = NthWeekdayRule(n=5, weekday=const.MONDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 10), rule) is None

    @pytest.mark.parametrize("weekday", range(7))
    def test_fifth_missing_in_four_week_february(self, weekday: int) -> None:
        """Feb 2026 has exactly four of every weekday."""
        rule = NthWeekdayRule(n=5, weekday=weekday)
        assert NthWeekdayResolver.next_date(d(2026, 1, 15), rule) is None

    @pytest.mark.parametrize("weekday", range(7))
    def test_fourth_always_exists(self, weekday: int) -> None:
        """Every month has at least four of every weekday."""
        rule = NthWeekdayRule(n=4, weekday=weekday)
        result = NthWeekdayResolver.next_date(d(2026, 1, 15), rule)
        assert result is not None
        assert result.month == 2
        assert dt_weekday(result) == weekday


# =============================================================================
# Last occurrence (n = -1)
# =============================================================================


class TestLastOccurrence:
    """Test the backward scan."""

    def test_last_friday_leap_february(self) -> None:
        """Anchor 2024-01-31, last Friday -> 2024-02-23."""
        rule = NthWeekdayRule(n=const.NTH_LAST, weekday=const.FRIDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 31), rule) == d(2024, 2, 23)

    def test_last_thursday_is_leap_day(self) -> None:
        """Feb 29 2024 is a Thursday and the month's last day."""
        rule = NthWeekdayRule(n=const.NTH_LAST, weekday=const.THURSDAY)
        assert NthWeekdayResolver.next_date(d(2024, 1, 1), rule) == d(2024, 2, 29)

    def test_last_friday_is_month_end(self) -> None:
        """Feb 28 2025 is a Friday."""
        rule = NthWeekdayRule(n=const.NTH_LAST, weekday=const.FRIDAY)
        assert NthWeekdayResolver.next_date(d(2025, 1, 31), rule) == d(2025, 2, 28)

    def test_last_in_thirty_day_month(self) -> None:
        """Last Tuesday of Apr 2024 (30 days) -> Apr 30."""
        rule = NthWeekdayRule(n=const.NTH_LAST, weekday=const.TUESDAY)
        assert NthWeekdayResolver.next_date(d(2024, 3, 15), rule) == d(2024, 4, 30)

    def test_last_sunday_before_month_end(self) -> None:
        """Apr 2024 ends on Tuesday; last Sunday is Apr 28."""
        rule = NthWeekdayRule(n=const.NTH_LAST, weekday=const.SUNDAY)
        assert NthWeekdayResolver.next_date(d(2024, 3, 15), rule) == d(2024, 4, 28)

    @pytest.mark.parametrize("month", range(1, 13))
    @pytest.mark.parametrize("weekday", range(7))
    def test_last_is_within_final_week(self, month: int, weekday: int) -> None:
        """The last occurrence falls in the month's final seven days."""
        result = NthWeekdayResolver.resolve_in_month(
            2024, month, const.NTH_LAST, weekday
        )
        assert result is not None
        last_day = dt_days_in_month(2024, month)
        assert last_day - 7 < result.day <= last_day
        assert dt_weekday(result) == weekday
        assert (result + timedelta(days=7)).month != month


# =============================================================================
# Oracle cross-check
# =============================================================================


def _month_ends(year: int) -> list[date]:
    return [date(year, month, dt_days_in_month(year, month)) for month in range(1, 13)]


class TestAgainstDateutilRrule:
    """Compare with dateutil's RFC 5545 implementation of BYDAY=nWD."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, const.NTH_LAST])
    @pytest.mark.parametrize("weekday", range(7))
    @pytest.mark.parametrize("year", [2024, 2025])
    def test_matches_rrule_after_month_end(
        self, n: int, weekday: int, year: int
    ) -> None:
        """From each month's last day, the next rrule match is the resolver's date."""
        rule = NthWeekdayRule(n=n, weekday=weekday)
        oracle = rrulestr(to_rrule_string(rule), dtstart=datetime(year - 1, 12, 1))

        for anchor in _month_ends(year):
            expected = oracle.after(datetime.combine(anchor, datetime.min.time()))
            assert expected is not None
            assert NthWeekdayResolver.next_date(anchor, rule) == expected.date()
