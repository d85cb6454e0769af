"""Unit tests for IntervalAdvancer (daily, weekly, yearly, custom, monthly).

Tests edge cases:
- Year boundary crossing (Dec 31 -> Jan 1)
- Leap day handling for daily and yearly steps
- Monthly clamping (Jan 31 -> Feb 29/28, never overflowing into March)
- Repeated advancement produces evenly spaced, strictly increasing dates
"""

from datetime import date, timedelta

import pytest

from anchor_recurrence.engines.interval_engine import IntervalAdvancer
from anchor_recurrence.models import (
    CustomIntervalRule,
    DailyRule,
    MonthlyRule,
    NthWeekdayRule,
    WeeklyRule,
    YearlyRule,
)
from tests.helpers import d

# =============================================================================
# Daily / Weekly / Custom
# =============================================================================


class TestFixedDaySteps:
    """Test day-based steps."""

    @pytest.mark.parametrize(
        "anchor",
        [d(2024, 1, 1), d(2024, 2, 28), d(2024, 2, 29), d(2025, 12, 31)],
    )
    def test_daily_adds_one_day(self, anchor: date) -> None:
        """Daily always lands on the following calendar day."""
        assert IntervalAdvancer.next_date(anchor, DailyRule()) == anchor + timedelta(
            days=1
        )

    def test_daily_leap_day(self) -> None:
        """Feb 28 2024 -> Feb 29 2024 (leap year)."""
        assert IntervalAdvancer.next_date(d(2024, 2, 28), DailyRule()) == d(2024, 2, 29)

    def test_daily_crosses_year(self) -> None:
        """Dec 31 + 1 day crosses to Jan 1."""
        assert IntervalAdvancer.next_date(d(2025, 12, 31), DailyRule()) == d(2026, 1, 1)

    def test_weekly_adds_seven_days(self) -> None:
        """Weekly keeps the weekday and crosses the year boundary."""
        result = IntervalAdvancer.next_date(d(2025, 12, 28), WeeklyRule())
        assert result == d(2026, 1, 4)
        assert result.weekday() == d(2025, 12, 28).weekday()

    @pytest.mark.parametrize("interval", [1, 2, 3, 10, 45, 400])
    def test_custom_interval(self, interval: int) -> None:
        """Custom interval adds exactly interval_days."""
        anchor = d(2024, 1, 15)
        rule = CustomIntervalRule(interval_days=interval)
        assert IntervalAdvancer.next_date(anchor, rule) == anchor + timedelta(
            days=interval
        )

    def test_custom_interval_three_days(self) -> None:
        """Every 3 days from Jan 30 -> Feb 2."""
        rule = CustomIntervalRule(interval_days=3)
        assert IntervalAdvancer.next_date(d(2024, 1, 30), rule) == d(2024, 2, 2)


# =============================================================================
# Yearly
# =============================================================================


class TestYearly:
    """Test yearly steps."""

    def test_same_month_and_day(self) -> None:
        """Yearly keeps month and day."""
        assert IntervalAdvancer.next_date(d(2024, 7, 4), YearlyRule()) == d(2025, 7, 4)

    def test_leap_day_clamps_to_feb28(self) -> None:
        """Feb 29 2024 + 1 year clamps to Feb 28 2025."""
        assert IntervalAdvancer.next_date(d(2024, 2, 29), YearlyRule()) == d(
            2025, 2, 28
        )

    def test_clamped_date_stays_clamped(self) -> None:
        """Clamping is not remembered: Feb 28 2027 -> Feb 28 2028 (leap year)."""
        assert IntervalAdvancer.next_date(d(2027, 2, 28), YearlyRule()) == d(
            2028, 2, 28
        )


# =============================================================================
# Monthly
# =============================================================================


class TestMonthly:
    """Test monthly steps and month-end clamping."""

    def test_anchor_day_preserved(self) -> None:
        """Without day_of_month the anchor's day is used."""
        assert IntervalAdvancer.next_date(d(2024, 1, 15), MonthlyRule()) == d(
            2024, 2, 15
        )

    def test_day_of_month_used(self) -> None:
        """day_of_month overrides the anchor's day."""
        rule = MonthlyRule(day_of_month=10)
        assert IntervalAdvancer.next_date(d(2024, 1, 25), rule) == d(2024, 2, 10)

    def test_jan31_clamps_to_leap_feb29(self) -> None:
        """Jan 31 -> Feb 29 in a leap year (not Mar 2)."""
        assert IntervalAdvancer.next_date(d(2024, 1, 31), MonthlyRule()) == d(
            2024, 2, 29
        )

    def test_jan31_clamps_to_feb28(self) -> None:
        """Jan 31 -> Feb 28 in a common year (not Mar 3)."""
        assert IntervalAdvancer.next_date(d(2025, 1, 31), MonthlyRule()) == d(
            2025, 2, 28
        )

    def test_day_31_clamps_to_30_day_month(self) -> None:
        """day_of_month=31 in April -> Apr 30."""
        rule = MonthlyRule(day_of_month=31)
        assert IntervalAdvancer.next_date(d(2024, 3, 31), rule) == d(2024, 4, 30)

    def test_day_of_month_reapplied_after_clamp(self) -> None:
        """day_of_month=31 returns to the 31st once the month allows it."""
        rule = MonthlyRule(day_of_month=31)
        assert IntervalAdvancer.next_date(d(2024, 2, 29), rule) == d(2024, 3, 31)

    def test_anchor_day_drifts_after_clamp(self) -> None:
        """Without day_of_month a clamped anchor keeps its clamped day."""
        assert IntervalAdvancer.next_date(d(2024, 2, 29), MonthlyRule()) == d(
            2024, 3, 29
        )

    def test_december_crosses_year(self) -> None:
        """Dec 15 -> Jan 15 of the next year."""
        assert IntervalAdvancer.next_date(d(2024, 12, 15), MonthlyRule()) == d(
            2025, 1, 15
        )


# =============================================================================
# Sequences / misuse
# =============================================================================


class TestSequences:
    """Feeding results back in as anchors."""

    @pytest.mark.parametrize(
        ("rule", "step"),
        [
            (DailyRule(), 1),
            (WeeklyRule(), 7),
            (CustomIntervalRule(interval_days=3), 3),
            (CustomIntervalRule(interval_days=14), 14),
        ],
    )
    def test_evenly_spaced_increasing(self, rule, step: int) -> None:
        """Fixed-interval rules give strictly increasing, evenly spaced dates."""
        current = d(2024, 1, 1)
        dates = [current]
        for _ in range(60):
            current = IntervalAdvancer.next_date(current, rule)
            dates.append(current)

        gaps = {(later - earlier).days for earlier, later in zip(dates, dates[1:])}
        assert gaps == {step}

    def test_rejects_non_interval_rule(self) -> None:
        """Rules handled by other engines are refused."""
        with pytest.raises(TypeError):
            IntervalAdvancer.next_date(d(2024, 1, 1), NthWeekdayRule(n=1, weekday=1))
