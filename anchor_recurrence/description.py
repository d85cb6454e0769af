"""Human-readable and RFC 5545 renderings of recurrence rules.

Both renderers are pure functions of the rule (no anchor date), so the
presentation layer can call them on every render. Weekday lists are
always rendered Sunday -> Saturday regardless of how the set was built.
"""

from __future__ import annotations

from datetime import timedelta

from . import const
from .models import (
    CustomIntervalRule,
    DailyRule,
    MonthlyRule,
    NoRecurrence,
    NthWeekdayRule,
    RecurrenceRule,
    SpecificWeekdaysRule,
    WeeklyRule,
    YearlyRule,
)
from .utils.dt_utils import dt_format_rrule_date
from .validation import ensure_valid_rule


def ordinal(n: int) -> str:
    """Return the English ordinal for a positive integer (1st, 2nd, 3rd, 11th)."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _weekday_name(weekday: int) -> str:
    if const.WEEKDAY_MIN <= weekday <= const.WEEKDAY_MAX:
        return const.WEEKDAY_NAMES[weekday]
    return str(weekday)


# ==============================================================================
# Description
# ==============================================================================


def describe_rule(rule: RecurrenceRule) -> str:
    """Render a deterministic English phrase for a rule.

    Examples:
        DailyRule() -> "Every day"
        CustomIntervalRule(3) -> "Every 3 days"
        NthWeekdayRule(n=2, weekday=TUESDAY) -> "Every 2nd Tuesday of the month"
        NthWeekdayRule(n=-1, weekday=FRIDAY) -> "Every last Friday of the month"
        SpecificWeekdaysRule({WEDNESDAY, MONDAY}) -> "Every week on Monday, Wednesday"
        MonthlyRule(day_of_month=15) -> "Monthly on day 15"
    """
    description = _describe_kind(rule)
    if rule.end_date is not None and not isinstance(rule, NoRecurrence):
        # end_date is exclusive; show the last day that can still occur
        last_day = rule.end_date - timedelta(days=1)
        return const.LABEL_UNTIL.format(
            description=description, end_date=last_day.isoformat()
        )
    return description


def _describe_kind(rule: RecurrenceRule) -> str:
    """Render the kind-specific phrase, without the end date."""
    if isinstance(rule, NoRecurrence):
        return const.LABEL_DOES_NOT_REPEAT
    if isinstance(rule, DailyRule):
        return const.LABEL_EVERY_DAY
    if isinstance(rule, WeeklyRule):
        return const.LABEL_EVERY_WEEK
    if isinstance(rule, YearlyRule):
        return const.LABEL_EVERY_YEAR

    if isinstance(rule, CustomIntervalRule):
        if rule.interval_days == 1:
            return const.LABEL_EVERY_DAY
        return const.LABEL_EVERY_N_DAYS.format(count=rule.interval_days)

    if isinstance(rule, MonthlyRule):
        if rule.day_of_month is None:
            return const.LABEL_EVERY_MONTH
        return const.LABEL_MONTHLY_ON_DAY.format(day=rule.day_of_month)

    if isinstance(rule, NthWeekdayRule):
        nth_text = const.LABEL_LAST if rule.n == const.NTH_LAST else ordinal(rule.n)
        return const.LABEL_NTH_WEEKDAY_OF_MONTH.format(
            ordinal=nth_text, weekday=_weekday_name(rule.weekday)
        )

    if isinstance(rule, SpecificWeekdaysRule):
        days = rule.weekdays
        if len(days) == const.DAYS_PER_WEEK:
            return const.LABEL_EVERY_DAY
        if days == const.WORKWEEK_DAYS:
            return const.LABEL_EVERY_WEEKDAY
        if days == const.WEEKEND_DAYS:
            return const.LABEL_EVERY_WEEKEND
        day_names = ", ".join(_weekday_name(day) for day in sorted(days))
        return const.LABEL_WEEK_ON_DAYS.format(days=day_names)

    raise TypeError(f"describe_rule: Unsupported rule type {type(rule).__name__}")


# ==============================================================================
# RRULE Export
# ==============================================================================


def to_rrule_string(rule: RecurrenceRule) -> str:
    """Generate an RFC 5545 RRULE string for calendar export.

    The rule's end date is exclusive, so UNTIL is the day before it.

    Returns:
        RRULE string (e.g., "FREQ=MONTHLY;BYDAY=2TU")
        or empty string for non-recurring rules.

    Raises:
        MalformedRuleError: If `rule` fails validate_rule().
    """
    ensure_valid_rule(rule)
    base = _rrule_base(rule)
    if not base:
        return ""
    if rule.end_date is not None:
        until = rule.end_date - timedelta(days=1)
        return f"{base};UNTIL={dt_format_rrule_date(until)}"
    return base


def _rrule_base(rule: RecurrenceRule) -> str:
    """Generate the RRULE body without UNTIL."""
    if isinstance(rule, NoRecurrence):
        return ""
    if isinstance(rule, DailyRule):
        return "FREQ=DAILY;INTERVAL=1"
    if isinstance(rule, WeeklyRule):
        return "FREQ=WEEKLY;INTERVAL=1"
    if isinstance(rule, YearlyRule):
        return "FREQ=YEARLY;INTERVAL=1"
    if isinstance(rule, CustomIntervalRule):
        return f"FREQ=DAILY;INTERVAL={rule.interval_days}"
    if isinstance(rule, MonthlyRule):
        if rule.day_of_month is None:
            return "FREQ=MONTHLY;INTERVAL=1"
        return f"FREQ=MONTHLY;BYMONTHDAY={rule.day_of_month}"
    if isinstance(rule, NthWeekdayRule):
        code = const.RRULE_WEEKDAY_CODES[rule.weekday]
        return f"FREQ=MONTHLY;BYDAY={rule.n}{code}"
    if isinstance(rule, SpecificWeekdaysRule):
        days = ",".join(const.RRULE_WEEKDAY_CODES[day] for day in sorted(rule.weekdays))
        return f"FREQ=WEEKLY;BYDAY={days}"
    return ""
