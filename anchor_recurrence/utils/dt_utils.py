# File: utils/dt_utils.py
"""Calendar date utilities for the recurrence engine.

Pure date functions operating on already-localized `datetime.date` values.
The only time zone awareness here is deciding what "today" is.

Functions:
    - set_default_timezone / get_default_timezone: Configure "today"
    - dt_today_local: Get today's date in the configured timezone
    - dt_weekday: Sunday-based weekday index (0=Sunday ... 6=Saturday)
    - dt_days_in_month: Month length, leap-year aware
    - dt_first_of_next_month: First day of the month after a date
    - dt_add_months: Month arithmetic, clamped to month end
    - dt_add_years: Year arithmetic, clamped (Feb 29 -> Feb 28)
    - dt_parse_date: Parse ISO date/datetime strings to a date
    - dt_format_rrule_date: Format a date as RFC 5545 DATE (YYYYMMDD)
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime
import logging
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

_LOGGER = logging.getLogger(__name__)

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the timezone used to decide what "today" is.

    Args:
        tz: ZoneInfo object representing the user's timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the currently configured timezone."""
    return DEFAULT_TIME_ZONE


def dt_today_local(tz: ZoneInfo | None = None) -> date:
    """Return today's date in the configured timezone.

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.

    Example:
        datetime.date(2025, 4, 7)
    """
    tz_info = tz or DEFAULT_TIME_ZONE
    return datetime.now(tz_info).date()


# ==============================================================================
# Calendar Arithmetic
# ==============================================================================


def dt_weekday(value: date) -> int:
    """Return the Sunday-based weekday index (0=Sunday ... 6=Saturday).

    Python's date.weekday() is Monday-based (0=Monday ... 6=Sunday).
    """
    return (value.weekday() + 1) % 7


def dt_days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (28, 29, 30 or 31)."""
    return monthrange(year, month)[1]


def dt_first_of_next_month(value: date) -> date:
    """Return the first day of the month following `value`'s month.

    Example:
        dt_first_of_next_month(date(2024, 12, 15)) -> date(2025, 1, 1)
    """
    return value + relativedelta(months=1, day=1)


def dt_add_months(value: date, months: int, day: int | None = None) -> date:
    """Add months to a date, clamping the day to the target month's length.

    Args:
        value: Base date.
        months: Number of months to add (may be negative).
        day: Target day of month; defaults to `value`'s day.

    Returns:
        The date in the target month, never overflowing into the next month.

    Examples:
        dt_add_months(date(2024, 1, 31), 1) -> date(2024, 2, 29)
        dt_add_months(date(2024, 3, 10), 1, day=31) -> date(2024, 4, 30)
    """
    # relativedelta clamps an absolute day to the last valid day of the month
    return value + relativedelta(months=months, day=day or value.day)


def dt_add_years(value: date, years: int) -> date:
    """Add years to a date; Feb 29 clamps to Feb 28 in non-leap years."""
    return value + relativedelta(years=years)


# ==============================================================================
# Parsing / Formatting
# ==============================================================================


def dt_parse_date(date_str: str | date | None) -> date | None:
    """Safely parse an ISO date (or datetime) string into a `datetime.date`.

    Accepts formats:
    - "2025-04-07" (ISO date)
    - "2025-04-07T09:30:00+02:00" (ISO datetime, date part is kept)

    Args:
        date_str: Date string, date object, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if isinstance(date_str, datetime):
        return date_str.date()
    if isinstance(date_str, date):
        return date_str
    if not date_str or not isinstance(date_str, str):
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        _LOGGER.debug("dt_parse_date: Could not parse date string: %s", date_str)
        return None


def dt_format_rrule_date(value: date) -> str:
    """Format a date as an RFC 5545 DATE value ("20260118")."""
    return value.strftime("%Y%m%d")
