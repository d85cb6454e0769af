# File: const.py
"""Constants for the Anchor recurrence engine.

This file centralizes rule kinds, weekday indices, storage keys, validation
error keys and description labels for consistency across the package.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General
# ------------------------------------------------------------------------------------------------

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Rule Kinds
# ------------------------------------------------------------------------------------------------
KIND_NONE = "none"
KIND_DAILY = "daily"
KIND_WEEKLY = "weekly"
KIND_MONTHLY = "monthly"
KIND_YEARLY = "yearly"
KIND_CUSTOM_INTERVAL_DAYS = "custom_interval_days"
KIND_NTH_WEEKDAY = "nth_weekday"
KIND_SPECIFIC_WEEKDAYS = "specific_weekdays"

KIND_OPTIONS = [
    KIND_NONE,
    KIND_DAILY,
    KIND_WEEKLY,
    KIND_MONTHLY,
    KIND_YEARLY,
    KIND_CUSTOM_INTERVAL_DAYS,
    KIND_NTH_WEEKDAY,
    KIND_SPECIFIC_WEEKDAYS,
]

# Kind names written by older app versions
KIND_LEGACY_ALIASES = {
    "custom_days": KIND_CUSTOM_INTERVAL_DAYS,
    "specific_days": KIND_SPECIFIC_WEEKDAYS,
}

# ------------------------------------------------------------------------------------------------
# Weekdays (Sunday-based, matching the stored representation)
# ------------------------------------------------------------------------------------------------
SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

WEEKDAY_MIN = SUNDAY
WEEKDAY_MAX = SATURDAY
DAYS_PER_WEEK = 7

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

WORKWEEK_DAYS = frozenset({MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY})
WEEKEND_DAYS = frozenset({SATURDAY, SUNDAY})

# RFC 5545 BYDAY codes, indexed by Sunday-based weekday
RRULE_WEEKDAY_CODES = ["SU", "MO", "TU", "WE", "TH", "FR", "SA"]

# ------------------------------------------------------------------------------------------------
# Rule Field Limits
# ------------------------------------------------------------------------------------------------
NTH_LAST = -1
NTH_MIN = 1
NTH_MAX = 5

DAY_OF_MONTH_MIN = 1
DAY_OF_MONTH_MAX = 31

INTERVAL_DAYS_MIN = 1
DEFAULT_INTERVAL_DAYS = 1

DEFAULT_PREVIEW_COUNT = 5

# Upper bound on day-by-day scans (longest month)
MAX_DAY_SCAN_ITERATIONS = 31

# ------------------------------------------------------------------------------------------------
# Storage Keys (JSON representation persisted by the task store)
# ------------------------------------------------------------------------------------------------
DATA_RULE_TYPE = "type"
DATA_RULE_INTERVAL = "interval"
DATA_RULE_DAYS_OF_WEEK = "daysOfWeek"
DATA_RULE_DAY_OF_MONTH = "dayOfMonth"
DATA_RULE_NTH_WEEKDAY = "nthWeekday"
DATA_RULE_NTH_WEEKDAY_N = "n"
DATA_RULE_NTH_WEEKDAY_WEEKDAY = "weekday"
DATA_RULE_END_DATE = "endDate"

# ------------------------------------------------------------------------------------------------
# Validation Fields and Error Keys
# ------------------------------------------------------------------------------------------------
FIELD_INTERVAL_DAYS = "interval_days"
FIELD_NTH_WEEKDAY = "nth_weekday"
FIELD_WEEKDAYS = "weekdays"
FIELD_DAY_OF_MONTH = "day_of_month"

ERROR_INVALID_INTERVAL = "invalid_interval"
ERROR_INVALID_NTH_RANGE = "invalid_nth_range"
ERROR_INVALID_WEEKDAY = "invalid_weekday"
ERROR_EMPTY_WEEKDAY_SET = "empty_weekday_set"
ERROR_INVALID_DAY_OF_MONTH = "invalid_day_of_month"
ERROR_MISSING_NTH_WEEKDAY = "missing_nth_weekday"

# ------------------------------------------------------------------------------------------------
# Termination Reasons
# ------------------------------------------------------------------------------------------------
REASON_END_DATE_REACHED = "end_date_reached"
REASON_NO_MATCHING_DATE = "no_matching_date"

# ------------------------------------------------------------------------------------------------
# Description Labels
# ------------------------------------------------------------------------------------------------
LABEL_DOES_NOT_REPEAT = "Does not repeat"
LABEL_EVERY_DAY = "Every day"
LABEL_EVERY_WEEK = "Every week"
LABEL_EVERY_MONTH = "Every month"
LABEL_EVERY_YEAR = "Every year"
LABEL_EVERY_WEEKDAY = "Every weekday"
LABEL_EVERY_WEEKEND = "Every weekend"
LABEL_EVERY_N_DAYS = "Every {count} days"
LABEL_MONTHLY_ON_DAY = "Monthly on day {day}"
LABEL_WEEK_ON_DAYS = "Every week on {days}"
LABEL_NTH_WEEKDAY_OF_MONTH = "Every {ordinal} {weekday} of the month"
LABEL_LAST = "last"
LABEL_UNTIL = "{description} until {end_date}"
