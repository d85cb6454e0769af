"""Type definitions for the stored recurrence rule representation.

Rules are persisted by the task store as JSON objects with camelCase keys.
These TypedDicts describe that shape for static analysis only; runtime
checking happens in data_builders.build_rule().

IMPORTANT: This file must NOT import from engines or data_builders to avoid
circular dependencies.
"""

from typing import NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

ISODate = str  # ISO 8601 date string (no time) "2026-01-18"
Weekday = int  # 0=Sunday ... 6=Saturday
ValidationErrors = dict[str, str]  # {field: error_key}, empty when valid


# =============================================================================
# Stored Rule Shapes
# =============================================================================


class NthWeekdayData(TypedDict):
    """Stored "Nth weekday of month" pair."""

    n: int  # 1-5, or -1 for the last occurrence
    weekday: Weekday


class RecurrenceRuleData(TypedDict):
    """Stored recurrence rule, as written by the task store.

    Only the keys relevant to `type` are read; the rest are ignored.
    """

    type: str
    interval: NotRequired[int]
    daysOfWeek: NotRequired[list[Weekday]]
    dayOfMonth: NotRequired[int]
    nthWeekday: NotRequired[NthWeekdayData]
    endDate: NotRequired[ISODate]
