"""Recurrence rule data model and occurrence results.

Each rule kind is its own frozen dataclass carrying only the fields that
kind uses, plus the optional exclusive `end_date` shared by all kinds.
`RecurrenceRule` is the union of these variants; code dispatches on the
variant type, so a daily rule has no `weekdays` to read by mistake.

`compute_next()` answers with one of three results:
- Occurrence: the next due date
- NoMoreOccurrences: the rule is exhausted (end date reached or no such day)
- NotRecurring: the rule kind is `none`
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from . import const

# =============================================================================
# Rule Variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class NoRecurrence:
    """Task does not repeat."""

    kind: ClassVar[str] = const.KIND_NONE
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class DailyRule:
    """Repeat every day."""

    kind: ClassVar[str] = const.KIND_DAILY
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class WeeklyRule:
    """Repeat every seven days from the anchor."""

    kind: ClassVar[str] = const.KIND_WEEKLY
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class MonthlyRule:
    """Repeat once a month, on `day_of_month` or the anchor's day."""

    kind: ClassVar[str] = const.KIND_MONTHLY
    day_of_month: int | None = None
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class YearlyRule:
    """Repeat on the anchor's month and day every year."""

    kind: ClassVar[str] = const.KIND_YEARLY
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class CustomIntervalRule:
    """Repeat every `interval_days` days."""

    kind: ClassVar[str] = const.KIND_CUSTOM_INTERVAL_DAYS
    interval_days: int = const.DEFAULT_INTERVAL_DAYS
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class NthWeekdayRule:
    """Repeat on the Nth `weekday` of each month.

    Attributes:
        n: 1-5 for the first..fifth occurrence, const.NTH_LAST (-1) for the last
        weekday: 0=Sunday ... 6=Saturday
    """

    kind: ClassVar[str] = const.KIND_NTH_WEEKDAY
    n: int
    weekday: int
    end_date: date | None = None


@dataclass(frozen=True, slots=True)
class SpecificWeekdaysRule:
    """Repeat on each of the given weekdays (0=Sunday ... 6=Saturday)."""

    kind: ClassVar[str] = const.KIND_SPECIFIC_WEEKDAYS
    weekdays: frozenset[int]
    end_date: date | None = None

    def __post_init__(self) -> None:
        # Accept any iterable (list, set) while keeping the rule hashable
        if not isinstance(self.weekdays, frozenset):
            object.__setattr__(self, "weekdays", frozenset(self.weekdays))


RecurrenceRule = (
    NoRecurrence
    | DailyRule
    | WeeklyRule
    | MonthlyRule
    | YearlyRule
    | CustomIntervalRule
    | NthWeekdayRule
    | SpecificWeekdaysRule
)


# =============================================================================
# Occurrence Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class Occurrence:
    """The next date on which the task is due."""

    date: date


@dataclass(frozen=True, slots=True)
class NoMoreOccurrences:
    """The rule produces no further date from this anchor.

    Attributes:
        reason: const.REASON_END_DATE_REACHED or const.REASON_NO_MATCHING_DATE
        candidate: The date that was rejected, when one was computed
    """

    reason: str
    candidate: date | None = None


@dataclass(frozen=True, slots=True)
class NotRecurring:
    """The rule kind is `none`."""


OccurrenceResult = Occurrence | NoMoreOccurrences | NotRecurring
