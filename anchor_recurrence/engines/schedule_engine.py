"""Schedule Engine - the RuleEvaluator dispatcher.

Routes a rule to the algorithm for its kind and applies the shared end-date
cutoff:
- IntervalAdvancer for daily / weekly / monthly / yearly / custom intervals
- WeekdaySetScanner for specific weekdays
- NthWeekdayResolver for "Nth weekday of month"

The end date is exclusive: a candidate on or after `end_date` yields
NoMoreOccurrences. Rules are validated on every call and malformed ones
raise MalformedRuleError rather than producing a wrong date.

ARCHITECTURE: Pure logic engine with no state and no I/O. Callers own the
task records and anchor dates; nothing is retained between calls.
"""

from __future__ import annotations

from datetime import date

from .. import const
from ..models import (
    CustomIntervalRule,
    DailyRule,
    MonthlyRule,
    NoMoreOccurrences,
    NoRecurrence,
    NotRecurring,
    NthWeekdayRule,
    Occurrence,
    OccurrenceResult,
    RecurrenceRule,
    SpecificWeekdaysRule,
    WeeklyRule,
    YearlyRule,
)
from ..utils.dt_utils import dt_today_local
from ..validation import ensure_valid_rule
from .interval_engine import IntervalAdvancer
from .nth_weekday_engine import NthWeekdayResolver
from .weekday_engine import WeekdaySetScanner


class RuleEvaluator:
    """Compute next occurrences for recurrence rules.

    All methods are static - no instance state.
    """

    @staticmethod
    def compute_next(anchor: date, rule: RecurrenceRule) -> OccurrenceResult:
        """Compute the next occurrence strictly after `anchor`.

        Args:
            anchor: The task's current due date or last computed occurrence.
            rule: A well-formed recurrence rule.

        Returns:
            Occurrence(date), NoMoreOccurrences, or NotRecurring.

        Raises:
            MalformedRuleError: If `rule` fails validate_rule().
        """
        if isinstance(rule, NoRecurrence):
            return NotRecurring()

        ensure_valid_rule(rule)

        candidate = RuleEvaluator._candidate(anchor, rule)
        if candidate is None:
            const.LOGGER.debug(
                "RuleEvaluator: No %s date in the month after %s", rule.kind, anchor
            )
            return NoMoreOccurrences(reason=const.REASON_NO_MATCHING_DATE)

        if rule.end_date is not None and candidate >= rule.end_date:
            const.LOGGER.debug(
                "RuleEvaluator: Candidate %s reached end date %s",
                candidate,
                rule.end_date,
            )
            return NoMoreOccurrences(
                reason=const.REASON_END_DATE_REACHED, candidate=candidate
            )

        return Occurrence(candidate)

    @staticmethod
    def _candidate(anchor: date, rule: RecurrenceRule) -> date | None:
        """Select the algorithm for the rule kind and produce a candidate."""
        match rule:
            case (
                DailyRule()
                | WeeklyRule()
                | MonthlyRule()
                | YearlyRule()
                | CustomIntervalRule()
            ):
                return IntervalAdvancer.next_date(anchor, rule)
            case SpecificWeekdaysRule():
                return WeekdaySetScanner.next_date(anchor, rule)
            case NthWeekdayRule():
                return NthWeekdayResolver.next_date(anchor, rule)
        raise TypeError(f"RuleEvaluator: Unsupported rule type {type(rule).__name__}")

    @staticmethod
    def generate_occurrences(
        anchor: date,
        rule: RecurrenceRule,
        count: int = const.DEFAULT_PREVIEW_COUNT,
    ) -> list[date]:
        """Preview upcoming dates, starting with the anchor itself.

        Each result is fed back in as the next anchor. Stops early when the
        rule is exhausted.

        Args:
            anchor: First date of the preview (the current due date).
            rule: A well-formed recurrence rule.
            count: Maximum number of dates to return.

        Returns:
            Up to `count` dates; just [anchor] for a non-recurring rule.

        Examples:
            Every 3 days from Jan 1, count=4 -> [Jan 1, Jan 4, Jan 7, Jan 10]
        """
        if count < 1:
            return []

        occurrences = [anchor]
        current = anchor
        while len(occurrences) < count:
            result = RuleEvaluator.compute_next(current, rule)
            if not isinstance(result, Occurrence):
                break
            occurrences.append(result.date)
            current = result.date

        return occurrences

    @staticmethod
    def should_recur_today(
        due_date: date,
        rule: RecurrenceRule,
        today: date | None = None,
        next_occurrence: date | None = None,
    ) -> bool:
        """Check whether a recurring task is due today.

        Args:
            due_date: The task's original due date.
            rule: The task's recurrence rule.
            today: Date to test against. Defaults to today in the configured
                timezone (see dt_utils.set_default_timezone).
            next_occurrence: Last computed occurrence; used as the anchor
                instead of `due_date` when present.

        Returns:
            False for non-recurring rules. True when today is the due date or
            the next computed occurrence.
        """
        if isinstance(rule, NoRecurrence):
            return False

        today = today or dt_today_local()
        if today == due_date:
            return True

        anchor = next_occurrence or due_date
        result = RuleEvaluator.compute_next(anchor, rule)
        return isinstance(result, Occurrence) and result.date == today


# =============================================================================
# Module-level convenience functions
# =============================================================================


def compute_next(anchor: date, rule: RecurrenceRule) -> OccurrenceResult:
    """Compute the next occurrence strictly after `anchor` (see RuleEvaluator)."""
    return RuleEvaluator.compute_next(anchor, rule)


def next_occurrence_date(anchor: date, rule: RecurrenceRule) -> date | None:
    """Return the next due date, or None when the rule yields no further date.

    For callers that only persist a date. NotRecurring and NoMoreOccurrences
    both map to None; use compute_next() to tell them apart.
    """
    result = RuleEvaluator.compute_next(anchor, rule)
    if isinstance(result, Occurrence):
        return result.date
    return None


def generate_occurrences(
    anchor: date,
    rule: RecurrenceRule,
    count: int = const.DEFAULT_PREVIEW_COUNT,
) -> list[date]:
    """Preview upcoming dates starting with `anchor` (see RuleEvaluator)."""
    return RuleEvaluator.generate_occurrences(anchor, rule, count)


def should_recur_today(
    due_date: date,
    rule: RecurrenceRule,
    today: date | None = None,
    next_occurrence: date | None = None,
) -> bool:
    """Check whether a recurring task is due today (see RuleEvaluator)."""
    return RuleEvaluator.should_recur_today(
        due_date, rule, today=today, next_occurrence=next_occurrence
    )
