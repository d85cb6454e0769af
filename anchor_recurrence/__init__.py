"""Anchor recurrence engine.

Pure, stateless recurrence calculations for recurring tasks:
- compute_next: next due date after an anchor date (three-way result)
- validate_rule: rule well-formedness, returned as {field: error_key}
- describe_rule: human-readable rule text
- to_rrule_string: RFC 5545 RRULE for calendar export
- build_rule / rule_to_data: stored JSON representation

The engine performs no I/O and retains nothing between calls. Task
storage, notifications and UI belong to the calling application.
"""

from .data_builders import RuleDataError, build_rule, rule_to_data
from .description import describe_rule, to_rrule_string
from .engines import (
    RuleEvaluator,
    compute_next,
    generate_occurrences,
    next_occurrence_date,
    should_recur_today,
)
from .models import (
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
from .validation import MalformedRuleError, validate_rule

__all__ = [
    "CustomIntervalRule",
    "DailyRule",
    "MalformedRuleError",
    "MonthlyRule",
    "NoMoreOccurrences",
    "NoRecurrence",
    "NotRecurring",
    "NthWeekdayRule",
    "Occurrence",
    "OccurrenceResult",
    "RecurrenceRule",
    "RuleDataError",
    "RuleEvaluator",
    "SpecificWeekdaysRule",
    "WeeklyRule",
    "YearlyRule",
    "build_rule",
    "compute_next",
    "describe_rule",
    "generate_occurrences",
    "next_occurrence_date",
    "rule_to_data",
    "should_recur_today",
    "to_rrule_string",
    "validate_rule",
]
