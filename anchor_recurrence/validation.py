"""Recurrence rule validation - SINGLE SOURCE OF TRUTH for well-formedness.

validate_rule() is called by the task store when a rule is created or
edited, and again by the dispatcher before computing a date. It returns
errors instead of raising, so the caller can re-prompt the user:

    errors = validate_rule(rule)
    if errors:
        # {field: error_key}, e.g. {"interval_days": "invalid_interval"}
        ...

Passing a rule that fails validation to compute_next() is a programming
error and raises MalformedRuleError.
"""

from __future__ import annotations

from . import const
from .models import (
    CustomIntervalRule,
    MonthlyRule,
    NthWeekdayRule,
    RecurrenceRule,
    SpecificWeekdaysRule,
)
from .type_defs import ValidationErrors

# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class MalformedRuleError(ValueError):
    """Raised when a rule that fails validate_rule() reaches the engine.

    Attributes:
        field: The rule field that failed validation
        error_key: The ERROR_* constant describing the failure
        rule: The offending rule
    """

    def __init__(self, field: str, error_key: str, rule: RecurrenceRule) -> None:
        """Initialize MalformedRuleError.

        Args:
            field: The rule field that failed validation
            error_key: The ERROR_* constant describing the failure
            rule: The offending rule
        """
        self.field = field
        self.error_key = error_key
        self.rule = rule
        super().__init__(
            f"Malformed {rule.kind} rule: {field} -> {error_key} ({rule!r})"
        )


# ==============================================================================
# VALIDATION
# ==============================================================================


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_weekday(value: object) -> bool:
    return _is_int(value) and const.WEEKDAY_MIN <= value <= const.WEEKDAY_MAX


def validate_rule(rule: RecurrenceRule) -> ValidationErrors:
    """Validate rule field constraints for its kind.

    Never mutates the rule. Kinds without extra fields (none, daily, weekly,
    yearly) always pass.

    Args:
        rule: Any RecurrenceRule variant.

    Returns:
        Dict of errors: {field: error_key}, first failing check only.
        Empty dict means the rule is well-formed.

    Validation Rules:
        1. custom_interval_days: interval_days >= 1
        2. nth_weekday: pair present, n == -1 or 1 <= n <= 5, weekday in 0..6
        3. specific_weekdays: non-empty set, every member in 0..6
        4. monthly: day_of_month (if set) in 1..31
    """
    errors: ValidationErrors = {}

    # === 1. Custom interval ===
    if isinstance(rule, CustomIntervalRule):
        interval = rule.interval_days
        if not _is_int(interval) or interval < const.INTERVAL_DAYS_MIN:
            errors[const.FIELD_INTERVAL_DAYS] = const.ERROR_INVALID_INTERVAL
        return errors

    # === 2. Nth weekday ===
    if isinstance(rule, NthWeekdayRule):
        if rule.n is None or rule.weekday is None:
            errors[const.FIELD_NTH_WEEKDAY] = const.ERROR_MISSING_NTH_WEEKDAY
            return errors
        if not _is_int(rule.n) or (
            rule.n != const.NTH_LAST and not const.NTH_MIN <= rule.n <= const.NTH_MAX
        ):
            errors[const.FIELD_NTH_WEEKDAY] = const.ERROR_INVALID_NTH_RANGE
            return errors
        if not _is_weekday(rule.weekday):
            errors[const.FIELD_NTH_WEEKDAY] = const.ERROR_INVALID_WEEKDAY
        return errors

    # === 3. Specific weekdays ===
    if isinstance(rule, SpecificWeekdaysRule):
        if not rule.weekdays:
            errors[const.FIELD_WEEKDAYS] = const.ERROR_EMPTY_WEEKDAY_SET
            return errors
        if not all(_is_weekday(day) for day in rule.weekdays):
            errors[const.FIELD_WEEKDAYS] = const.ERROR_INVALID_WEEKDAY
        return errors

    # === 4. Monthly day ===
    if isinstance(rule, MonthlyRule) and rule.day_of_month is not None:
        day = rule.day_of_month
        if not _is_int(day) or not (
            const.DAY_OF_MONTH_MIN <= day <= const.DAY_OF_MONTH_MAX
        ):
            errors[const.FIELD_DAY_OF_MONTH] = const.ERROR_INVALID_DAY_OF_MONTH

    return errors


def ensure_valid_rule(rule: RecurrenceRule) -> None:
    """Raise MalformedRuleError if `rule` fails validate_rule()."""
    errors = validate_rule(rule)
    if errors:
        field, error_key = next(iter(errors.items()))
        raise MalformedRuleError(field, error_key, rule)
