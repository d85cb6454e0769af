"""Stored rule <-> RecurrenceRule conversion.

The task store persists rules as JSON objects with camelCase keys (see
type_defs.RecurrenceRuleData). This module is the only place that reads
or writes that shape.

### Build
build_rule() checks the stored SHAPE with a voluptuous schema (types,
numeric-string coercion, known kind) and reads only the keys relevant to
the kind. A `weekly` rule repeats every seven days from the anchor, so
any stored `daysOfWeek` on it is dropped with a warning. It does not check
value RANGES: a stored `interval` of 0 builds fine and is reported by
validation.validate_rule(), which the store calls before saving.

### Serialize
rule_to_data() emits canonical kind names and only kind-relevant keys.

Consumers:
- Task store (load/save of recurring tasks)
- Services accepting rules from API payloads
"""

from __future__ import annotations

from datetime import date
from typing import Any

import voluptuous as vol

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
from .type_defs import RecurrenceRuleData
from .utils.dt_utils import dt_parse_date

# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class RuleDataError(ValueError):
    """Stored rule data does not have a recognizable shape.

    Attributes:
        data: The raw stored data
        path: Key path of the offending value (e.g. ["nthWeekday", "n"])
    """

    def __init__(self, message: str, data: Any, path: list[Any] | None = None) -> None:
        """Initialize RuleDataError.

        Args:
            message: Human-readable description of the problem
            data: The raw stored data
            path: Key path of the offending value
        """
        self.data = data
        self.path = path or []
        super().__init__(message)


# ==============================================================================
# SCHEMA
# ==============================================================================


def _normalize_kind(value: Any) -> str:
    """Map legacy kind names to canonical ones and reject unknown kinds."""
    if not isinstance(value, str):
        raise vol.Invalid(f"Rule type must be a string, got {type(value).__name__}")
    kind = const.KIND_LEGACY_ALIASES.get(value, value)
    if kind not in const.KIND_OPTIONS:
        raise vol.Invalid(f"Unknown rule type: '{value}'")
    return kind


def _coerce_end_date(value: Any) -> date | None:
    """Parse a stored end date (ISO date or datetime string)."""
    if value is None:
        return None
    parsed = dt_parse_date(value)
    if parsed is None:
        raise vol.Invalid(f"Invalid end date: '{value}'")
    return parsed


def _coerce_int(value: Any) -> int:
    """Coerce integers and numeric strings, rejecting bools and fractions."""
    if isinstance(value, bool):
        raise vol.Invalid("Expected an integer, got a boolean")
    if isinstance(value, float) and not value.is_integer():
        raise vol.Invalid(f"Expected an integer, got {value}")
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise vol.Invalid(f"Expected an integer, got '{value}'") from err


NTH_WEEKDAY_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_RULE_NTH_WEEKDAY_N): _coerce_int,
        vol.Required(const.DATA_RULE_NTH_WEEKDAY_WEEKDAY): _coerce_int,
    },
    extra=vol.REMOVE_EXTRA,
)

RULE_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_RULE_TYPE): _normalize_kind,
        vol.Optional(const.DATA_RULE_INTERVAL): vol.Any(None, _coerce_int),
        vol.Optional(const.DATA_RULE_DAYS_OF_WEEK): vol.Any(None, [_coerce_int]),
        vol.Optional(const.DATA_RULE_DAY_OF_MONTH): vol.Any(None, _coerce_int),
        vol.Optional(const.DATA_RULE_NTH_WEEKDAY): vol.Any(None, NTH_WEEKDAY_SCHEMA),
        vol.Optional(const.DATA_RULE_END_DATE): _coerce_end_date,
    },
    extra=vol.REMOVE_EXTRA,
)


# ==============================================================================
# BUILD / SERIALIZE
# ==============================================================================


def build_rule(data: RecurrenceRuleData | dict[str, Any] | None) -> RecurrenceRule:
    """Build a RecurrenceRule from its stored representation.

    Args:
        data: Stored rule dict, or None for tasks without a rule.

    Returns:
        The rule variant for the stored kind. None builds NoRecurrence.

    Raises:
        RuleDataError: If the data does not match the stored rule shape.

    Examples:
        build_rule({"type": "custom_days", "interval": 3})
        -> CustomIntervalRule(interval_days=3)

        build_rule({"type": "nth_weekday", "nthWeekday": {"n": -1, "weekday": 5}})
        -> NthWeekdayRule(n=-1, weekday=5)
    """
    if data is None:
        return NoRecurrence()

    try:
        cleaned = RULE_SCHEMA(data)
    except vol.MultipleInvalid as err:
        const.LOGGER.warning("build_rule: Invalid stored rule %s: %s", data, err)
        raise RuleDataError(str(err), data, list(err.path)) from err

    kind = cleaned[const.DATA_RULE_TYPE]
    end_date = cleaned.get(const.DATA_RULE_END_DATE)

    if kind == const.KIND_NONE:
        return NoRecurrence(end_date=end_date)
    if kind == const.KIND_DAILY:
        return DailyRule(end_date=end_date)
    if kind == const.KIND_WEEKLY:
        if cleaned.get(const.DATA_RULE_DAYS_OF_WEEK):
            const.LOGGER.warning(
                "build_rule: Ignoring %s %s on a %s rule; use %s for weekday sets",
                const.DATA_RULE_DAYS_OF_WEEK,
                cleaned[const.DATA_RULE_DAYS_OF_WEEK],
                const.KIND_WEEKLY,
                const.KIND_SPECIFIC_WEEKDAYS,
            )
        return WeeklyRule(end_date=end_date)
    if kind == const.KIND_YEARLY:
        return YearlyRule(end_date=end_date)

    if kind == const.KIND_MONTHLY:
        return MonthlyRule(
            day_of_month=cleaned.get(const.DATA_RULE_DAY_OF_MONTH),
            end_date=end_date,
        )

    if kind == const.KIND_CUSTOM_INTERVAL_DAYS:
        interval = cleaned.get(const.DATA_RULE_INTERVAL)
        if interval is None:
            interval = const.DEFAULT_INTERVAL_DAYS
        return CustomIntervalRule(interval_days=interval, end_date=end_date)

    if kind == const.KIND_SPECIFIC_WEEKDAYS:
        return SpecificWeekdaysRule(
            weekdays=frozenset(cleaned.get(const.DATA_RULE_DAYS_OF_WEEK) or []),
            end_date=end_date,
        )

    # KIND_NTH_WEEKDAY
    nth = cleaned.get(const.DATA_RULE_NTH_WEEKDAY)
    if nth is None:
        raise RuleDataError(
            f"Rule type '{kind}' requires '{const.DATA_RULE_NTH_WEEKDAY}'",
            data,
            [const.DATA_RULE_NTH_WEEKDAY],
        )
    return NthWeekdayRule(
        n=nth[const.DATA_RULE_NTH_WEEKDAY_N],
        weekday=nth[const.DATA_RULE_NTH_WEEKDAY_WEEKDAY],
        end_date=end_date,
    )


def rule_to_data(rule: RecurrenceRule) -> RecurrenceRuleData:
    """Serialize a RecurrenceRule to its stored representation.

    Only kind-relevant keys are written; weekdays are sorted ascending.
    """
    data: dict[str, Any] = {const.DATA_RULE_TYPE: rule.kind}

    if isinstance(rule, CustomIntervalRule):
        data[const.DATA_RULE_INTERVAL] = rule.interval_days
    elif isinstance(rule, MonthlyRule) and rule.day_of_month is not None:
        data[const.DATA_RULE_DAY_OF_MONTH] = rule.day_of_month
    elif isinstance(rule, SpecificWeekdaysRule):
        data[const.DATA_RULE_DAYS_OF_WEEK] = sorted(rule.weekdays)
    elif isinstance(rule, NthWeekdayRule):
        data[const.DATA_RULE_NTH_WEEKDAY] = {
            const.DATA_RULE_NTH_WEEKDAY_N: rule.n,
            const.DATA_RULE_NTH_WEEKDAY_WEEKDAY: rule.weekday,
        }

    if rule.end_date is not None:
        data[const.DATA_RULE_END_DATE] = rule.end_date.isoformat()

    return data  # type: ignore[return-value]
