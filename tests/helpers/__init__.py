"""Test helpers for recurrence engine tests.

    from tests.helpers import occurrence_date, d

- occurrence_date: unwrap an Occurrence result, failing on termination signals
- d: compact date constructor for test tables
"""

from datetime import date

from anchor_recurrence.models import Occurrence, OccurrenceResult


def d(year: int, month: int, day: int) -> date:
    """Build a date (shorthand for parametrize tables)."""
    return date(year, month, day)


def occurrence_date(result: OccurrenceResult) -> date:
    """Unwrap an Occurrence, failing the test for termination signals."""
    assert isinstance(result, Occurrence), f"Expected Occurrence, got {result!r}"
    return result.date


__all__ = ["d", "occurrence_date"]
