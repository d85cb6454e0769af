"""Shared fixtures for recurrence engine tests."""

from collections.abc import Iterator

import pytest

from anchor_recurrence.utils import dt_utils


@pytest.fixture(autouse=True)
def restore_default_timezone() -> Iterator[None]:
    """Reset the configured "today" timezone after each test."""
    original = dt_utils.get_default_timezone()
    yield
    dt_utils.set_default_timezone(original)
